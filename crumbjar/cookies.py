from __future__ import annotations

import logging
import threading

from yarl import URL

from .errors import InvalidArgumentError, MalformedCookieError
from .events import COOKIE_REMOVED, COOKIE_STORED, MALFORMED_COOKIE, CookieEvent, Diagnostics
from .headers import COOKIE, SET_COOKIE, HeadersLike, header_values
from .models import Cookie
from .parser import parse_set_cookie
from .store import CookieStore
from .utils import normalize_host, parse_uri

logger = logging.getLogger("crumbjar")


class CookieJar:
    """
    Host-scoped, in-memory cookie jar.

    The jar plugs into an HTTP client through two hooks: :meth:`get` is
    called before a request is sent and returns the Cookie header to add,
    :meth:`put` is called with the response headers and stores every
    Set-Cookie it finds. Both are safe to call from concurrent threads.

    Args:
        diagnostics: channel that receives parse warnings and store events
            (a private one is created when omitted)
    """

    def __init__(self, diagnostics: Diagnostics | None = None) -> None:
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self._stores: dict[str, CookieStore] = {}
        self._lock = threading.Lock()

    def _store(self, host: str, create: bool = False) -> CookieStore | None:
        with self._lock:
            store = self._stores.get(host)
            if store is None and create:
                store = self._stores[host] = CookieStore(host)
            return store

    def get(
        self, uri: str | URL | None, outgoing_headers: HeadersLike | None = None
    ) -> dict[str, list[str]]:
        """
        Return the headers to add to a request for ``uri``: either ``{}`` or
        ``{"Cookie": ["name=value;..."]}`` built from the cookies whose path
        matches the request path.
        """
        if uri is None:
            return {}
        try:
            _, host, path = parse_uri(uri)
        except InvalidArgumentError:
            return {}
        store = self._store(host)
        if store is None:
            return {}
        cookies = store.matching(path)
        if not cookies:
            return {}
        return {COOKIE: [";".join(c.as_header() for c in cookies)]}

    def put(self, uri: str | URL | None, incoming_headers: HeadersLike | None) -> list[Cookie]:
        """
        Store the cookies carried by the Set-Cookie headers of a response
        from ``uri``. Cookies with ``Max-Age=0`` are removed instead.

        A malformed Set-Cookie value is reported and skipped; the rest of the
        headers are still processed. Returns the cookies that were stored.
        """
        if uri is None:
            raise InvalidArgumentError("put() requires a URI")
        _, host, _ = parse_uri(uri)
        stored: list[Cookie] = []
        for raw in header_values(incoming_headers, SET_COOKIE):
            try:
                cookie = parse_set_cookie(raw, self.diagnostics)
            except (MalformedCookieError, InvalidArgumentError) as exc:
                self.diagnostics.emit(
                    CookieEvent(MALFORMED_COOKIE, raw=raw, host=host, message=str(exc))
                )
                continue

            if cookie.expired:
                store = self._store(host)
                if store is not None and store.remove(cookie.name) is not None:
                    self.diagnostics.emit(
                        CookieEvent(COOKIE_REMOVED, cookie.name, host=host, message=host)
                    )
                continue

            self._store(host, create=True).upsert(cookie)  # type: ignore[union-attr]
            stored.append(cookie)
            self.diagnostics.emit(
                CookieEvent(COOKIE_STORED, cookie.name, cookie.value, raw, host, host)
            )
        return stored

    def get_cookies(self, host_or_uri: str | URL | None = None) -> tuple[Cookie, ...]:
        """
        Snapshot of the cookies for one host, or for every host when called
        without an argument. Cookies are unique per (host, name), so equally
        named cookies from different hosts are all returned.
        """
        if host_or_uri is not None:
            store = self._store(normalize_host(host_or_uri))
            return store.snapshot() if store is not None else ()
        with self._lock:
            stores = list(self._stores.values())
        return tuple(cookie for store in stores for cookie in store.snapshot())

    def hosts(self) -> list[str]:
        with self._lock:
            return [host for host, store in self._stores.items() if len(store)]

    def clear(self, host: str | URL | None = None) -> None:
        """Forget the cookies of ``host``, or of every host."""
        if host is None:
            with self._lock:
                stores = list(self._stores.values())
            for store in stores:
                store.clear()
            return
        store = self._store(normalize_host(host))
        if store is not None:
            store.clear()

    def install(self) -> CookieJar:
        """Make this jar the process-wide default. The last call wins."""
        install(self)
        return self

    def __len__(self) -> int:
        with self._lock:
            stores = list(self._stores.values())
        return sum(len(store) for store in stores)

    def __repr__(self) -> str:
        return f"<CookieJar {len(self)} cookies for {self.hosts()}>"


_default_jar: CookieJar | None = None
_default_lock = threading.Lock()


def install(jar: CookieJar) -> None:
    """Register ``jar`` as the default consulted by sessions built without one."""
    global _default_jar
    with _default_lock:
        _default_jar = jar
    logger.debug("Installed default cookie jar %r", jar)


def uninstall() -> None:
    global _default_jar
    with _default_lock:
        _default_jar = None


def default_jar() -> CookieJar | None:
    with _default_lock:
        return _default_jar
