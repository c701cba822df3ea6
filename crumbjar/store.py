from __future__ import annotations

import threading

from .models import Cookie
from .utils import path_matches


class CookieStore:
    """
    Cookies for a single host, keyed by lower-cased cookie name.

    All access goes through a per-store lock; readers get tuples copied under
    that lock, so they can be iterated while other threads keep writing.
    """

    def __init__(self, host: str) -> None:
        self.host = host
        self._cookies: dict[str, Cookie] = {}
        self._lock = threading.Lock()

    def upsert(self, cookie: Cookie) -> Cookie | None:
        """
        Store ``cookie``, replacing any cookie with the same name.

        Returns the replaced cookie, if there was one.
        """
        with self._lock:
            previous = self._cookies.pop(cookie.key, None)
            self._cookies[cookie.key] = cookie
        return previous

    def remove(self, name: str) -> Cookie | None:
        with self._lock:
            return self._cookies.pop(name.lower(), None)

    def get(self, name: str) -> Cookie | None:
        with self._lock:
            return self._cookies.get(name.lower())

    def snapshot(self) -> tuple[Cookie, ...]:
        with self._lock:
            return tuple(self._cookies.values())

    def matching(self, path: str | None) -> tuple[Cookie, ...]:
        """Cookies whose path matches ``path``, in insertion order."""
        with self._lock:
            return tuple(
                c for c in self._cookies.values() if path_matches(path, c.path)
            )

    def clear(self) -> None:
        with self._lock:
            self._cookies.clear()

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        with self._lock:
            return name.lower() in self._cookies

    def __len__(self) -> int:
        with self._lock:
            return len(self._cookies)

    def __repr__(self) -> str:
        return f"<CookieStore {self.host} {sorted(self._cookies)}>"
