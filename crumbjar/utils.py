from __future__ import annotations

from yarl import URL

from .errors import InvalidArgumentError


def parse_uri(uri: str | URL) -> tuple[URL, str, str]:
    """
    Normalize ``uri`` and return ``(url, host, path)``.

    Hosts are lower-cased; an empty path becomes ``/``.
    """
    url = uri if isinstance(uri, URL) else URL(str(uri))
    if not url.host:
        raise InvalidArgumentError(f"URI has no host: {uri!r}")
    return url, url.host.lower(), url.path or "/"


def normalize_host(host_or_uri: str | URL) -> str:
    if isinstance(host_or_uri, URL) or "://" in host_or_uri:
        return parse_uri(host_or_uri)[1]
    return host_or_uri.strip().lower()


def path_matches(request_path: str | None, cookie_path: str | None) -> bool:
    """
    For two paths p1 and p2, p1 path-matches p2 if p2 is a prefix of p1
    (including the case where they are equal). Thus ``/tec/waldo``
    path-matches ``/tec``. Two missing paths match; a single missing one
    does not.
    """
    if request_path is None or cookie_path is None:
        return request_path is None and cookie_path is None
    return request_path.startswith(cookie_path)
