from __future__ import annotations

from typing import Any, Awaitable, Protocol

from .cookies import CookieJar, default_jar
from .headers import merge_cookie_header
from .models import Response


class Transport(Protocol):
    def request(
        self, method: str, url: str, headers: dict[str, str] | None = None, **kwargs: Any
    ) -> Response: ...


class AsyncTransport(Protocol):
    def request(
        self, method: str, url: str, headers: dict[str, str] | None = None, **kwargs: Any
    ) -> Awaitable[Response]: ...


def _resolve_jar(jar: CookieJar | None) -> CookieJar:
    if jar is not None:
        return jar
    installed = default_jar()
    return installed if installed is not None else CookieJar()


class Session:
    """
    Session that persists cookies per host across requests.

    Args:
        transport: client object whose ``request(method, url, headers=..., **kwargs)``
            performs the request and returns a :class:`Response`
        jar: cookie jar to use; defaults to the installed jar, else a new one
    """

    def __init__(self, transport: Transport, jar: CookieJar | None = None) -> None:
        self.transport = transport
        self.cookies = _resolve_jar(jar)

    def request(
        self, method: str, url: str, headers: dict[str, str] | None = None, **kwargs
    ) -> Response:
        hdrs = merge_cookie_header(headers, self.cookies.get(url, headers))
        resp = self.transport.request(method, url, headers=dict(hdrs), **kwargs)
        self.cookies.put(url, resp.raw_headers)
        return resp

    def get(
        self, url: str, headers: dict[str, str] | None = None, **kwargs
    ) -> Response:
        return self.request("GET", url, headers=headers, **kwargs)

    def post(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        data=None,
        **kwargs,
    ) -> Response:
        return self.request("POST", url, headers=headers, data=data, **kwargs)

    def close(self) -> None:
        close = getattr(self.transport, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> Session:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class AsyncSession:
    """
    Async session that persists cookies per host across requests. The jar
    hooks run synchronously on the event loop; neither blocks.

    Args:
        transport: client object whose ``request`` coroutine performs the request
        jar: cookie jar to use; defaults to the installed jar, else a new one
    """

    def __init__(self, transport: AsyncTransport, jar: CookieJar | None = None) -> None:
        self.transport = transport
        self.cookies = _resolve_jar(jar)

    async def request(
        self, method: str, url: str, headers: dict[str, str] | None = None, **kwargs
    ) -> Response:
        hdrs = merge_cookie_header(headers, self.cookies.get(url, headers))
        resp = await self.transport.request(method, url, headers=dict(hdrs), **kwargs)
        self.cookies.put(url, resp.raw_headers)
        return resp

    async def get(
        self, url: str, headers: dict[str, str] | None = None, **kwargs
    ) -> Response:
        return await self.request("GET", url, headers=headers, **kwargs)

    async def post(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        data=None,
        **kwargs,
    ) -> Response:
        return await self.request("POST", url, headers=headers, data=data, **kwargs)

    async def close(self) -> None:
        close = getattr(self.transport, "close", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> AsyncSession:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
