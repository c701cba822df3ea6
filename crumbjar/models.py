from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from multidict import CIMultiDict

# Max-Age sentinel for cookies without an explicit expiration.
SESSION_MAX_AGE = -1


@dataclass(frozen=True)
class Cookie:
    """
    A single cookie as received in a Set-Cookie header.

    Instances are immutable, so the cookies handed out by a jar can be kept
    and passed around without affecting what the jar sends later.
    """

    name: str
    value: str | None = None
    comment: str | None = None
    domain: str | None = None
    max_age: int = SESSION_MAX_AGE
    path: str | None = None
    secure: bool = False
    version: int = 0

    @property
    def key(self) -> str:
        """Store key: cookie names are compared case-insensitively."""
        return self.name.lower()

    @property
    def is_session(self) -> bool:
        return self.max_age == SESSION_MAX_AGE

    @property
    def expired(self) -> bool:
        return self.max_age == 0

    def as_header(self) -> str:
        return f"{self.name}={self.value or ''}"

    def __str__(self) -> str:
        return (
            f"Cookie [{self.name}={self.value}, Comment={self.comment}, "
            f"Domain={self.domain}, Max-Age={self.max_age}, Path={self.path}, "
            f"Secure={self.secure}, Version={self.version}]"
        )


class Response:
    """
    Lightweight HTTP response handed back by a session transport. Header
    order and repeated headers (Set-Cookie) are preserved.
    """

    def __init__(
        self,
        status_code: int,
        reason: str,
        headers: Iterable[tuple[str, str]],
        body: bytes = b"",
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        self.raw_headers: list[tuple[str, str]] = list(headers)
        self._body = body

    @property
    def headers(self) -> CIMultiDict[str]:
        return CIMultiDict(self.raw_headers)

    @property
    def content(self) -> bytes:
        return self._body

    @property
    def text(self) -> str:
        encoding = "utf-8"
        ctype = self.headers.get("content-type")
        if ctype and "charset=" in ctype:
            encoding = ctype.split("charset=")[-1].split(";")[0].strip() or encoding
        try:
            return self._body.decode(encoding, errors="replace")
        except LookupError:
            return self._body.decode("utf-8", errors="replace")

    def __repr__(self) -> str:
        return f"<Response [{self.status_code}] {len(self._body)} bytes>"
