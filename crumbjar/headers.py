from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Union

from multidict import CIMultiDict

# Accepted header containers: name -> value, name -> [values], a multidict,
# or raw (name, value) pairs as they came off the wire.
HeaderValue = Union[str, Iterable[str]]
HeadersLike = Union[Mapping[str, HeaderValue], Iterable[tuple[str, str]]]

COOKIE = "Cookie"
SET_COOKIE = "Set-Cookie"


def _sanitize_header(name: str, value: str) -> tuple[str, str]:
    """
    Sanitize header name and value to prevent HTTP header injection (CRLF injection).
    Strips CR, LF, and null bytes from both name and value.
    """
    clean_name = name.replace("\r", "").replace("\n", "").replace("\x00", "")
    clean_value = value.replace("\r", "").replace("\n", "").replace("\x00", "")
    return clean_name, clean_value


def header_items(headers: HeadersLike | None) -> Iterator[tuple[str, str]]:
    """
    Flatten any supported header container into ``(name, value)`` pairs,
    one pair per value.
    """
    if headers is None:
        return
    items = headers.items() if isinstance(headers, Mapping) else headers
    for name, value in items:
        if value is None:
            continue
        if isinstance(value, str):
            yield name, value
        elif isinstance(value, (bytes, bytearray)):
            yield name, bytes(value).decode("latin-1")
        else:
            for item in value:
                if isinstance(item, (bytes, bytearray)):
                    item = bytes(item).decode("latin-1")
                yield name, item


def header_values(headers: HeadersLike | None, name: str) -> list[str]:
    """Return every value of header ``name``, matched case-insensitively."""
    wanted = name.lower()
    return [value for key, value in header_items(headers) if key.lower() == wanted]


def to_multidict(headers: HeadersLike | None) -> CIMultiDict[str]:
    return CIMultiDict(header_items(headers))


def merge_cookie_header(
    outgoing: HeadersLike | None,
    additions: Mapping[str, list[str]],
) -> CIMultiDict[str]:
    """
    Merge the ``Cookie`` header returned by a jar into ``outgoing``.

    A Cookie header already present in ``outgoing`` wins; the input is never
    modified.
    """
    merged = to_multidict(outgoing)
    if COOKIE in merged:
        return merged
    values = [_sanitize_header(COOKIE, v)[1] for v in additions.get(COOKIE, [])]
    values = [v for v in values if v]
    if values:
        merged[COOKIE] = ";".join(values)
    return merged
