"""Set-Cookie parsing (RFC 2109 style attribute-value pairs)."""

from __future__ import annotations

import re
from typing import Any

from .errors import InvalidArgumentError, MalformedCookieError
from .events import (
    MISSING_VALUE,
    UNKNOWN_ATTRIBUTE,
    UNSUPPORTED_ATTRIBUTE,
    CookieEvent,
    Diagnostics,
)
from .models import SESSION_MAX_AGE, Cookie

# Recognized but never acted upon.
UNSUPPORTED_ATTRIBUTES = frozenset({"expires", "discard", "port", "commenturl"})

_INTEGER = re.compile(r"-?[0-9]+")


def split_pairs(raw: str) -> list[tuple[str, str | None]]:
    """
    Split ``raw`` into ``(name, value)`` pairs.

    Pairs are separated by ``;`` and split on the first ``=``, both only when
    they occur outside a quoted string. Inside quotes a backslash escapes the
    next character. Pairs without ``=`` get a value of ``None``; empty pairs
    are dropped.
    """
    pairs: list[tuple[str, str | None]] = []
    in_quotes = False
    escaped = False
    start = 0
    equals = -1

    def flush(end: int) -> None:
        if equals == -1:
            name, value = raw[start:end].strip(), None
        else:
            name, value = raw[start:equals].strip(), raw[equals + 1 : end].strip()
        if name or value:
            pairs.append((name, _unquote(value)))

    for i, ch in enumerate(raw):
        if escaped:
            escaped = False
        elif ch == "\\" and in_quotes:
            escaped = True
        elif ch == '"':
            in_quotes = not in_quotes
        elif ch == "=" and not in_quotes and equals == -1:
            equals = i
        elif ch == ";" and not in_quotes:
            flush(i)
            start = i + 1
            equals = -1
    flush(len(raw))
    return pairs


def _unquote(value: str | None) -> str | None:
    if value is not None and len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


def _parse_int(attr: str, value: str | None, raw: str) -> int:
    if value is None or not _INTEGER.fullmatch(value):
        raise MalformedCookieError(f"{attr} must be an integer, got {value!r}", raw)
    return int(value)


def parse_set_cookie(raw: Any, diagnostics: Diagnostics | None = None) -> Cookie:
    """
    Parse a single Set-Cookie header value into a :class:`Cookie`.

    The first pair is the cookie's own ``name=value``. The remaining pairs are
    attributes matched case-insensitively; unsupported and unknown attributes
    are reported through ``diagnostics`` (or the ``crumbjar`` logger) and
    otherwise ignored.

    Raises:
        MalformedCookieError: if ``raw`` is empty, the cookie name is empty or
            starts with ``$``, or Max-Age/Version are not valid integers.
        InvalidArgumentError: if ``raw`` is not a string.
    """
    if raw is None:
        raise MalformedCookieError("Cannot parse a null value")
    if not isinstance(raw, str):
        raise InvalidArgumentError(
            f"Set-Cookie value must be str, got {type(raw).__name__}"
        )
    if not raw.strip():
        raise MalformedCookieError("Cannot parse an empty value", raw)

    if diagnostics is None:
        diagnostics = Diagnostics()
    pairs = split_pairs(raw)
    if not pairs:
        raise MalformedCookieError("Cookie name must not be empty", raw)
    name, value = pairs[0]
    if not name:
        raise MalformedCookieError("Cookie name must not be empty", raw)
    if name.startswith("$"):
        raise MalformedCookieError("The first av-pair cannot begin with a $", raw)

    attrs: dict[str, Any] = {}
    for attr, attr_value in pairs[1:]:
        lowered = attr.lower()
        if lowered == "secure":
            attrs["secure"] = True
        elif lowered == "max-age":
            age = _parse_int("Max-Age", attr_value, raw)
            if age < SESSION_MAX_AGE:
                raise MalformedCookieError("Max-Age must be non-negative", raw)
            attrs["max_age"] = age
        elif lowered == "version":
            attrs["version"] = _parse_int("Version", attr_value, raw)
        elif lowered in ("comment", "domain", "path"):
            if not attr_value:
                diagnostics.emit(
                    CookieEvent(MISSING_VALUE, attr, raw=raw, message=f"cookie {name}")
                )
                continue
            if lowered == "domain" and not attr_value.startswith("."):
                attr_value = "." + attr_value
            attrs[lowered] = attr_value
        elif lowered in UNSUPPORTED_ATTRIBUTES:
            diagnostics.emit(
                CookieEvent(
                    UNSUPPORTED_ATTRIBUTE,
                    attr,
                    attr_value,
                    raw,
                    message="not yet handled",
                )
            )
        else:
            diagnostics.emit(
                CookieEvent(UNKNOWN_ATTRIBUTE, attr, attr_value, raw, message="skipping")
            )

    return Cookie(name=name, value=value, **attrs)
