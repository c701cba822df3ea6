"""Diagnostic events emitted while parsing and storing cookies.

Every event is written to the ``crumbjar`` logger. Callers that want to react
to events programmatically (surface them in a UI, count malformed cookies,
observe store changes) subscribe a callback on a :class:`Diagnostics`
instance and receive :class:`CookieEvent` objects.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import NamedTuple

logger = logging.getLogger("crumbjar")

UNSUPPORTED_ATTRIBUTE = "unsupported-attribute"
UNKNOWN_ATTRIBUTE = "unknown-attribute"
MISSING_VALUE = "missing-value"
MALFORMED_COOKIE = "malformed-cookie"
COOKIE_STORED = "cookie-stored"
COOKIE_REMOVED = "cookie-removed"

_LEVELS = {
    UNSUPPORTED_ATTRIBUTE: logging.WARNING,
    UNKNOWN_ATTRIBUTE: logging.WARNING,
    MISSING_VALUE: logging.WARNING,
    MALFORMED_COOKIE: logging.WARNING,
    COOKIE_STORED: logging.DEBUG,
    COOKIE_REMOVED: logging.DEBUG,
}


class CookieEvent(NamedTuple):
    kind: str
    name: str | None = None
    value: str | None = None
    raw: str | None = None
    host: str | None = None
    message: str = ""


Subscriber = Callable[[CookieEvent], None]


class Diagnostics:
    """
    Fan-out channel for :class:`CookieEvent` objects.

    Subscribers are called synchronously, in subscription order, on the
    thread that emitted the event. Exceptions raised by a subscriber
    propagate to the emitter.
    """

    def __init__(self) -> None:
        self._subscribers: list[Subscriber] = []
        self._lock = threading.Lock()

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register ``callback`` and return a function that unregisters it.
        """
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            self.unsubscribe(callback)

        return unsubscribe

    def unsubscribe(self, callback: Subscriber) -> None:
        with self._lock:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

    def emit(self, event: CookieEvent) -> None:
        # Attribute values may carry secrets; only names reach the log.
        logger.log(
            _LEVELS.get(event.kind, logging.INFO),
            "%s: %s%s",
            event.kind,
            event.name or "<unnamed>",
            f" ({event.message})" if event.message else "",
        )
        with self._lock:
            subscribers = list(self._subscribers)
        for callback in subscribers:
            callback(event)

    def __len__(self) -> int:
        with self._lock:
            return len(self._subscribers)
