class CrumbjarError(Exception):
    """Base error for crumbjar."""


class MalformedCookieError(CrumbjarError, ValueError):
    """Raised when a Set-Cookie value cannot be parsed."""

    def __init__(self, message: str, raw: str | None = None) -> None:
        super().__init__(message)
        self.raw = raw


class InvalidArgumentError(CrumbjarError, ValueError):
    """Raised when a required argument is missing or has the wrong type."""


# Name used by callers that think in terms of the offending header.
MalformedCookieHeader = MalformedCookieError
