from crumbjar.cookies import CookieJar, default_jar, install, uninstall
from crumbjar.errors import (
    CrumbjarError,
    InvalidArgumentError,
    MalformedCookieError,
    MalformedCookieHeader,
)
from crumbjar.events import CookieEvent, Diagnostics
from crumbjar.models import Cookie, Response
from crumbjar.parser import parse_set_cookie
from crumbjar.session import AsyncSession, Session
from crumbjar.store import CookieStore
from crumbjar.utils import path_matches

__all__ = [
    "Cookie",
    "CookieJar",
    "CookieStore",
    "CookieEvent",
    "Diagnostics",
    "Response",
    "Session",
    "AsyncSession",
    "CrumbjarError",
    "MalformedCookieError",
    "MalformedCookieHeader",
    "InvalidArgumentError",
    "parse_set_cookie",
    "path_matches",
    "install",
    "uninstall",
    "default_jar",
]
