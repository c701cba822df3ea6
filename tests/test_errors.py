"""Tests for crumbjar.errors module."""

import pytest
from crumbjar.errors import (
    CrumbjarError,
    InvalidArgumentError,
    MalformedCookieError,
    MalformedCookieHeader,
)


class TestErrorHierarchy:
    """Tests for error class hierarchy."""

    def test_crumbjar_error_is_exception(self):
        """Test CrumbjarError inherits from Exception."""
        assert issubclass(CrumbjarError, Exception)

    def test_malformed_cookie_error(self):
        """Test MalformedCookieError is a CrumbjarError and a ValueError."""
        assert issubclass(MalformedCookieError, CrumbjarError)
        assert issubclass(MalformedCookieError, ValueError)

    def test_invalid_argument_error(self):
        """Test InvalidArgumentError is a CrumbjarError and a ValueError."""
        assert issubclass(InvalidArgumentError, CrumbjarError)
        assert issubclass(InvalidArgumentError, ValueError)

    def test_header_alias(self):
        """Test MalformedCookieHeader names the same class."""
        assert MalformedCookieHeader is MalformedCookieError


class TestErrorInstantiation:
    """Tests for error instantiation."""

    def test_malformed_cookie_error_with_raw(self):
        """Test MalformedCookieError keeps message and raw value."""
        with pytest.raises(MalformedCookieError, match="bad cookie") as excinfo:
            raise MalformedCookieError("bad cookie", "a=b")
        assert excinfo.value.raw == "a=b"

    def test_malformed_cookie_error_without_raw(self):
        """Test raw defaults to None."""
        assert MalformedCookieError("bad").raw is None

    def test_catch_as_base(self):
        """Test specific errors can be caught via the base class."""
        with pytest.raises(CrumbjarError):
            raise InvalidArgumentError("missing uri")
