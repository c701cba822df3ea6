"""Pytest configuration and fixtures."""

import pytest
from crumbjar.cookies import CookieJar, uninstall
from crumbjar.events import Diagnostics
from crumbjar.models import Response


@pytest.fixture
def diagnostics():
    """A diagnostics channel that records every event it sees."""
    channel = Diagnostics()
    channel.events = []
    channel.subscribe(channel.events.append)
    return channel


@pytest.fixture
def jar(diagnostics):
    """An empty cookie jar wired to the recording diagnostics channel."""
    return CookieJar(diagnostics=diagnostics)


@pytest.fixture(autouse=True)
def no_default_jar():
    """Keep the process-wide default jar from leaking between tests."""
    uninstall()
    yield
    uninstall()


@pytest.fixture
def sample_response():
    """Create a sample Response carrying two cookies."""
    return Response(
        status_code=200,
        reason="OK",
        headers=[
            ("Content-Type", "text/html; charset=utf-8"),
            ("Set-Cookie", "session=abc123; Path=/"),
            ("Set-Cookie", "theme=dark; Path=/prefs"),
        ],
        body=b"<html></html>",
    )


@pytest.fixture
def mock_transport(mocker, sample_response):
    """Create a mock transport that always returns sample_response."""
    transport = mocker.MagicMock()
    transport.request.return_value = sample_response
    return transport
