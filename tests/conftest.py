"""Pytest configuration and shared fixtures."""

from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest

from leaderbird.client.auth import Credentials
from leaderbird.client.rest import LeaderbirdClient
from leaderbird.utils.config import Config

PUBLIC_KEY = "pk_test_4f1c"
PRIVATE_KEY = "sk_test_9a7e"
BASE_URL = "https://api.example.test"


def make_response(
    status: int = 200,
    body: str | bytes = "{}",
    headers=None,
    charset: str | None = None,
):
    """Build a stand-in for an aiohttp response."""
    response = MagicMock()
    response.status = status
    response.charset = charset
    response.read = AsyncMock(
        return_value=body if isinstance(body, bytes) else body.encode("utf-8")
    )
    response.headers = headers or {"Content-Type": "application/json"}
    return response


def make_session(response=None, error: Exception | None = None) -> MagicMock:
    """Build a stand-in for aiohttp.ClientSession.

    ``session.request(...)`` is used as an async context manager that yields
    ``response``, or raises ``error`` when it is given.
    """
    session = MagicMock()
    session.closed = False
    session.close = AsyncMock()
    if error is not None:
        session.request.side_effect = error
    else:
        session.request.return_value.__aenter__.return_value = (
            response if response is not None else make_response()
        )
    return session


@pytest.fixture
def credentials() -> Credentials:
    """Test key pair."""
    return Credentials(public_key=PUBLIC_KEY, private_key=PRIVATE_KEY)


@pytest.fixture
def global_handler() -> MagicMock:
    return MagicMock(name="global_error_handler")


@pytest.fixture
def fatal_handler() -> MagicMock:
    return MagicMock(name="fatal_error_handler")


@pytest.fixture
def client(global_handler, fatal_handler) -> LeaderbirdClient:
    """Client wired to a fake session answering 200 {}."""
    client = LeaderbirdClient(
        PUBLIC_KEY,
        PRIVATE_KEY,
        base_url=BASE_URL,
        global_error_handler=global_handler,
        fatal_error_handler=fatal_handler,
    )
    client.session = make_session()
    return client


@pytest.fixture
def skip_if_no_credentials():
    """Skip test if API credentials are not available."""
    if not Config.validate():
        pytest.skip("API credentials not available")


@pytest.fixture
async def live_client(skip_if_no_credentials) -> AsyncGenerator[LeaderbirdClient, None]:
    """Create a client against the configured API."""
    async with LeaderbirdClient.from_env() as client:
        yield client


def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "live: mark test as requiring a live API")
    config.addinivalue_line(
        "markers", "credentials: mark test as requiring API credentials"
    )


def pytest_collection_modifyitems(config, items):
    """Mark everything in the live integration module."""
    for item in items:
        if "integration_live" in item.nodeid:
            item.add_marker(pytest.mark.live)
            item.add_marker(pytest.mark.credentials)
