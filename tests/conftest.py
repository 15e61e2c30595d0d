"""Shared test fixtures for the Erply client tests."""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from erply_api.erply_client import ErplyClient


@pytest.fixture
def mock_response():
    """Factory for creating mock HTTP responses.

    Usage:
        resp = mock_response(200, b'{"status": {...}}')
        resp = mock_response(502, b"Bad Gateway")
    """
    def _make(status_code=200, content=b"", headers=None):
        response = MagicMock()
        response.status_code = status_code
        response.content = content
        response.text = content.decode("utf-8", errors="replace")
        response.headers = headers or {}
        return response
    return _make


@pytest.fixture
def mock_client():
    """Create an ErplyClient with mocked _request method."""
    with patch.dict("os.environ", {
        "ERPLY_CLIENT_CODE": "123456",
        "ERPLY_SESSION_KEY": "test_session",
    }):
        client = ErplyClient.from_env()
        client._request = AsyncMock()
        return client


@pytest.fixture
def api_client():
    """Create an ErplyClient whose send methods are mocked out."""
    client = ErplyClient(client_code="123456", session_key="test_session")
    client.send_request = AsyncMock()
    client.send_request_bulk = AsyncMock()
    return client


_RESOURCE_MODULES = [
    "erply_api.resources.auth",
    "erply_api.resources.suppliers",
    "erply_api.resources.prices",
]


@pytest.fixture
def mock_erply_class():
    """Patch ErplyClient in all resource modules, yield (mock_class, mock_instance)."""
    mock_instance = MagicMock()
    mock_instance.client_code = "123456"
    mock_instance.base_url = "https://123456.erply.com/api/"
    mock_class = MagicMock()
    mock_class.from_env.return_value = mock_instance

    patchers = [patch(f"{mod}.ErplyClient", mock_class) for mod in _RESOURCE_MODULES]
    for p in patchers:
        p.start()
    yield mock_class, mock_instance
    for p in patchers:
        p.stop()
