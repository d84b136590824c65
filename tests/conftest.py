"""Pytest fixtures for agent relay tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from app.core.errors import Success


@pytest.fixture
def mock_gemini_text():
    """Mock Gemini generated text."""
    return "Paris is the capital of France."


@pytest.fixture
def mock_llm_service(mock_gemini_text):
    """Mock LLM service to avoid real API calls."""
    mock = MagicMock()
    mock.client = MagicMock()
    mock.is_configured = True
    mock.generate = AsyncMock(return_value=Success(text=mock_gemini_text))
    return mock


@pytest.fixture
def mock_store_service():
    """Mock store service for testing without a live MongoDB instance."""
    mock = MagicMock()
    mock.is_connected = False
    mock.connect = MagicMock()
    mock.close = MagicMock()
    return mock


@pytest.fixture
def relay(mock_llm_service, mock_store_service):
    """Relay wired to mocked services."""
    from app.core.relay import AIRelay

    return AIRelay(llm=mock_llm_service, store=mock_store_service)


@pytest.fixture
async def client(relay):
    """Async HTTP client for testing FastAPI endpoints."""
    from app.api.routes import get_relay
    from app.main import app

    app.dependency_overrides[get_relay] = lambda: relay
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
