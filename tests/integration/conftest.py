"""Fixtures for API tests: the FastAPI app bound to the test database."""

from typing import AsyncGenerator

import httpx
import pytest_asyncio

from apps.api.deps import get_session_factory
from apps.api.main import app


@pytest_asyncio.fixture
async def api_client(test_session_factory) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Create HTTP client with the test session factory injected."""
    app.dependency_overrides[get_session_factory] = lambda: test_session_factory

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    # Cleanup
    app.dependency_overrides.clear()
