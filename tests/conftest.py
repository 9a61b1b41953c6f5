"""
Doubler API - Test Configuration (conftest.py)
===============================================

What:  Shared pytest fixtures for the test suite.
How:   Each test that talks HTTP gets a fresh app built by create_app() from
       its own Settings, served through HTTPX's ASGITransport (no server).

Fixtures:
    ├── test_settings: Settings instance used to build the app
    ├── test_app: FastAPI app built from test_settings
    └── test_client: HTTPX AsyncClient bound to test_app
"""

import os

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Keep test output quiet; read when doubler.main builds its module-level app
os.environ["LOG_LEVEL"] = "WARNING"

from doubler.config import Settings  # noqa: E402
from doubler.main import create_app  # noqa: E402


@pytest.fixture
def test_settings():
    """Settings with defaults, isolated from any local .env file."""
    return Settings(_env_file=None, log_level="WARNING")


@pytest.fixture
def test_app(test_settings):
    return create_app(test_settings)


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
