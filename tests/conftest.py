"""
AlgoTest Backend - Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── test_client:        HTTPX AsyncClient bound to the FastAPI app (no server)
    ├── fault_client:       Same, but app exceptions become 500 responses
    │                       instead of being re-raised into the test
    └── unsorted_values:    The canonical [5, 3, 1, 4, 2] example input
"""

import os

# Override settings for testing BEFORE any algotest imports
os.environ["ENVIRONMENT"] = "production"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["CORS_ORIGINS"] = "*"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


@pytest.fixture
def unsorted_values():
    return [5, 3, 1, 4, 2]


@pytest_asyncio.fixture
async def test_client():
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from algotest.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def fault_client():
    """Client for asserting on 500 responses produced by the catch-all handler."""
    from algotest.main import app
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
