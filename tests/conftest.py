"""
Customer Portal - Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── settings:       Settings with a known environment label, no static dir
    ├── static_dir:     Temporary public/ directory with a couple of files
    ├── test_client:    HTTPX AsyncClient bound to a fresh app
    └── static_client:  HTTPX AsyncClient for an app serving static_dir
"""

import os

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Set BEFORE any app imports: customer_portal.main builds a module-level app.
os.environ["APP_ENV"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.pop("NODE_ENV", None)
os.environ.pop("PORT", None)

from customer_portal.config import Settings  # noqa: E402
from customer_portal.main import create_app  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a static directory that does not exist."""
    return Settings(static_dir=str(tmp_path / "no-such-dir"))


@pytest.fixture
def static_dir(tmp_path):
    """
    A populated static asset directory.

    Contains an index.html (to prove GET / still hits the route) and a
    plain-text file reachable only through the static fallback.
    """
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_text("<html>static index</html>")
    (public / "robots.txt").write_text("User-agent: *\nDisallow:\n")
    return public


async def _client_for(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def test_client(settings):
    """
    HTTPX AsyncClient talking to a freshly created app.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/api/health")
            assert response.status_code == 200
    """
    async for client in _client_for(create_app(settings)):
        yield client


@pytest_asyncio.fixture
async def static_client(static_dir):
    """HTTPX AsyncClient for an app whose static fallback serves static_dir."""
    app = create_app(Settings(static_dir=str(static_dir)))
    async for client in _client_for(app):
        yield client
