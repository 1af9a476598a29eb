"""Shared fixtures: isolated config directory and an ASGI test client."""

import os
import tempfile

# Keep the import-time ConfigManager away from the real home directory
os.environ.setdefault("DEVTOOLS_CONFIG_DIR", tempfile.mkdtemp(prefix="devtools-test-"))

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport

from services.config_manager import ConfigManager


@pytest.fixture(autouse=True)
def config_dir(tmp_path, monkeypatch):
    """Fresh config directory and singleton for every test."""
    monkeypatch.setenv("DEVTOOLS_CONFIG_DIR", str(tmp_path))
    ConfigManager.reset_instance()
    yield tmp_path
    ConfigManager.reset_instance()


@pytest_asyncio.fixture
async def client():
    """HTTP client for testing."""
    from main import app

    transport = ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
