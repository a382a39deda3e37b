"""
Pytest configuration and fixtures for the preview service tests.
"""

from __future__ import annotations

import httpx
import pytest_asyncio

from backend.main import app


@pytest_asyncio.fixture
async def async_client():
    """HTTP client bound to the app, no network."""
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
