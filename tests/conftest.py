"""Shared fixtures for tidalhifi tests."""

from collections.abc import AsyncIterator
from typing import Any

import pytest
from pytest_httpx import HTTPXMock

from tidalhifi.config.settings import TidalSettings
from tidalhifi.infrastructure.integrations.tidal_client import TidalClient

API_BASE_URL = "https://api.tidalhifi.com/v1"
LOGIN_URL = f"{API_BASE_URL}/login/username"
LOGIN_BODY = {"sessionId": "S1", "userId": 42, "countryCode": "US"}


@pytest.fixture
def auth_data() -> dict[str, Any]:
    """Valid credential mapping."""
    return {
        "username": "listener@example.com",
        "password": "hunter2",
        "token": "app-token-123",
        "quality": "LOSSLESS",
    }


@pytest.fixture
def tidal_settings() -> TidalSettings:
    """Default settings, spelled out so tests don't depend on the shared cache."""
    return TidalSettings()


@pytest.fixture
async def tidal_client(
    auth_data: dict[str, Any], tidal_settings: TidalSettings
) -> AsyncIterator[TidalClient]:
    """Client that has not logged in yet."""
    async with TidalClient(auth_data, settings=tidal_settings) as client:
        yield client


@pytest.fixture
async def logged_in_client(
    tidal_client: TidalClient, httpx_mock: HTTPXMock
) -> TidalClient:
    """Client with a session from a mocked login response."""
    httpx_mock.add_response(method="POST", url=LOGIN_URL, json=LOGIN_BODY)
    await tidal_client.login()
    return tidal_client
