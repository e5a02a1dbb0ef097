"""
Test fixtures and configuration.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from notaire.config.settings import Settings
from notaire.di import Container
from notaire.main import create_app
from notaire.presentation.api.dependencies import set_container
from tests.helpers.sign_message import TEST_JWT_SECRET


def build_settings(**overrides) -> Settings:
    """Settings for tests, independent of YAML files and .env."""
    values = {
        "ENV": "test",
        "LOG_LEVEL": "WARNING",
        "JSON_LOGS": False,
        "REQUIRE_AUTH": False,
        "HISTORY_BACKEND": "memory",
        "JWKS_URL": None,
        "JWT_SECRET_KEY": None,
        "FRONTEND_URL": None,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    """Default test settings (auth disabled, in-memory history)."""
    return build_settings()


@pytest.fixture
def auth_settings() -> Settings:
    """Test settings with bearer authentication on a shared secret."""
    return build_settings(REQUIRE_AUTH=True, JWT_SECRET_KEY=TEST_JWT_SECRET)


@pytest.fixture
def container(settings: Settings) -> Container:
    return Container(settings)


@pytest.fixture(autouse=True)
def reset_container():
    """Never leak the global container between tests."""
    yield
    set_container(None)


async def _client_for(app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def client(settings: Settings) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client against an app with authentication disabled."""
    app = create_app(settings)
    async for ac in _client_for(app):
        yield ac


@pytest_asyncio.fixture
async def auth_client(auth_settings: Settings) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client against an app that requires bearer tokens."""
    app = create_app(auth_settings)
    async for ac in _client_for(app):
        yield ac
