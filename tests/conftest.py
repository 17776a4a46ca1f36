"""Pytest fixtures and shared test configuration.

Fixtures:
    - proxy_config: Fully specified ProxyConfig pointing at a fake upstream
    - storage: Empty in-memory key-value store
    - store: SessionStore backed by that storage
    - async_client: HTTPX client for API testing
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from omars_cousins.api import app
from omars_cousins.proxy.config import DEFAULT_PROMPT_TEMPLATE, ProxyConfig
from omars_cousins.sessions.storage import MemoryStorage
from omars_cousins.sessions.store import SessionStore


@pytest.fixture
def proxy_config() -> ProxyConfig:
    """Return a config that does not depend on the environment."""
    return ProxyConfig(
        api_key="sk-test-key",
        base_url="https://llm.test/v1",
        model_name="gpt-3.5-turbo",
        max_tokens=200,
        prompt_template=DEFAULT_PROMPT_TEMPLATE,
    )


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def store(storage: MemoryStorage) -> SessionStore:
    """Return an initialized store with one default session."""
    session_store = SessionStore(storage)
    session_store.initialize()
    return session_store


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
