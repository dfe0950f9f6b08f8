"""Root conftest — shared test configuration and fixtures.

Invariants:
    - Every test gets a fresh fakeredis server (no real Redis needed)
    - get_context dependency overridden with a ServiceContext over that server
    - Keys are namespaced with a "test" prefix
"""

import os

# Keep the module-level app from mounting static files or reaching a real host
os.environ.setdefault("REDIS_HOST", "localhost")
os.environ.setdefault("STATIC_DIR", "__no_static_dir__")
os.environ.setdefault("LOG_FORMAT", "text")

import fakeredis
import pytest
from httpx import ASGITransport, AsyncClient

from todos.config import Settings
from todos.context import ServiceContext, get_context
from todos.infrastructure.redis_store import RedisManager
from todos.main import app


@pytest.fixture
def fake_server():
    return fakeredis.FakeServer()


@pytest.fixture
async def redis_manager(fake_server):
    """RedisManager whose client talks to the in-process fake server."""
    manager = RedisManager.__new__(RedisManager)
    manager.client = fakeredis.FakeAsyncRedis(
        server=fake_server, decode_responses=True,
    )
    manager.pool = manager.client.connection_pool
    yield manager
    await manager.client.aclose()


@pytest.fixture
def test_settings():
    return Settings(
        redis_key_prefix="test",
        static_dir="__no_static_dir__",
        log_format="text",
    )


@pytest.fixture
def context(test_settings, redis_manager):
    return ServiceContext.with_manager(test_settings, redis_manager)


@pytest.fixture
def store(context):
    return context.todos


@pytest.fixture
async def client(context):
    """FastAPI test client with the service context overridden."""
    app.dependency_overrides[get_context] = lambda: context

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
