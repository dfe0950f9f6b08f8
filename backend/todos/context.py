"""Service Context — explicitly constructed dependencies handed to request handlers.

Invariants:
    - Built once per application (lifespan) and stored on app.state
    - Handlers reach settings and stores only through get_context()
    - close() releases the Redis pool exactly once, on shutdown
"""

from dataclasses import dataclass

from fastapi import Request

from todos.config import Settings
from todos.infrastructure.redis_store import RedisManager, RedisTypedStore
from todos.schemas.todo import Todo


@dataclass
class ServiceContext:
    settings: Settings
    redis: RedisManager
    todos: RedisTypedStore[Todo]

    @classmethod
    def from_settings(cls, settings: Settings) -> "ServiceContext":
        redis = RedisManager(
            settings.redis_host,
            port=settings.redis_port,
            db=settings.redis_db,
            password=settings.redis_password,
            max_connections=settings.redis_max_connections,
            pool_timeout=settings.redis_pool_timeout_seconds,
            socket_timeout=settings.redis_socket_timeout_seconds,
        )
        return cls.with_manager(settings, redis)

    @classmethod
    def with_manager(cls, settings: Settings, redis: RedisManager) -> "ServiceContext":
        todos = RedisTypedStore(redis, Todo, key_prefix=settings.redis_key_prefix)
        return cls(settings=settings, redis=redis, todos=todos)

    async def close(self) -> None:
        await self.redis.close()


def get_context(request: Request) -> ServiceContext:
    """FastAPI dependency for the application's ServiceContext."""
    context = getattr(request.app.state, "context", None)
    if context is None:
        raise RuntimeError("Service context not initialized")
    return context
