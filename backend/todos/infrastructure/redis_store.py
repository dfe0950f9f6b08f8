"""Redis Store — pooled connection manager and a typed, id-keyed entity store.

Invariants:
    - Every RedisError raised during a store operation is mapped to StoreUnavailableError
    - Pool exhaustion waits up to pool_timeout, then fails as StoreUnavailableError
    - Entity ids come from INCR on seq:<Model>; the counter is never decremented
    - store/delete keep urn:<model>:<id> and ids:<Model> in step (MULTI/EXEC pipeline)
    - No retries at this layer

Design Decisions:
    - Key layout urn:todo:<id> / ids:Todo / seq:Todo matches data written by the
      previous service; its PascalCase documents are read through the Todo
      field aliases and rewritten lowercase on the next store
    - get_all is an async generator over SSCAN + MGET batches: one pass, bounded memory
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncIterator, Generic, TypeVar

from pydantic import BaseModel
from redis.asyncio import BlockingConnectionPool, Redis
from redis.exceptions import (
    ConnectionError as RedisConnectionError,
    RedisError,
    TimeoutError as RedisTimeoutError,
)

from todos.core.domain_types import TodoId, is_assigned
from todos.core.errors import StoreUnavailableError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class RedisManager:
    """Owns the Redis connection pool; maps client failures to StoreUnavailableError."""

    def __init__(
        self,
        host: str,
        port: int = 6379,
        db: int = 0,
        password: str | None = None,
        max_connections: int = 50,
        pool_timeout: float = 5.0,
        socket_timeout: float = 5.0,
    ):
        self.pool = BlockingConnectionPool(
            host=host,
            port=port,
            db=db,
            password=password,
            max_connections=max_connections,
            timeout=pool_timeout,
            socket_timeout=socket_timeout,
            socket_connect_timeout=socket_timeout,
            decode_responses=True,
        )
        self.client = Redis(connection_pool=self.pool)

    @asynccontextmanager
    async def connection(self, operation: str) -> AsyncGenerator[Redis, None]:
        """Provide the pooled client; Redis failures become StoreUnavailableError."""
        try:
            yield self.client
        except RedisTimeoutError as e:
            logger.error(f"Redis timeout: {e}", extra={"operation": operation})
            raise StoreUnavailableError("Operation timed out", operation) from e
        except RedisConnectionError as e:
            logger.error(f"Redis connection error: {e}", extra={"operation": operation})
            raise StoreUnavailableError("Connection unavailable", operation) from e
        except RedisError as e:
            logger.error(f"Redis error: {e}", extra={"operation": operation})
            raise StoreUnavailableError("Store operation failed", operation) from e

    async def health_check(self) -> bool:
        """Check Redis connectivity (for readiness probes)."""
        try:
            async with self.connection("ping") as redis:
                await redis.ping()
            return True
        except StoreUnavailableError as e:
            logger.error(f"Redis health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.client.aclose()
        await self.pool.disconnect()


class RedisTypedStore(Generic[M]):
    """Id-keyed JSON documents of one pydantic model, plus an id set and a sequence."""

    def __init__(
        self,
        manager: RedisManager,
        model: type[M],
        key_prefix: str = "",
        batch_size: int = 100,
    ):
        name = model.__name__
        self._manager = manager
        self._model = model
        self._batch_size = batch_size
        self._urn_prefix = f"{key_prefix}urn:{name.lower()}:"
        self.ids_key = f"{key_prefix}ids:{name}"
        self.sequence_key = f"{key_prefix}seq:{name}"

    def urn_key(self, entity_id: int) -> str:
        return f"{self._urn_prefix}{entity_id}"

    async def get_by_id(self, entity_id: TodoId) -> M | None:
        async with self._manager.connection("get_by_id") as redis:
            raw = await redis.get(self.urn_key(entity_id))
        if raw is None:
            return None
        return self._model.model_validate_json(raw)

    async def get_all(self) -> AsyncIterator[M]:
        """Yield every stored entity once. Order follows SSCAN, i.e. unspecified."""
        seen: set[str] = set()
        batch: list[str] = []
        async with self._manager.connection("get_all") as redis:
            async for member in redis.sscan_iter(self.ids_key, count=self._batch_size):
                # SSCAN may return a member more than once
                if member in seen:
                    continue
                seen.add(member)
                batch.append(member)
                if len(batch) >= self._batch_size:
                    for entity in await self._fetch(redis, batch):
                        yield entity
                    batch = []
            if batch:
                for entity in await self._fetch(redis, batch):
                    yield entity

    async def _fetch(self, redis: Redis, ids: list[str]) -> list[M]:
        raws = await redis.mget([self.urn_key(i) for i in ids])
        # A document deleted between SSCAN and MGET comes back as None
        return [self._model.model_validate_json(raw) for raw in raws if raw is not None]

    async def get_next_sequence(self) -> int:
        async with self._manager.connection("get_next_sequence") as redis:
            return int(await redis.incr(self.sequence_key))

    async def store(self, entity: M) -> None:
        """Upsert: overwrite the whole document for entity.id."""
        entity_id = entity.id
        if not is_assigned(entity_id):
            raise ValueError(f"Cannot store {self._model.__name__} without an id")
        async with self._manager.connection("store") as redis:
            async with redis.pipeline(transaction=True) as pipe:
                pipe.set(self.urn_key(entity_id), entity.model_dump_json())
                pipe.sadd(self.ids_key, entity_id)
                await pipe.execute()

    async def delete_by_id(self, entity_id: TodoId) -> None:
        async with self._manager.connection("delete_by_id") as redis:
            async with redis.pipeline(transaction=True) as pipe:
                pipe.delete(self.urn_key(entity_id))
                pipe.srem(self.ids_key, entity_id)
                await pipe.execute()
