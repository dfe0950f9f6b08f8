"""Boundary Protocols — contracts between the service layer and the store.

Invariants:
    - Services depend on EntityStore, never on a concrete Redis client
    - get_next_sequence is atomic across every caller sharing the backing store
    - store() overwrites wholesale; delete_by_id() is a no-op when absent

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async methods: every implementation does network IO
"""

from typing import AsyncIterator, Protocol, TypeVar

from todos.core.domain_types import TodoId

T = TypeVar("T")


class EntityStore(Protocol[T]):
    """Contract for id-keyed entity persistence — implemented by infrastructure."""
    async def get_by_id(self, entity_id: TodoId) -> T | None: ...
    def get_all(self) -> AsyncIterator[T]: ...
    async def get_next_sequence(self) -> int: ...
    async def store(self, entity: T) -> None: ...
    async def delete_by_id(self, entity_id: TodoId) -> None: ...
