"""Todo Service — read, create-or-update, update, delete over an EntityStore[Todo].

Invariants:
    - read with id 0 returns every stored Todo; with a non-zero id, that Todo or 404
    - create_or_update assigns get_next_sequence() when id is 0, then upserts
    - update == create_or_update (PUT and POST are both full upserts)
    - delete is idempotent; an absent id is not an error
    - Store errors propagate unchanged
"""

import logging
from typing import AsyncIterator

from todos.core.domain_types import is_assigned
from todos.core.errors import BadRequestError, ErrorContext, ResourceNotFoundError
from todos.core.repository_protocols import EntityStore
from todos.schemas.todo import Todo, TodoRequest

logger = logging.getLogger(__name__)


class TodoService:
    def __init__(self, store: EntityStore[Todo]):
        self._store = store

    async def read(self, request: TodoRequest) -> Todo | AsyncIterator[Todo]:
        """Single Todo when an id is given, otherwise an iterator over all Todos."""
        if is_assigned(request.id):
            return await self.get(request)
        return self._store.get_all()

    async def get(self, request: TodoRequest) -> Todo:
        todo = await self._store.get_by_id(request.id)
        if todo is None:
            raise ResourceNotFoundError(
                "Todo", request.id,
                ErrorContext(todo_id=request.id, operation="read"),
            )
        return todo

    async def create_or_update(self, request: TodoRequest) -> Todo:
        if request.todo is None:
            raise BadRequestError(
                "Request body with a Todo is required",
                ErrorContext(todo_id=request.id, operation="write"),
            )
        todo = request.todo
        if not is_assigned(todo.id):
            todo = todo.model_copy(update={"id": await self._store.get_next_sequence()})
            logger.info("Assigned new todo id", extra={"todo_id": todo.id})
        await self._store.store(todo)
        return todo

    async def update(self, request: TodoRequest) -> Todo:
        return await self.create_or_update(request)

    async def delete(self, request: TodoRequest) -> None:
        await self._store.delete_by_id(request.id)
        logger.info("Deleted todo", extra={"todo_id": request.id})
