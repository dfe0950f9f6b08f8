"""Todo Routes — REST surface for Todo CRUD.

Invariants:
    - GET /todos and GET /todos/0 list every Todo; GET /todos/{id} returns one or 404
    - POST and PUT on /todos or /todos/{id} are the same upsert
    - DELETE /todos/{id} returns 204 whether or not the Todo existed
    - Id resolution: path, then ?id= query, then body (TodoRequest.parse)
    - Malformed JSON, a non-integer id, or an id outside 64 bits is rejected
      by FastAPI validation (400)
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response, status

from todos.context import ServiceContext, get_context
from todos.core.domain_types import TODO_ID_MAX, TODO_ID_MIN
from todos.schemas.todo import Todo, TodoRequest
from todos.services.todo_service import TodoService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/todos", tags=["todos"])

TodoIdPath = Annotated[int, Path(ge=TODO_ID_MIN, le=TODO_ID_MAX)]
TodoIdQuery = Annotated[
    int | None, Query(alias="id", ge=TODO_ID_MIN, le=TODO_ID_MAX),
]


def get_todo_service(
    context: ServiceContext = Depends(get_context),
) -> TodoService:
    return TodoService(context.todos)


async def _read(service: TodoService, request: TodoRequest) -> Todo | list[Todo]:
    result = await service.read(request)
    if isinstance(result, Todo):
        return result
    return [todo async for todo in result]


@router.get("", response_model=Todo | list[Todo])
async def read_todos(
    query_id: TodoIdQuery = None,
    service: TodoService = Depends(get_todo_service),
):
    """All Todos, or a single one when ?id= is given."""
    return await _read(service, TodoRequest.parse(query_id=query_id))


@router.get("/{todo_id}", response_model=Todo | list[Todo])
async def read_todo(
    todo_id: TodoIdPath, service: TodoService = Depends(get_todo_service),
):
    return await _read(service, TodoRequest.parse(path_id=todo_id))


@router.post("", response_model=Todo)
async def create_todo(
    body: Todo,
    query_id: TodoIdQuery = None,
    service: TodoService = Depends(get_todo_service),
):
    """Create (id 0 or absent) or overwrite a Todo."""
    return await service.create_or_update(
        TodoRequest.parse(query_id=query_id, body=body),
    )


@router.post("/{todo_id}", response_model=Todo)
async def create_todo_with_id(
    todo_id: TodoIdPath, body: Todo, service: TodoService = Depends(get_todo_service),
):
    return await service.create_or_update(
        TodoRequest.parse(path_id=todo_id, body=body),
    )


@router.put("", response_model=Todo)
async def update_todo_from_body(
    body: Todo,
    query_id: TodoIdQuery = None,
    service: TodoService = Depends(get_todo_service),
):
    return await service.update(TodoRequest.parse(query_id=query_id, body=body))


@router.put("/{todo_id}", response_model=Todo)
async def update_todo(
    todo_id: TodoIdPath, body: Todo, service: TodoService = Depends(get_todo_service),
):
    """Same upsert as POST; the Todo need not exist."""
    return await service.update(TodoRequest.parse(path_id=todo_id, body=body))


@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_todo(
    todo_id: TodoIdPath, service: TodoService = Depends(get_todo_service),
):
    await service.delete(TodoRequest.parse(path_id=todo_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
