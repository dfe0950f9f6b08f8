"""Todo Service — the four operations over a fakeredis-backed store.

Invariants:
    - create_or_update with id 0 assigns a fresh id
    - update behaves exactly like create_or_update
    - delete never raises for absent ids
"""

import pytest

from todos.core.errors import BadRequestError, ResourceNotFoundError, StoreUnavailableError
from todos.schemas.todo import Todo, TodoRequest
from todos.services.todo_service import TodoService


@pytest.fixture
def service(store):
    return TodoService(store)


async def test_create_assigns_first_id(service):
    created = await service.create_or_update(
        TodoRequest.parse(body=Todo(content="buy milk", order=1)),
    )
    assert created == Todo(id=1, content="buy milk", order=1, done=False)


async def test_create_assigns_unissued_ids(service):
    ids = set()
    for i in range(5):
        created = await service.create_or_update(
            TodoRequest.parse(body=Todo(content=f"t{i}")),
        )
        ids.add(created.id)
    assert len(ids) == 5
    assert 0 not in ids


async def test_created_todo_reads_back_equal(service):
    created = await service.create_or_update(
        TodoRequest.parse(body=Todo(content="x", order=2, done=True)),
    )
    assert await service.read(TodoRequest.parse(path_id=created.id)) == created


async def test_create_with_explicit_id_upserts_without_sequence(service, store):
    stored = await service.create_or_update(
        TodoRequest.parse(path_id=50, body=Todo(content="pinned")),
    )
    assert stored.id == 50
    assert await store.get_next_sequence() == 1


async def test_update_is_create_or_update(service):
    updated = await service.update(
        TodoRequest.parse(path_id=7, body=Todo(content="new via put")),
    )
    assert updated.id == 7
    assert (await service.read(TodoRequest.parse(path_id=7))).content == "new via put"


async def test_update_without_id_assigns_one(service):
    updated = await service.update(TodoRequest.parse(body=Todo(content="x")))
    assert updated.id == 1


async def test_write_without_body_is_bad_request(service):
    with pytest.raises(BadRequestError):
        await service.create_or_update(TodoRequest.parse(path_id=1))


async def test_read_missing_raises_not_found(service):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await service.read(TodoRequest.parse(path_id=999))
    assert exc_info.value.context.todo_id == 999


async def test_read_without_id_returns_all(service):
    await service.create_or_update(TodoRequest.parse(body=Todo(content="a")))
    await service.create_or_update(TodoRequest.parse(body=Todo(content="b")))

    result = await service.read(TodoRequest.parse())

    contents = sorted([todo.content async for todo in result])
    assert contents == ["a", "b"]


async def test_delete_then_read_is_not_found(service):
    created = await service.create_or_update(TodoRequest.parse(body=Todo(content="x")))
    await service.delete(TodoRequest.parse(path_id=created.id))
    with pytest.raises(ResourceNotFoundError):
        await service.read(TodoRequest.parse(path_id=created.id))


async def test_delete_twice_is_idempotent(service):
    await service.delete(TodoRequest.parse(path_id=3))
    await service.delete(TodoRequest.parse(path_id=3))


async def test_store_failure_propagates(service, fake_server):
    fake_server.connected = False
    with pytest.raises(StoreUnavailableError):
        await service.create_or_update(TodoRequest.parse(body=Todo(content="x")))
