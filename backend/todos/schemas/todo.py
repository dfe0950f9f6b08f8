"""Todo Schemas — the Todo entity and the typed request record built at the route boundary.

Invariants:
    - Todo JSON shape is exactly {id, content, order, done}
    - Missing fields take defaults (id=0 means unassigned)
    - id is a signed 64-bit integer wherever a Todo is built, including TodoRequest.parse
    - PascalCase documents ({"Id", "Content", "Order", "Done"}) read the same as
      lowercase ones; output is always lowercase
    - TodoRequest.id is the resolved id; when a body is present, body.id == TodoRequest.id
"""

from dataclasses import dataclass

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from todos.core.domain_types import TODO_ID_MAX, TODO_ID_MIN, TodoId, UNASSIGNED_ID


class Todo(BaseModel):
    """A single todo item."""

    model_config = ConfigDict(extra="ignore")

    id: int = Field(
        0, ge=TODO_ID_MIN, le=TODO_ID_MAX,
        validation_alias=AliasChoices("id", "Id"),
    )
    content: str = Field("", validation_alias=AliasChoices("content", "Content"))
    order: int = Field(0, validation_alias=AliasChoices("order", "Order"))
    done: bool = Field(False, validation_alias=AliasChoices("done", "Done"))


@dataclass(frozen=True)
class TodoRequest:
    """Parsed request: id from path/query/body, plus the body for writes."""
    id: TodoId = UNASSIGNED_ID
    todo: Todo | None = None

    @classmethod
    def parse(
        cls,
        path_id: int | None = None,
        query_id: int | None = None,
        body: Todo | None = None,
    ) -> "TodoRequest":
        """Resolve the id: path wins over query, query over body.

        Raises pydantic.ValidationError when the resolved id is outside 64 bits.
        """
        if path_id is not None:
            resolved = path_id
        elif query_id is not None:
            resolved = query_id
        elif body is not None:
            resolved = body.id
        else:
            resolved = UNASSIGNED_ID
        if body is not None and body.id != resolved:
            body = Todo.model_validate({**body.model_dump(), "id": resolved})
        return cls(id=TodoId(resolved), todo=body)
