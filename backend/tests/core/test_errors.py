"""Error Hierarchy — status codes, codes, and the REST envelope."""

from todos.core.errors import (
    BadRequestError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    ResourceNotFoundError,
    StoreUnavailableError,
    TodosError,
)


def test_not_found_is_404():
    err = ResourceNotFoundError("Todo", 999)
    assert err.http_status == 404
    assert err.code == "RESOURCE_NOT_FOUND"
    assert err.message == "Todo '999' not found"
    assert err.category == ErrorCategory.RESOURCE_NOT_FOUND


def test_bad_request_is_400():
    err = BadRequestError("nope")
    assert err.http_status == 400
    assert err.code == "BAD_REQUEST"


def test_store_unavailable_is_503_and_critical():
    err = StoreUnavailableError("Connection unavailable", "get_by_id")
    assert err.http_status == 503
    assert err.severity == ErrorSeverity.CRITICAL
    assert err.operation == "get_by_id"
    assert err.context.operation == "get_by_id"
    assert "get_by_id" in err.message


def test_all_errors_share_base():
    for err in (
        BadRequestError("x"),
        ResourceNotFoundError("Todo", 1),
        StoreUnavailableError("x", "store"),
    ):
        assert isinstance(err, TodosError)


def test_to_response_envelope():
    err = ResourceNotFoundError("Todo", 7, ErrorContext(todo_id=7, operation="read"))
    body = err.to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["category"] == "resource_not_found"
    assert body["severity"] == "error"
    assert body["context"] == {"todo_id": 7, "operation": "read"}
    assert "timestamp" in body
