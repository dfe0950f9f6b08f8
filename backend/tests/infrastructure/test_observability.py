"""Structured Logging — JSON formatter output."""

import json
import logging

from todos.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "todos.test", logging.INFO, __file__, 1, "hello %s", ("world",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "todos.test"
    assert log["message"] == "hello world"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras():
    log = json.loads(JSONFormatter().format(
        _record(todo_id=3, error_code="RESOURCE_NOT_FOUND", unrelated="x"),
    ))
    assert log["todo_id"] == 3
    assert log["error_code"] == "RESOURCE_NOT_FOUND"
    assert "unrelated" not in log
