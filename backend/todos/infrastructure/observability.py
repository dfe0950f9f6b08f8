"""Log output for the Todos API: one JSON object per line, or plain text.

Request and store logs attach todo_id, operation, error_code, path, method
and status_code as `extra`; JSONFormatter copies whichever are set.
setup_logging() is called from the application lifespan.
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "todo_id", "error_code", "path", "method", "operation", "status_code",
)


class JSONFormatter(logging.Formatter):

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Add a root handler; fmt "json" selects JSONFormatter, anything else plain text."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
