"""Structured Logging — one root handler, JSON in production, key=value in development.

Invariants:
    - Every record carries timestamp (from the record itself), level, logger, message
    - Context fields (procedure, duration_ms, error_code, path, account_id,
      securable, permission) are emitted only when set via `extra=`
    - setup_logging is idempotent: calling it again replaces its own handler

Design Decisions:
    - stdlib logging with a custom Formatter: no logging dependency
    - Driver/server chatter (sqlalchemy.engine, uvicorn.access) capped at WARNING
      unless the app itself runs at DEBUG
"""

import json
import logging
from datetime import datetime, timezone

CONTEXT_FIELDS = (
    "procedure", "duration_ms", "error_code", "path",
    "account_id", "securable", "permission",
)

_NOISY_LOGGERS = ("sqlalchemy.engine", "uvicorn.access")
_HANDLER_NAME = "tasktree"


def _context(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key]
        for key in CONTEXT_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_context(record),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


class KeyValueFormatter(logging.Formatter):
    """Human-readable line with context appended as key=value pairs."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s - %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _context(record)
        if not context:
            return line
        pairs = " ".join(f"{k}={v}" for k, v in context.items())
        head, sep, tail = line.partition("\n")
        return f"{head} [{pairs}]{sep}{tail}"


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the application handler on the root logger."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else KeyValueFormatter())
    root.addHandler(handler)

    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO
    root.setLevel(resolved)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(resolved, logging.WARNING))
    return handler
