"""JSON logger helpers with test-id tagging."""
from __future__ import annotations

import contextvars
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, Optional, TextIO, Tuple

from .. import config as settings

PACKAGE_LOGGER = "mockmetrics"

_TEST_ID = contextvars.ContextVar("test_id", default=None)
_CONFIGURED = False
_RESERVED = {
    "args",
    "levelname",
    "levelno",
    "msg",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "message",
    "asctime",
    "name",
    "taskName",
}


class JsonFormatter(logging.Formatter):
    """One JSON object per record: core fields, the bound test id, then ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload = self._core_fields(record)
        payload.update(self._context_fields(record))
        for key, value in _extra_fields(record):
            payload.setdefault(key, value)
        return json.dumps(payload, ensure_ascii=False, default=str)

    def _core_fields(self, record: logging.LogRecord) -> Dict[str, Any]:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return {
            "timestamp": created.isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

    def _context_fields(self, record: logging.LogRecord) -> Dict[str, Any]:
        fields: Dict[str, Any] = {}
        test_id = record.__dict__.get("test_id") or _TEST_ID.get()
        if test_id:
            fields["test_id"] = test_id
        if record.exc_info:
            fields["exc_info"] = self.formatException(record.exc_info)
        return fields


def _extra_fields(record: logging.LogRecord) -> Iterator[Tuple[str, Any]]:
    return ((key, value) for key, value in record.__dict__.items() if not key.startswith("_") and key not in _RESERVED)


def configure_logging(*, level: Optional[str] = None, stream: Optional[TextIO] = None, force: bool = False) -> None:
    """Attach the JSON handler to the package logger.

    Only the ``mockmetrics`` logger is touched; records still propagate to
    whatever the test runner installed on the root logger.
    """

    global _CONFIGURED
    if _CONFIGURED and not force:
        return
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler.formatter, JsonFormatter):
            logger.removeHandler(handler)
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
    logger.setLevel(level or settings.LOG_LEVEL)
    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    if settings.LOG_JSON:
        configure_logging()
    return logging.getLogger(name)


def bind_test_id(test_id: str) -> None:
    _TEST_ID.set(test_id)


def clear_test_id() -> None:
    _TEST_ID.set(None)


def current_test_id() -> Optional[str]:
    return _TEST_ID.get()
