"""Observability helpers."""

from .logger import (  # noqa: F401
    JsonFormatter,
    bind_test_id,
    clear_test_id,
    configure_logging,
    current_test_id,
    get_logger,
)

__all__ = [
    "JsonFormatter",
    "bind_test_id",
    "clear_test_id",
    "configure_logging",
    "current_test_id",
    "get_logger",
]
