"""Failure types and the default failure callback."""
from __future__ import annotations

from typing import Any


class MetricsError(Exception):
    """Base class for every failure reported by the mock metrics."""


class InvalidLabelValues(MetricsError, ValueError):
    """Label arguments do not have the expected shape."""


class NegativeDelta(MetricsError, ValueError):
    """A counter received a negative delta."""


def raise_failure(reason: Any) -> None:
    """Default failure callback: abort the current call by raising."""

    if isinstance(reason, BaseException):
        raise reason
    raise MetricsError(str(reason))


__all__ = [
    "InvalidLabelValues",
    "MetricsError",
    "NegativeDelta",
    "raise_failure",
]
