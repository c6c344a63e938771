"""Named mock metrics, handed out the way a metrics provider would."""
from __future__ import annotations

import threading
from typing import Any, Dict, Optional, Tuple, Type, TypeVar

from . import config as settings
from .base import MockMetric
from .counter import Counter
from .gauge import Gauge
from .histogram import Histogram
from .observability.logger import get_logger
from .options import Option

LOGGER = get_logger("mockmetrics.registry")

M = TypeVar("M", bound=MockMetric)


class MockRegistry:
    """Thread-safe registry storing root metrics by name.

    Options passed to the registry apply to every metric it creates; options
    passed per call are applied after them.
    """

    def __init__(self, *options: Optional[Option]) -> None:
        self._options: Tuple[Optional[Option], ...] = tuple(options)
        self._metrics: Dict[str, MockMetric] = {}
        self._buckets: Dict[str, int] = {}
        self._lock = threading.Lock()

    def _get_or_create(self, kind: Type[M], name: str, options: Tuple[Optional[Option], ...]) -> M:
        with self._lock:
            metric = self._metrics.get(name)
            if isinstance(metric, kind):
                return metric
            if metric is not None:
                LOGGER.debug(
                    "metric_replaced",
                    extra={"metric_name": name, "old_kind": metric.kind, "new_kind": kind.kind},
                )
                self._buckets.pop(name, None)
            created = kind(*self._options, *options)
            self._metrics[name] = created
            return created

    def counter(self, name: str, *options: Optional[Option]) -> Counter:
        return self._get_or_create(Counter, name, options)

    def gauge(self, name: str, *options: Optional[Option]) -> Gauge:
        return self._get_or_create(Gauge, name, options)

    def histogram(
        self,
        name: str,
        *options: Optional[Option],
        buckets: int = settings.HISTOGRAM_BUCKETS_DEFAULT,
    ) -> Histogram:
        histogram = self._get_or_create(Histogram, name, options)
        with self._lock:
            self._buckets.setdefault(name, int(buckets))
        return histogram

    def buckets(self, name: str) -> Optional[int]:
        """Bucket count requested when the histogram was created; the mock never buckets."""

        return self._buckets.get(name)

    def get(self, name: str) -> Optional[MockMetric]:
        return self._metrics.get(name)

    def names(self) -> list[str]:
        with self._lock:
            return sorted(self._metrics)

    def snapshot(self) -> Dict[str, Dict[str, Any]]:
        with self._lock:
            metrics = list(self._metrics.items())
        return {name: metric.value() for name, metric in metrics}

    def stop(self) -> None:
        """Nothing to flush; present so the registry can stand in for a provider."""


_DEFAULT_REGISTRY = MockRegistry()


def get_registry() -> MockRegistry:
    return _DEFAULT_REGISTRY


def reset_registry(*options: Optional[Option]) -> MockRegistry:
    global _DEFAULT_REGISTRY
    _DEFAULT_REGISTRY = MockRegistry(*options)
    return _DEFAULT_REGISTRY


__all__ = [
    "MockRegistry",
    "get_registry",
    "reset_registry",
]
