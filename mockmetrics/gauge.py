"""Mock gauge."""
from __future__ import annotations

from typing import Optional

from .base import MockMetric
from .options import Option


class Gauge(MockMetric[float]):
    """Gauge keeping the last set value per label key, adjusted by ``add``."""

    kind = "gauge"

    def set(self, value: float) -> None:
        self._update(value, delta=False)

    def add(self, delta: float) -> None:
        self._update(delta, delta=True)

    def _update(self, value: float, *, delta: bool) -> None:
        key = self._storage_key()
        if key is None:
            return
        with self._storage() as values:
            current = values.get(key, 0.0)
            values[key] = current + float(value) if delta else float(value)


def new_gauge(*options: Optional[Option]) -> Gauge:
    return Gauge(*options)


__all__ = ["Gauge", "new_gauge"]
