"""Mock histogram."""
from __future__ import annotations

from typing import List, Optional

from .base import MockMetric
from .options import Option


class Histogram(MockMetric[List[float]]):
    """Histogram that keeps every raw observation per label key, in call order.

    Nothing is bucketed or aggregated; tests assert on the observed values.
    """

    kind = "histogram"

    def observe(self, value: float) -> None:
        key = self._storage_key()
        if key is None:
            return
        with self._storage() as values:
            values.setdefault(key, []).append(float(value))

    def _copy(self, stored: List[float]) -> List[float]:
        return list(stored)


def new_histogram(*options: Optional[Option]) -> Histogram:
    return Histogram(*options)


__all__ = ["Histogram", "new_histogram"]
