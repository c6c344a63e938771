"""Mock counter."""
from __future__ import annotations

from typing import Optional

from .base import MockMetric
from .errors import NegativeDelta
from .options import Option


class Counter(MockMetric[float]):
    """Monotonically increasing counter summing every delta per label key."""

    kind = "counter"

    def add(self, delta: float) -> None:
        if delta < 0.0:
            self.root._fail(NegativeDelta("delta must be non-negative"), self._labels)
            return

        key = self._storage_key()
        if key is None:
            return
        with self._storage() as values:
            values[key] = values.get(key, 0.0) + float(delta)


def new_counter(*options: Optional[Option]) -> Counter:
    return Counter(*options)


__all__ = ["Counter", "new_counter"]
