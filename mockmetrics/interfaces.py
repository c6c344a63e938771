"""Protocols for the instrumentation interface the mocks stand in for.

Code under test can annotate against these and receive either a real
implementation or one of the mocks from this package.
"""
from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class CounterLike(Protocol):
    def with_labels(self, *label_values: str) -> Optional[CounterLike]: ...
    def add(self, delta: float) -> None: ...


@runtime_checkable
class GaugeLike(Protocol):
    def with_labels(self, *label_values: str) -> Optional[GaugeLike]: ...
    def set(self, value: float) -> None: ...
    def add(self, delta: float) -> None: ...


@runtime_checkable
class HistogramLike(Protocol):
    def with_labels(self, *label_values: str) -> Optional[HistogramLike]: ...
    def observe(self, value: float) -> None: ...


@runtime_checkable
class ProviderLike(Protocol):
    def counter(self, name: str) -> CounterLike: ...
    def gauge(self, name: str) -> GaugeLike: ...
    def histogram(self, name: str) -> HistogramLike: ...
    def stop(self) -> None: ...


__all__ = [
    "CounterLike",
    "GaugeLike",
    "HistogramLike",
    "ProviderLike",
]
