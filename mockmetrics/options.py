"""Construction options shared by counters, gauges and histograms."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional, Tuple

from . import config as settings
from .errors import raise_failure

FailureCallback = Callable[[Any], None]


@dataclass
class MetricConfig:
    """Settings owned by a root metric. Options write into it once, at construction."""

    delimiter: str = field(default_factory=lambda: settings.DELIMITER_DEFAULT)
    panic: FailureCallback = field(default=raise_failure)
    expected_labels: Optional[Tuple[str, ...]] = None
    label_pairs: bool = False


class Option(ABC):
    """Base for construction options; each one sets a single config field."""

    @abstractmethod
    def apply(self, config: MetricConfig) -> None:
        ...


@dataclass(frozen=True)
class Delimiter(Option):
    """Delimiter used to join label values into a storage key."""

    value: str

    def apply(self, config: MetricConfig) -> None:
        config.delimiter = self.value


@dataclass(frozen=True)
class PanicFunc(Option):
    """Callback invoked instead of raising when a call is invalid."""

    func: FailureCallback

    def apply(self, config: MetricConfig) -> None:
        config.panic = self.func


class ExpectLabels(Option):
    """Expected label names, in order.

    Update calls whose labels do not match fail through the panic callback.
    ``ExpectLabels()`` with no names means the metric takes no labels at all.
    """

    def __init__(self, *labels: str) -> None:
        self.labels: Tuple[str, ...] = tuple(labels)

    def apply(self, config: MetricConfig) -> None:
        config.expected_labels = self.labels

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ExpectLabels) and other.labels == self.labels

    def __hash__(self) -> int:
        return hash(self.labels)

    def __repr__(self) -> str:
        return f"ExpectLabels{self.labels!r}"


@dataclass(frozen=True)
class LabelPairs(Option):
    """Read ``with_labels`` arguments as ``label, value, label, value, ...``."""

    def apply(self, config: MetricConfig) -> None:
        config.label_pairs = True


def build_config(options: Iterable[Optional[Option]]) -> MetricConfig:
    config = MetricConfig()
    for option in options:
        if option is not None:
            option.apply(config)
    return config


__all__ = [
    "Delimiter",
    "ExpectLabels",
    "FailureCallback",
    "LabelPairs",
    "MetricConfig",
    "Option",
    "PanicFunc",
    "build_config",
]
