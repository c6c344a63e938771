"""In-memory counter, gauge and histogram mocks for asserting on recorded metrics."""

from .counter import Counter, new_counter  # noqa: F401
from .errors import InvalidLabelValues, MetricsError, NegativeDelta, raise_failure  # noqa: F401
from .gauge import Gauge, new_gauge  # noqa: F401
from .histogram import Histogram, new_histogram  # noqa: F401
from .interfaces import CounterLike, GaugeLike, HistogramLike, ProviderLike  # noqa: F401
from .labels import LabelTuple  # noqa: F401
from .options import Delimiter, ExpectLabels, LabelPairs, MetricConfig, Option, PanicFunc  # noqa: F401
from .registry import MockRegistry, get_registry, reset_registry  # noqa: F401

__all__ = [
    "Counter",
    "CounterLike",
    "Delimiter",
    "ExpectLabels",
    "Gauge",
    "GaugeLike",
    "Histogram",
    "HistogramLike",
    "InvalidLabelValues",
    "LabelPairs",
    "LabelTuple",
    "MetricConfig",
    "MetricsError",
    "MockRegistry",
    "NegativeDelta",
    "Option",
    "PanicFunc",
    "ProviderLike",
    "get_registry",
    "new_counter",
    "new_gauge",
    "new_histogram",
    "raise_failure",
    "reset_registry",
]
