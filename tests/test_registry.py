from __future__ import annotations

import pytest

from mockmetrics import (
    Counter,
    CounterLike,
    Delimiter,
    ExpectLabels,
    Gauge,
    GaugeLike,
    Histogram,
    HistogramLike,
    InvalidLabelValues,
    MockRegistry,
    ProviderLike,
    get_registry,
    reset_registry,
)


@pytest.fixture
def registry() -> MockRegistry:
    return MockRegistry(Delimiter("/"))


def test_registry_returns_same_metric_for_name(registry):
    first = registry.counter("requests_total")
    second = registry.counter("requests_total")
    assert first is second
    assert isinstance(first, Counter)


def test_registry_applies_default_and_call_options(registry):
    gauge = registry.gauge("queue_length", ExpectLabels("queue"))
    gauge.with_labels("jobs").set(3)

    assert gauge.value() == {"jobs": 3.0}
    with pytest.raises(InvalidLabelValues):
        gauge.set(1)

    histogram = registry.histogram("latency", buckets=10)
    histogram.with_labels("a", "b").observe(1.5)
    assert histogram.value() == {"a/b": [1.5]}
    assert registry.buckets("latency") == 10


def test_registry_replaces_metric_of_other_kind(registry):
    registry.counter("thing")
    gauge = registry.gauge("thing")

    assert isinstance(gauge, Gauge)
    assert registry.get("thing") is gauge


def test_registry_snapshot(registry):
    registry.counter("hits").with_labels("home").add(2)
    registry.histogram("sizes").observe(7)
    registry.gauge("idle")

    assert registry.snapshot() == {
        "hits": {"home": 2.0},
        "sizes": {"": [7.0]},
        "idle": {},
    }
    assert registry.names() == ["hits", "idle", "sizes"]
    assert registry.get("missing") is None
    registry.stop()


def test_default_registry_can_be_reset():
    registry = reset_registry()
    assert get_registry() is registry
    registry.counter("x").add(1)

    fresh = reset_registry()
    assert fresh is not registry
    assert fresh.snapshot() == {}


def test_mocks_satisfy_protocols(registry):
    assert isinstance(Counter(), CounterLike)
    assert isinstance(Gauge(), GaugeLike)
    assert isinstance(Histogram(), HistogramLike)
    assert isinstance(registry, ProviderLike)
