"""Root/derived handle machinery shared by the mock metric kinds."""
from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Any, Dict, Generic, Iterator, Optional, TypeVar

from . import config as settings
from .errors import InvalidLabelValues
from .labels import Labels, join_values, pair_up, positional, validate_labels
from .observability.logger import get_logger
from .options import MetricConfig, Option, build_config

LOGGER = get_logger("mockmetrics.metrics")

V = TypeVar("V")
M = TypeVar("M", bound="MockMetric")


class MockMetric(Generic[V]):
    """A tree of metric handles sharing one store.

    The handle returned by the constructor is the root: it owns the stored
    values, the lock and the configuration. ``with_labels`` returns derived
    handles that only carry the labels collected so far and a reference to
    the root. Every write goes through the root.
    """

    kind = "metric"

    def __init__(self, *options: Optional[Option]) -> None:
        self._root: Optional["MockMetric[V]"] = None
        self._labels: Labels = ()
        self._config: MetricConfig = build_config(options)
        self._lock = threading.Lock()
        self._values: Optional[Dict[str, V]] = None

    @classmethod
    def _derive(cls: type[M], root: M, labels: Labels) -> M:
        handle = cls.__new__(cls)
        handle._root = root
        handle._labels = labels
        return handle

    @property
    def root(self) -> "MockMetric[V]":
        return self._root if self._root is not None else self

    @property
    def is_root(self) -> bool:
        return self._root is None

    @property
    def labels(self) -> Labels:
        return self._labels

    @property
    def config(self) -> MetricConfig:
        return self.root._config

    def with_labels(self: M, *label_values: str) -> Optional[M]:
        """Return a handle with ``label_values`` appended to this handle's labels.

        The collected labels may still be a prefix of the expected ones. When
        they cannot be, the failure callback runs and ``None`` is returned.
        """

        root = self.root
        config = root._config
        try:
            added = pair_up(label_values) if config.label_pairs else positional(label_values)
            labels = self._labels + added
            validate_labels(config.expected_labels, labels, exact=False)
        except InvalidLabelValues as exc:
            root._fail(exc, self._labels)
            return None
        return self._derive(root, labels)

    def value(self) -> Dict[str, V]:
        """Snapshot of everything recorded in this tree, keyed by joined label values."""

        root = self.root
        with root._lock:
            if not root._values:
                return {}
            return {key: self._copy(stored) for key, stored in root._values.items()}

    def _copy(self, stored: V) -> V:
        return stored

    def _fail(self, reason: Any, labels: Labels) -> None:
        if settings.LOG_FAILURES:
            LOGGER.warning(
                "metric_call_rejected",
                extra={
                    "metric": self.kind,
                    "reason": str(reason),
                    "label_values": [item.value for item in labels],
                },
            )
        self._config.panic(reason)

    def _storage_key(self) -> Optional[str]:
        """Validate the full label set and return its key, or ``None`` after a failure."""

        root = self.root
        config = root._config
        try:
            validate_labels(config.expected_labels, self._labels, exact=True)
        except InvalidLabelValues as exc:
            root._fail(exc, self._labels)
            return None
        return join_values(self._labels, config.delimiter)

    @contextmanager
    def _storage(self) -> Iterator[Dict[str, V]]:
        root = self.root
        with root._lock:
            if root._values is None:
                root._values = {}
            yield root._values

    def __repr__(self) -> str:
        values = ", ".join(repr(item.value) for item in self._labels)
        return f"{type(self).__name__}({values})"
