"""Label tuples: parsing flat call-site arguments, schema checks and key joining."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence, Tuple

from .errors import InvalidLabelValues


@dataclass(frozen=True, slots=True)
class LabelTuple:
    """One ``(label, value)`` pair. ``label`` is ``None`` for positional values."""

    label: Optional[str]
    value: str


Labels = Tuple[LabelTuple, ...]


def pair_up(flat_args: Sequence[Any]) -> Labels:
    """Turn ``("label1", "value1", "label2", "value2")`` into label tuples."""

    if len(flat_args) % 2 != 0:
        raise InvalidLabelValues(
            "labelValues is invalid - must be a multiple of 2, "
            "'label1', 'value1', 'label2', 'value2', ..."
        )

    pairs = []
    for index in range(0, len(flat_args), 2):
        label, value = str(flat_args[index]), str(flat_args[index + 1])
        if label == "":
            raise InvalidLabelValues("labelValues is invalid - the label must not be empty")
        if value == "":
            raise InvalidLabelValues("labelValues is invalid - the value must not be empty")
        pairs.append(LabelTuple(label=label, value=value))
    return tuple(pairs)


def positional(values: Iterable[Any]) -> Labels:
    """Values-only convention: every argument is a value, names come from position.

    Non-string values are converted with ``str()`` so the storage key can always be built.
    """

    return tuple(LabelTuple(label=None, value=str(value)) for value in values)


def _describe(labels: Labels) -> str:
    return "', '".join(item.label if item.label is not None else item.value for item in labels)


def validate_labels(schema: Optional[Sequence[str]], labels: Labels, *, exact: bool) -> None:
    """Check ``labels`` against the expected label names.

    Nothing is checked when ``schema`` is ``None``. With ``exact`` the number of
    labels must match the schema; otherwise it only must not exceed it, so a
    partially built chain can still be validated. Named labels must match the
    schema position by position; positional ones are only counted.
    """

    if schema is None:
        return

    wanted = "', '".join(schema)
    if exact and len(labels) != len(schema):
        raise InvalidLabelValues(
            f"labelValues is invalid - expected labels: want '{wanted}', got '{_describe(labels)}'"
        )
    if not exact and len(labels) > len(schema):
        raise InvalidLabelValues(
            f"labelValues is invalid - too many labels: want '{wanted}', got '{_describe(labels)}'"
        )

    for expected, item in zip(schema, labels):
        if item.label is not None and item.label != expected:
            raise InvalidLabelValues(
                f"labelValues is invalid - the labels do not match: want '{wanted}', got '{_describe(labels)}'"
            )


def join_values(labels: Labels, delimiter: str) -> str:
    if not labels:
        return ""
    return delimiter.join(item.value for item in labels)


__all__ = [
    "LabelTuple",
    "Labels",
    "join_values",
    "pair_up",
    "positional",
    "validate_labels",
]
