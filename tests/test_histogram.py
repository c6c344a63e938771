from __future__ import annotations

import pytest

from mockmetrics import Delimiter, ExpectLabels, InvalidLabelValues, LabelPairs, PanicFunc, new_histogram


def test_histogram_keeps_observations_in_order():
    histogram = new_histogram()
    histogram.with_labels("x").observe(1)
    histogram.with_labels("x").observe(10)
    histogram.with_labels("x").observe(1)

    assert histogram.value() == {"x": [1.0, 10.0, 1.0]}


def test_histogram_without_labels():
    histogram = new_histogram()
    histogram.observe(0.5)
    assert histogram.value() == {"": [0.5]}


def test_histogram_chained_labels_and_delimiter():
    histogram = new_histogram(Delimiter("-"))
    histogram.with_labels("label1").with_labels("label2").observe(3)
    histogram.with_labels("label1", "label2").observe(4)
    histogram.with_labels("label7").with_labels("label2").observe(9)

    assert histogram.value() == {
        "label1-label2": [3.0, 4.0],
        "label7-label2": [9.0],
    }


def test_histogram_value_cannot_mutate_storage():
    histogram = new_histogram()
    histogram.observe(1)
    snapshot = histogram.value()
    snapshot[""].append(2.0)

    assert histogram.value() == {"": [1.0]}


def test_empty_histogram():
    assert new_histogram().value() == {}


def test_histogram_expected_labels():
    histogram = new_histogram(ExpectLabels("one", "two"))
    histogram.with_labels("label1", "label2").observe(1)
    assert histogram.value() == {"label1.label2": [1.0]}

    with pytest.raises(InvalidLabelValues):
        histogram.with_labels("label1").observe(1)
    assert histogram.value() == {"label1.label2": [1.0]}


def test_histogram_custom_panic_collects_failures():
    failures = []
    histogram = new_histogram(PanicFunc(failures.append), LabelPairs(), ExpectLabels("route"))
    histogram.with_labels("route", "/a").observe(1)
    histogram.with_labels("path", "/a")
    histogram.observe(2)

    assert histogram.value() == {"/a": [1.0]}
    assert [type(item) for item in failures] == [InvalidLabelValues, InvalidLabelValues]
