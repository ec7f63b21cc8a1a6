"""Tests for spreadsheet column naming."""

import math

import pytest

from qrgrid.engine.columns import column_index, column_name, generate_column_names
from qrgrid.engine.errors import InvalidIndex, InvalidLength


@pytest.mark.parametrize(
    "index, label",
    [(0, "A"), (1, "B"), (25, "Z"), (26, "AA"), (27, "AB"), (51, "AZ"), (52, "BA"), (701, "ZZ"), (702, "AAA")],
)
def test_known_labels(index, label):
    assert column_name(index) == label


def test_labels_unique_and_ordered():
    names = [column_name(i) for i in range(2000)]
    assert len(set(names)) == len(names)
    keys = [(len(n), n) for n in names]
    assert keys == sorted(keys)


def test_column_index_inverts_column_name():
    for i in range(0, 20000, 7):
        assert column_index(column_name(i)) == i


def test_negative_index_rejected():
    with pytest.raises(InvalidIndex):
        column_name(-1)


def test_non_integer_index_rejected():
    with pytest.raises(InvalidIndex):
        column_name(1.5)
    with pytest.raises(InvalidIndex):
        column_name(True)


@pytest.mark.parametrize("label", ["", "a", "A1", "Ä"])
def test_bad_label_rejected(label):
    with pytest.raises(InvalidIndex):
        column_index(label)


def test_generate_names():
    assert generate_column_names(3) == ["A", "B", "C"]
    assert generate_column_names(0) == []
    assert generate_column_names(3.0) == ["A", "B", "C"]
    names = generate_column_names(30)
    assert names[25:] == ["Z", "AA", "AB", "AC", "AD"]


@pytest.mark.parametrize("length", [-1, -0.5, math.inf, math.nan, 2.5, "3", None, True])
def test_generate_names_rejects_bad_length(length):
    with pytest.raises(InvalidLength):
        generate_column_names(length)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        generate_column_names(-1)
