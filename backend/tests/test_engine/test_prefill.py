"""Tests for deterministic prefill selection.

Expected vectors were computed independently (32-bit integer arithmetic) and
pin the hash → LCG → shuffle chain bit for bit.
"""

import math

import pytest

from qrgrid.engine.matrix import ModuleMatrix
from qrgrid.engine.prefill import (
    fisher_yates,
    fnv1a_32,
    format_percent,
    lcg_floats,
    lcg_next,
    prefill_count,
    seed_text,
    select_prefill,
    shuffled_active,
)
from qrgrid.utils.math_helpers import clamp_percent, round_half_away
from tests.conftest import EMPTY_2X2, FULL_2X2, NEARLY_FULL_3X3, SPARSE_3X3, TEN_ACTIVE_4X4


# ── Helpers ──


@pytest.mark.parametrize(
    "text, expected",
    [("", 2166136261), ("a", 0xE40C292C), ("foobar", 0xBF9CF968), ("hello|L|50", 0x70CC1120)],
)
def test_fnv1a_known_values(text, expected):
    assert fnv1a_32(text) == expected
    assert fnv1a_32(text.encode("utf-8")) == expected


def test_fnv1a_hashes_utf8_bytes():
    assert fnv1a_32("Präfill") == fnv1a_32("Präfill".encode("utf-8"))
    assert fnv1a_32("Präfill") != fnv1a_32("Präfill".encode("latin-1"))


def test_lcg_step():
    assert lcg_next(0) == 1013904223
    assert lcg_next(1892421920) == 4055798271
    assert 0 <= lcg_next(0xFFFFFFFF) <= 0xFFFFFFFF


def test_lcg_floats_first_draw_is_after_seed():
    draws = lcg_floats(1892421920)
    assert next(draws) == 4055798271 / 2**32
    assert next(draws) == 3006199634 / 2**32
    assert next(draws) == 861810313 / 2**32


def test_lcg_floats_in_unit_interval():
    draws = lcg_floats(12345)
    for _ in range(1000):
        assert 0.0 <= next(draws) < 1.0


def test_fisher_yates_is_pure():
    items = [0, 1, 2, 3]
    out = fisher_yates(items, lcg_floats(1892421920))
    assert items == [0, 1, 2, 3]
    assert out == [1, 0, 2, 3]


def test_fisher_yates_trivial():
    assert fisher_yates([], lcg_floats(1)) == []
    assert fisher_yates([7], lcg_floats(1)) == [7]


@pytest.mark.parametrize(
    "value, expected",
    [(50, 50.0), (-5, 0.0), (150, 100.0), (math.inf, 0.0), (-math.inf, 0.0), (math.nan, 0.0), ("30", 30.0), (None, 0.0)],
)
def test_clamp_percent(value, expected):
    assert clamp_percent(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [(0.4, 0), (0.5, 1), (1.5, 2), (2.5, 3), (2.49, 2), (-2.5, -3), (-0.4, 0), (0.0, 0)],
)
def test_round_half_away(value, expected):
    assert round_half_away(value) == expected


def test_format_percent():
    assert format_percent(30.0) == "30"
    assert format_percent(0) == "0"
    assert format_percent(12.5) == "12.5"
    assert seed_text("hi", "M", 100.0) == "hi|M|100"


def test_format_percent_small_fractions():
    assert format_percent(0.0001) == "0.0001"
    assert format_percent(0.00001) == "0.00001"
    assert format_percent(0.000001) == "0.000001"
    assert format_percent(0.0000015) == "0.0000015"
    assert format_percent(1.5e-7) == "1.5e-7"
    assert format_percent(1e-10) == "1e-10"
    assert seed_text("hi", "L", 0.00001) == "hi|L|0.00001"


def test_prefill_count():
    assert prefill_count(4, 50) == 2
    assert prefill_count(3, 50) == 2
    assert prefill_count(4, 0) == 0
    assert prefill_count(0, 50) == 0
    assert prefill_count(4, 250) == 4
    assert prefill_count(10, 4) == 0


# ── Selection ──


def test_count_law_full_2x2():
    m = ModuleMatrix.from_rows(FULL_2X2)
    assert len(select_prefill(m, "hello", "L", 50)) == 2
    assert select_prefill(m, "hello", "L", 0) == frozenset()
    assert select_prefill(m, "hello", "L", 100) == frozenset({0, 1, 2, 3})


def test_known_selection_full_2x2():
    m = ModuleMatrix.from_rows(FULL_2X2)
    assert shuffled_active(m, "hello", "L", 50) == [1, 0, 2, 3]
    assert select_prefill(m, "hello", "L", 50) == frozenset({0, 1})


def test_level_changes_selection():
    m = ModuleMatrix.from_rows(FULL_2X2)
    assert select_prefill(m, "hello", "H", 50) == frozenset({2, 3})


def test_known_selection_sparse():
    # 6 active, 25% → round(1.5) = 2
    m = ModuleMatrix.from_rows(SPARSE_3X3)
    assert select_prefill(m, "Hallo Sebastian!", "M", 25) == frozenset({0, 8})


def test_known_selection_ten_active():
    m = ModuleMatrix.from_rows(TEN_ACTIVE_4X4)
    assert shuffled_active(m, "Test Präfill", "L", 30) == [4, 2, 8, 7, 6, 9, 0, 5, 1, 3]
    assert select_prefill(m, "Test Präfill", "L", 30) == frozenset({4, 2, 8})


def test_fractional_percent_in_seed():
    # 8 active, 12.5% → exactly 1 cell; seed text "hello|L|12.5"
    m = ModuleMatrix.from_rows(NEARLY_FULL_3X3)
    assert select_prefill(m, "hello", "L", 12.5) == frozenset({6})


def test_integer_and_float_percent_agree():
    m = ModuleMatrix.from_rows(TEN_ACTIVE_4X4)
    assert select_prefill(m, "x", "Q", 40) == select_prefill(m, "x", "Q", 40.0)


def test_out_of_range_percent_clamped():
    m = ModuleMatrix.from_rows(FULL_2X2)
    assert select_prefill(m, "hello", "L", -20) == frozenset()
    assert select_prefill(m, "hello", "L", 250) == frozenset({0, 1, 2, 3})
    assert select_prefill(m, "hello", "L", math.nan) == frozenset()
    assert select_prefill(m, "hello", "L", math.inf) == frozenset()


def test_no_active_cells():
    assert select_prefill(ModuleMatrix.from_rows(EMPTY_2X2), "hello", "L", 100) == frozenset()
    assert select_prefill(ModuleMatrix.empty(), "hello", "L", 100) == frozenset()


def test_small_percent_rounds_to_nothing():
    m = ModuleMatrix.from_rows(TEN_ACTIVE_4X4)
    assert select_prefill(m, "hello", "L", 4) == frozenset()


def test_deterministic_and_subset():
    m = ModuleMatrix.from_rows(TEN_ACTIVE_4X4)
    active = set(m.active_indices())
    for pct in range(0, 101, 5):
        first = select_prefill(m, "content", "Q", pct)
        second = select_prefill(ModuleMatrix.from_rows(TEN_ACTIVE_4X4), "content", "Q", pct)
        assert first == second
        assert first <= active
        assert len(first) == prefill_count(len(active), pct)


def test_content_changes_selection():
    m = ModuleMatrix.from_rows(TEN_ACTIVE_4X4)
    selections = {select_prefill(m, f"text {i}", "L", 50) for i in range(20)}
    assert len(selections) > 1
