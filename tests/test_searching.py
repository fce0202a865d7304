import bisect

import pytest
from hypothesis import given
from hypothesis import strategies as st

from bisectkit.searching import (
    bitonic_find,
    bitonic_peak,
    first_true,
    last_true,
    lower_bound,
    rotation_point,
    upper_bound,
)

sorted_lists = st.lists(st.integers(-50, 50), max_size=30).map(sorted)
distinct_sorted = st.sets(st.integers(-100, 100), min_size=1, max_size=30).map(sorted)


@given(sorted_lists, st.integers(-60, 60))
def test_lower_bound_matches_bisect_left(values, x):
    assert lower_bound(values, x) == bisect.bisect_left(values, x)


@given(sorted_lists, st.integers(-60, 60))
def test_upper_bound_matches_bisect_right(values, x):
    assert upper_bound(values, x) == bisect.bisect_right(values, x)


def test_lower_bound_past_end_returns_length():
    values = [1, 2, 3]
    assert lower_bound(values, 10) == len(values)


@given(st.integers(0, 10_000))
def test_first_true_finds_boundary(target):
    r = first_true(0, 200, lambda x: x * x >= target, -1)
    assert r * r >= target
    assert r == 0 or (r - 1) * (r - 1) < target


@given(st.integers(0, 10_000))
def test_last_true_finds_boundary(target):
    r = last_true(0, 200, lambda x: x * x <= target, -1)
    assert r * r <= target
    assert (r + 1) * (r + 1) > target


def test_first_true_returns_default_when_never_true():
    assert first_true(0, 10, lambda x: False, -1) == -1


def test_last_true_returns_default_when_never_true():
    assert last_true(0, 10, lambda x: False, "none") == "none"


def test_first_true_empty_range_returns_default():
    assert first_true(5, 4, lambda x: True) is None


def test_rotation_point_empty_raises():
    with pytest.raises(ValueError):
        rotation_point([])


def _bitonic(rising, falling):
    peak = rising[-1]
    tail = [v for v in sorted(falling, reverse=True) if v < peak]
    return rising + tail


@given(distinct_sorted, st.sets(st.integers(-100, 100), max_size=30))
def test_bitonic_peak_is_maximum(rising, falling):
    values = _bitonic(rising, falling)
    peak = bitonic_peak(values)
    assert peak == len(rising) - 1
    assert values[peak] == max(values)


def test_bitonic_peak_empty_raises():
    with pytest.raises(ValueError):
        bitonic_peak([])


@given(distinct_sorted, st.sets(st.integers(-100, 100), max_size=30), st.integers(-110, 110))
def test_bitonic_find_reports_every_occurrence(rising, falling, x):
    values = _bitonic(rising, falling)
    found = bitonic_find(values, x)
    assert sorted(found) == [i for i, v in enumerate(values) if v == x]
    assert found == sorted(found)


def test_bitonic_find_missing_value():
    assert bitonic_find([1, 4, 9, 6, 2], 5) == []


def test_bitonic_find_empty():
    assert bitonic_find([], 3) == []