import pytest
from hypothesis import given
from hypothesis import strategies as st

from bisectkit.kth import kth_pair_sum, multiplication_table_median

small_ints = st.lists(st.integers(min_value=-50, max_value=50), min_size=1, max_size=8)


@given(small_ints, small_ints, st.data())
def test_kth_pair_sum_matches_sorted_sums(first, second, data):
    sums = sorted(a + b for a in first for b in second)
    k = data.draw(st.integers(min_value=1, max_value=len(sums)))
    assert kth_pair_sum(first, second, k) == sums[k - 1]


def test_kth_pair_sum_first_and_last():
    first = [5, 1, 3]
    second = [2, 8]
    assert kth_pair_sum(first, second, 1) == min(first) + min(second)
    assert kth_pair_sum(first, second, 6) == max(first) + max(second)


def test_kth_pair_sum_is_symmetric():
    first = [4, 9, 1, 7]
    second = [3, 3]
    for k in range(1, 9):
        assert kth_pair_sum(first, second, k) == kth_pair_sum(second, first, k)


@pytest.mark.parametrize("k", [0, 7, -1])
def test_kth_pair_sum_rejects_out_of_range_k(k):
    with pytest.raises(ValueError):
        kth_pair_sum([1, 2], [3, 4, 5], k)


def test_kth_pair_sum_rejects_empty():
    with pytest.raises(ValueError):
        kth_pair_sum([], [1], 1)


@given(st.integers(min_value=1, max_value=25))
def test_multiplication_table_median_matches_table(n):
    cells = sorted(i * j for i in range(1, n + 1) for j in range(1, n + 1))
    assert multiplication_table_median(n) == cells[(n * n + 1) // 2 - 1]


def test_multiplication_table_median_of_one():
    assert multiplication_table_median(1) == 1


@pytest.mark.parametrize("n", [0, -3])
def test_multiplication_table_median_rejects_small_n(n):
    with pytest.raises(ValueError):
        multiplication_table_median(n)