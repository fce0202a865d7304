"""Order statistics found by searching on the value instead of sorting."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence

from .searching import first_true


def kth_pair_sum(first: Sequence[int], second: Sequence[int], k: int) -> int:
    """The ``k``-th smallest of all sums ``a + b`` with ``a`` from ``first``, ``b`` from ``second``.

    ``k`` counts from 1 over all ``len(first) * len(second)`` pairs.
    """
    if not first or not second:
        raise ValueError("both sequences must be non-empty")
    pairs = len(first) * len(second)
    if not 1 <= k <= pairs:
        raise ValueError(f"k must lie between 1 and {pairs}")

    small, large = sorted(first), sorted(second)
    if len(small) > len(large):
        small, large = large, small

    def enough(limit: int) -> bool:
        return sum(bisect_right(large, limit - a) for a in small) >= k

    return first_true(small[0] + large[0], small[-1] + large[-1], enough)


def multiplication_table_median(n: int) -> int:
    """Median of the ``n`` by ``n`` multiplication table.

    For an even number of cells the lower of the two middle values is returned.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    middle = (n * n + 1) // 2

    def enough(limit: int) -> bool:
        return sum(min(n, limit // row) for row in range(1, n + 1)) >= middle

    return first_true(1, n * n, enough)