"""Longest and counted subarrays found by binary search on their length or end."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate
from typing import Any

from .searching import last_true


def longest_ones_with_flips(bits: Sequence[int], flips: int) -> int:
    """Length of the longest run of ones after turning at most ``flips`` zeros into ones."""
    if flips < 0:
        raise ValueError("flips must not be negative")
    n = len(bits)
    prefix = list(accumulate(bits, initial=0))

    def fits(length: int) -> bool:
        return any(
            length - (prefix[start + length] - prefix[start]) <= flips
            for start in range(n - length + 1)
        )

    return last_true(0, n, fits, 0)


def longest_subarray_sum_at_most(values: Sequence[int], limit: int) -> int:
    """Length of the longest contiguous run of non-negative ``values`` summing to at most ``limit``."""
    if any(v < 0 for v in values):
        raise ValueError("values must not be negative")
    n = len(values)
    prefix = list(accumulate(values, initial=0))

    def last_end(start: int) -> int:
        base = prefix[start]
        return last_true(
            start, n - 1, lambda end: prefix[end + 1] - base <= limit, start - 1
        )

    return max((last_end(start) - start + 1 for start in range(n)), default=0)


def count_subarrays_at_most_k_distinct(values: Sequence[Any], k: int) -> int:
    """Number of contiguous subarrays of ``values`` holding at most ``k`` distinct items."""
    n = len(values)

    def last_end(start: int) -> int:
        return last_true(
            start,
            n - 1,
            lambda end: len(set(values[start : end + 1])) <= k,
            start - 1,
        )

    return sum(last_end(start) - start + 1 for start in range(n))