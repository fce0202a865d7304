"""Binary search over monotone predicates and the searches built on it."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def first_true(
    lo: int, hi: int, predicate: Callable[[int], bool], default: T | None = None
) -> int | T | None:
    """Return the smallest ``x`` in ``[lo, hi]`` where ``predicate`` holds.

    The predicate must be false up to some point and true from there on.
    ``default`` is returned when it holds nowhere in the range.
    """
    answer: int | T | None = default
    while lo <= hi:
        mid = (lo + hi) // 2
        if predicate(mid):
            answer = mid
            hi = mid - 1
        else:
            lo = mid + 1
    return answer


def last_true(
    lo: int, hi: int, predicate: Callable[[int], bool], default: T | None = None
) -> int | T | None:
    """Return the largest ``x`` in ``[lo, hi]`` where ``predicate`` holds.

    The predicate must be true up to some point and false from there on.
    ``default`` is returned when it holds nowhere in the range.
    """
    answer: int | T | None = default
    while lo <= hi:
        mid = (lo + hi) // 2
        if predicate(mid):
            answer = mid
            lo = mid + 1
        else:
            hi = mid - 1
    return answer


def lower_bound(values: Sequence[Any], x: Any) -> int:
    """Index of the first element not less than ``x`` in sorted ``values``."""
    n = len(values)
    return first_true(0, n - 1, lambda i: values[i] >= x, n)


def upper_bound(values: Sequence[Any], x: Any) -> int:
    """Index of the first element greater than ``x`` in sorted ``values``."""
    n = len(values)
    return first_true(0, n - 1, lambda i: values[i] > x, n)


def _require_items(values: Sequence[Any]) -> int:
    if not values:
        raise ValueError("sequence must not be empty")
    return len(values)


def rotation_point(values: Sequence[Any]) -> int:
    """Index of the smallest element of a rotated ascending sequence.

    Returns 0 when the sequence is not rotated.
    """
    n = _require_items(values)
    first = values[0]
    return first_true(0, n - 1, lambda i: values[i] < first, 0)


def bitonic_peak(values: Sequence[Any]) -> int:
    """Index of the maximum of a strictly increasing-then-decreasing sequence."""
    n = _require_items(values)
    return first_true(
        0, n - 1, lambda i: i == n - 1 or values[i] > values[i + 1], n - 1
    )


def _find_descending(values: Sequence[Any], x: Any, lo: int, hi: int) -> int | None:
    while lo <= hi:
        mid = (lo + hi) // 2
        if values[mid] == x:
            return mid
        if values[mid] < x:
            hi = mid - 1
        else:
            lo = mid + 1
    return None


def bitonic_find(values: Sequence[Any], x: Any) -> list[int]:
    """Indices of ``x`` in a bitonic sequence: rising part first, then falling part."""
    n = len(values)
    if n == 0:
        return []
    peak = bitonic_peak(values)
    found: list[int] = []
    left = bisect_left(values, x, 0, peak + 1)
    if left <= peak and values[left] == x:
        found.append(left)
    right = _find_descending(values, x, peak + 1, n - 1)
    if right is not None:
        found.append(right)
    return found