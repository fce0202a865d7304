"""Searching on a distance: shrinking the widest gap, spreading points apart."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise

from .searching import first_true, last_true

MAX_GAP = 10**9


def min_max_gap(values: Sequence[int], insertions: int) -> int:
    """Smallest achievable largest gap after adding at most ``insertions`` points.

    ``values`` are ascending positions; candidate gaps run from 1 to ``MAX_GAP``.
    """
    if insertions < 0:
        raise ValueError("insertions must not be negative")

    def achievable(gap: int) -> bool:
        needed = 0
        for a, b in pairwise(values):
            distance = b - a
            if distance > gap:
                needed += (distance + gap - 1) // gap - 1
                if needed > insertions:
                    return False
        return needed <= insertions

    answer = first_true(1, MAX_GAP, achievable)
    if answer is None:
        raise ValueError("no gap within range is achievable")
    return answer


def max_min_distance(positions: Sequence[int], count: int) -> int:
    """Largest minimum distance when placing ``count`` items on ``positions``."""
    if not positions:
        raise ValueError("positions must not be empty")
    ordered = sorted(positions)

    def placeable(distance: int) -> bool:
        placed = 1
        previous = ordered[0]
        for spot in ordered[1:]:
            if previous + distance <= spot:
                placed += 1
                previous = spot
        return placed >= count

    answer = last_true(1, ordered[-1] - ordered[0], placeable)
    if answer is None:
        raise ValueError("items cannot be placed at a positive distance")
    return answer