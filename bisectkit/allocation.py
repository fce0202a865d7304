"""Minimising the largest load or the finishing time by searching on the answer."""

from __future__ import annotations

from collections.abc import Sequence

from .searching import first_true


def painter_partition(lengths: Sequence[int], painters: int) -> int:
    """Least time in which ``painters`` can paint consecutive boards of ``lengths``.

    Each painter takes a contiguous run of boards and paints one unit per second.
    """
    if painters < 1:
        raise ValueError("painters must be at least 1")

    def fits(limit: int) -> bool:
        spawned = 0
        left = 0
        for length in lengths:
            if left >= length:
                left -= length
                continue
            spawned += 1
            if spawned > painters or limit < length:
                return False
            left = limit - length
        return True

    return first_true(0, sum(lengths), fits, -1)


def array_division(values: Sequence[int], parts: int) -> int:
    """Smallest possible maximum sum when splitting ``values`` into ``parts`` runs."""
    if parts < 1:
        raise ValueError("parts must be at least 1")

    def possible(limit: int) -> bool:
        used = 1
        current = 0
        for work in values:
            if current + work <= limit:
                current += work
                continue
            if used == parts or work > limit:
                return False
            used += 1
            current = work
        return True

    return first_true(max(values, default=0), sum(values), possible, -1)


def factory_time(machine_times: Sequence[int], target: int) -> int:
    """Least time for machines working in parallel to make ``target`` products.

    Machine ``i`` takes ``machine_times[i]`` seconds per product.
    """
    if not machine_times:
        raise ValueError("at least one machine is required")
    if any(t <= 0 for t in machine_times):
        raise ValueError("machine times must be positive")

    def enough(elapsed: int) -> bool:
        made = 0
        for per_item in machine_times:
            made += elapsed // per_item
            if made >= target:
                return True
        return made >= target

    return first_true(0, max(machine_times) * target, enough, -1)