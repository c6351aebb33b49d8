"""Offline range queries with Mo's algorithm (square-root decomposition)."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence


def count_self_frequent(
    values: Iterable[int],
    queries: Iterable[tuple[int, int]],
    block: int = 360,
) -> list[int]:
    """For each inclusive 0-based range, count positive x occurring exactly x times in it.

    Answers come back in the order of ``queries``; ``block`` is the bucket
    width used to order the queries.
    """
    items: Sequence[int] = list(values)
    ranges = list(queries)
    if block <= 0:
        raise ValueError("block must be positive")
    for left, right in ranges:
        if not (0 <= left < len(items) and 0 <= right < len(items)):
            raise IndexError(f"query ({left}, {right}) is outside the values")
        if left > right:
            raise ValueError("left must not exceed right")

    order = sorted(
        range(len(ranges)),
        key=lambda i: (ranges[i][0] // block, ranges[i][1]),
    )
    counts: Counter[int] = Counter()
    answer = 0

    def shift(position: int, step: int) -> None:
        nonlocal answer
        value = items[position]
        if value > 0 and counts[value] == value:
            answer -= 1
        counts[value] += step
        if value > 0 and counts[value] == value:
            answer += 1

    results = [0] * len(ranges)
    lo, hi = 0, -1
    for index in order:
        left, right = ranges[index]
        while lo > left:
            lo -= 1
            shift(lo, 1)
        while hi < right:
            hi += 1
            shift(hi, 1)
        while lo < left:
            shift(lo, -1)
            lo += 1
        while hi > right:
            shift(hi, -1)
            hi -= 1
        results[index] = answer
    return results