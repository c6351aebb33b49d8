"""Searching in sorted sequences and maximum subarray sums."""

from __future__ import annotations

from typing import Any, Iterable, Sequence


def binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in ascending ``values``, or None if absent."""
    lo, hi = 0, len(values) - 1
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            hi = mid - 1
        else:
            lo = mid + 1
    return None


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane's algorithm)."""
    iterator = iter(values)
    try:
        first = next(iterator)
    except StopIteration:
        raise ValueError("max_subarray_sum needs at least one value") from None
    best = current = first
    for value in iterator:
        current = current + value if current >= 0 else value
        best = max(best, current)
    return best