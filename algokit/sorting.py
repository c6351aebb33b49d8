"""Classic sorting algorithms and small array helpers.

Every function takes an iterable and returns a new list.
"""

from __future__ import annotations

from typing import Any, Iterable

from .heap import build_max_heap, max_heapify


def bubble_sort(values: Iterable[Any]) -> list:
    """Sort by repeatedly swapping adjacent out-of-order items."""
    items = list(values)
    size = len(items)
    for done in range(1, size):
        for i in range(size - done):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def counting_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by counting occurrences."""
    items = list(values)
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("counting sort needs non-negative integers")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def dutch_flag_sort(values: Iterable[int]) -> list[int]:
    """Three-way partition: 0s first, 2s last, everything else in between."""
    items = list(values)
    lo, mid, hi = 0, 0, len(items) - 1
    while mid <= hi:
        if items[mid] == 0:
            items[mid], items[lo] = items[lo], items[mid]
            lo += 1
            mid += 1
        elif items[mid] == 2:
            items[mid], items[hi] = items[hi], items[mid]
            hi -= 1
        else:
            mid += 1
    return items


def heap_sort(values: Iterable[Any]) -> list:
    """Sort with a max-heap."""
    items = list(values)
    build_max_heap(items)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        max_heapify(items, 0, end)
    return items


def insertion_sort(values: Iterable[Any]) -> list:
    """Sort by inserting each item into the sorted prefix."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and current < items[j]:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def _merge(left: list, right: list) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list:
    """Sort by splitting in halves and merging."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list, lo: int, hi: int) -> int:
    pivot = items[lo]
    i, j = lo, hi
    while i < j:
        while i <= hi and items[i] <= pivot:
            i += 1
        while items[j] > pivot:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[lo], items[j] = items[j], items[lo]
    return j


def quick_sort(values: Iterable[Any]) -> list:
    """Sort by partitioning around the first item of each range."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        lo, hi = pending.pop()
        if lo < hi:
            pivot = _partition(items, lo, hi)
            pending.append((lo, pivot - 1))
            pending.append((pivot + 1, hi))
    return items


def selection_sort(values: Iterable[Any]) -> list:
    """Sort by moving the smallest remaining item to the front."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def wave_sort(values: Iterable[Any]) -> list:
    """Arrange items so that a[0] >= a[1] <= a[2] >= a[3] <= ..."""
    items = list(values)
    size = len(items)
    for i in range(1, size, 2):
        if items[i] > items[i - 1]:
            items[i], items[i - 1] = items[i - 1], items[i]
        if i + 1 < size and items[i] > items[i + 1]:
            items[i], items[i + 1] = items[i + 1], items[i]
    return items


def reverse(values: Iterable[Any]) -> list:
    """Return the items in reverse order."""
    return list(reversed(list(values)))


def insert_at(values: Iterable[Any], index: int, value: Any, capacity: int = 10) -> list:
    """Return a copy with ``value`` inserted at ``index`` in an array of fixed ``capacity``."""
    items = list(values)
    if index < 0 or index >= capacity:
        raise IndexError("Index is out of bounds")
    if index > len(items):
        raise IndexError("index is past the end of the array")
    if len(items) >= capacity:
        raise IndexError("array is full")
    items.insert(index, value)
    return items