"""Segment trees: range minimum with point updates, range sum with range adds."""

from __future__ import annotations

from typing import Iterable


def _require_items(values: Iterable[int]) -> list[int]:
    items = list(values)
    if not items:
        raise ValueError("a segment tree needs at least one value")
    return items


def _check_range(size: int, left: int, right: int) -> None:
    if not (0 <= left < size and 0 <= right < size):
        raise IndexError(f"range ({left}, {right}) is outside 0..{size - 1}")
    if left > right:
        raise ValueError("left must not exceed right")


class MinSegmentTree:
    """Minimum over inclusive 0-based ranges, with point assignment."""

    def __init__(self, values: Iterable[int]) -> None:
        items = _require_items(values)
        self._size = len(items)
        self._tree = [0] * (4 * self._size)
        self._build(0, 0, self._size - 1, items)

    def __len__(self) -> int:
        return self._size

    def _build(self, idx: int, lo: int, hi: int, items: list[int]) -> None:
        if lo == hi:
            self._tree[idx] = items[lo]
            return
        mid = (lo + hi) // 2
        self._build(2 * idx + 1, lo, mid, items)
        self._build(2 * idx + 2, mid + 1, hi, items)
        self._tree[idx] = min(self._tree[2 * idx + 1], self._tree[2 * idx + 2])

    def update(self, position: int, value: int) -> None:
        """Set the item at ``position`` to ``value``."""
        if not 0 <= position < self._size:
            raise IndexError(f"position {position} is outside 0..{self._size - 1}")
        self._update(position, value, 0, 0, self._size - 1)

    def _update(self, pos: int, value: int, idx: int, lo: int, hi: int) -> None:
        if lo == hi:
            self._tree[idx] = value
            return
        mid = (lo + hi) // 2
        if pos <= mid:
            self._update(pos, value, 2 * idx + 1, lo, mid)
        else:
            self._update(pos, value, 2 * idx + 2, mid + 1, hi)
        self._tree[idx] = min(self._tree[2 * idx + 1], self._tree[2 * idx + 2])

    def query(self, left: int, right: int) -> int:
        """Return the smallest item from ``left`` to ``right`` inclusive."""
        _check_range(self._size, left, right)
        return self._query(left, right, 0, 0, self._size - 1)

    def _query(self, x: int, y: int, idx: int, lo: int, hi: int) -> int:
        if x <= lo and hi <= y:
            return self._tree[idx]
        mid = (lo + hi) // 2
        if y <= mid:
            return self._query(x, y, 2 * idx + 1, lo, mid)
        if x > mid:
            return self._query(x, y, 2 * idx + 2, mid + 1, hi)
        return min(
            self._query(x, y, 2 * idx + 1, lo, mid),
            self._query(x, y, 2 * idx + 2, mid + 1, hi),
        )


class LazySumSegmentTree:
    """Sums over inclusive 0-based ranges, with lazily applied range additions."""

    def __init__(self, values: Iterable[int]) -> None:
        items = _require_items(values)
        self._size = len(items)
        self._tree = [0] * (4 * self._size)
        self._lazy = [0] * (4 * self._size)
        self._build(0, 0, self._size - 1, items)

    def __len__(self) -> int:
        return self._size

    def _build(self, idx: int, lo: int, hi: int, items: list[int]) -> None:
        if lo == hi:
            self._tree[idx] = items[lo]
            return
        mid = lo + (hi - lo) // 2
        self._build(2 * idx + 1, lo, mid, items)
        self._build(2 * idx + 2, mid + 1, hi, items)
        self._tree[idx] = self._tree[2 * idx + 1] + self._tree[2 * idx + 2]

    def _push(self, idx: int, lo: int, hi: int) -> None:
        pending = self._lazy[idx]
        if pending:
            self._tree[idx] += (hi - lo + 1) * pending
            if lo < hi:
                self._lazy[2 * idx + 1] += pending
                self._lazy[2 * idx + 2] += pending
            self._lazy[idx] = 0

    def range_add(self, left: int, right: int, delta: int) -> None:
        """Add ``delta`` to every item from ``left`` to ``right`` inclusive."""
        _check_range(self._size, left, right)
        self._add(0, 0, self._size - 1, left, right, delta)

    def _add(self, idx: int, lo: int, hi: int, x: int, y: int, delta: int) -> None:
        self._push(idx, lo, hi)
        if y < lo or hi < x:
            return
        if x <= lo and hi <= y:
            self._tree[idx] += (hi - lo + 1) * delta
            if lo < hi:
                self._lazy[2 * idx + 1] += delta
                self._lazy[2 * idx + 2] += delta
            return
        mid = lo + (hi - lo) // 2
        self._add(2 * idx + 1, lo, mid, x, y, delta)
        self._add(2 * idx + 2, mid + 1, hi, x, y, delta)
        self._tree[idx] = self._tree[2 * idx + 1] + self._tree[2 * idx + 2]

    def query(self, left: int, right: int) -> int:
        """Return the sum of the items from ``left`` to ``right`` inclusive."""
        _check_range(self._size, left, right)
        return self._query(0, 0, self._size - 1, left, right)

    def _query(self, idx: int, lo: int, hi: int, x: int, y: int) -> int:
        self._push(idx, lo, hi)
        if y < lo or hi < x:
            return 0
        if x <= lo and hi <= y:
            return self._tree[idx]
        mid = lo + (hi - lo) // 2
        return self._query(2 * idx + 1, lo, mid, x, y) + self._query(
            2 * idx + 2, mid + 1, hi, x, y
        )