"""A Fenwick (binary indexed) tree for prefix sums with point updates."""

from __future__ import annotations

from typing import Iterable


class FenwickTree:
    """Prefix sums over a list of numbers that supports point updates.

    Positions are 0-based. ``prefix_sum(count)`` sums the first ``count``
    items; ``range_sum(left, right)`` includes both ends.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        items = list(values)
        self._size = len(items)
        self._tree = [0] * (self._size + 1)
        for index, value in enumerate(items):
            self.add(index, value)

    def __len__(self) -> int:
        return self._size

    def _check(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} is outside 0..{self._size - 1}")

    def add(self, index: int, delta: int) -> None:
        """Add ``delta`` to the item at ``index``."""
        self._check(index)
        k = index + 1
        while k <= self._size:
            self._tree[k] += delta
            k += k & -k

    def prefix_sum(self, index: int) -> int:
        """Return the sum of the first ``index`` items."""
        if not 0 <= index <= self._size:
            raise IndexError(f"count {index} is outside 0..{self._size}")
        total = 0
        k = index
        while k > 0:
            total += self._tree[k]
            k -= k & -k
        return total

    def range_sum(self, left: int, right: int) -> int:
        """Return the sum of the items from ``left`` to ``right`` inclusive."""
        self._check(left)
        self._check(right)
        if left > right:
            raise ValueError("left must not exceed right")
        return self.prefix_sum(right + 1) - self.prefix_sum(left)

    def set(self, index: int, value: int) -> None:
        """Replace the item at ``index`` with ``value``."""
        self.add(index, value - self.range_sum(index, index))