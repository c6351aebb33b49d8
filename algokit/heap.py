"""Binary heaps stored in plain lists."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, MutableSequence


def _sift_down(
    values: MutableSequence[Any],
    index: int,
    size: int,
    before: Callable[[Any, Any], bool],
) -> None:
    while True:
        chosen = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and before(values[child], values[chosen]):
                chosen = child
        if chosen == index:
            return
        values[chosen], values[index] = values[index], values[chosen]
        index = chosen


def max_heapify(values: MutableSequence[Any], index: int, size: int) -> None:
    """Sift ``values[index]`` down so the first ``size`` items form a max-heap below it."""
    _sift_down(values, index, size, lambda a, b: a > b)


def min_heapify(values: MutableSequence[Any], index: int, size: int) -> None:
    """Sift ``values[index]`` down so the first ``size`` items form a min-heap below it."""
    _sift_down(values, index, size, lambda a, b: a < b)


def build_max_heap(values: MutableSequence[Any]) -> None:
    """Rearrange ``values`` in place into a max-heap."""
    size = len(values)
    for index in range(size // 2, -1, -1):
        max_heapify(values, index, size)


def build_min_heap(values: MutableSequence[Any]) -> None:
    """Rearrange ``values`` in place into a min-heap."""
    size = len(values)
    for index in range(size // 2, -1, -1):
        min_heapify(values, index, size)


class MaxHeap:
    """A max-heap; iteration yields the items in storage order."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items = list(values)
        build_max_heap(self._items)

    def push(self, value: Any) -> None:
        """Add ``value`` and sift it up to its place."""
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if not items[parent] < items[index]:
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def pop(self) -> Any:
        """Remove and return the largest item."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            max_heapify(self._items, 0, len(self._items))
        return top

    def peek(self) -> Any:
        """Return the largest item without removing it."""
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))