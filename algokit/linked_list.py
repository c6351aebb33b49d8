"""A singly linked list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator


@dataclass(eq=False)
class _Node:
    data: Any
    next: _Node | None = None


class LinkedList:
    """A singly linked list with head, tail and positional insertion."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.insert_at_tail(value)

    def insert_at_head(self, data: Any) -> None:
        """Put ``data`` in front of the first node."""
        self._head = _Node(data, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def insert_at_tail(self, data: Any) -> None:
        """Put ``data`` after the last node."""
        node = _Node(data)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert(self, data: Any, position: int) -> None:
        """Insert ``data`` so it becomes the node at 1-based ``position``."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"position must be between 1 and {self._size + 1}")
        if position == 1:
            self.insert_at_head(data)
            return
        if position == self._size + 1:
            self.insert_at_tail(data)
            return
        node = self._head
        for _ in range(position - 2):
            node = node.next
        node.next = _Node(data, node.next)
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"