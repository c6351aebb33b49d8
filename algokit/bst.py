"""An unbalanced binary search tree; equal values go to the left."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable


@dataclass(eq=False)
class _Node:
    data: Any
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """A binary search tree that keeps duplicates."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add ``value``; values not greater than a node go to its left."""
        node = _Node(value)
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if value <= current.data:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def delete(self, value: Any) -> None:
        """Remove one occurrence of ``value``; do nothing if it is absent."""
        parent: _Node | None = None
        node = self._root
        while node is not None and node.data != value:
            parent = node
            node = node.left if value < node.data else node.right
        if node is None:
            return
        if node.left is not None and node.right is not None:
            successor_parent, successor = node, node.right
            while successor.left is not None:
                successor_parent, successor = successor, successor.left
            node.data = successor.data
            parent, node = successor_parent, successor
        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def find_min(self) -> Any:
        """Return the smallest value."""
        if self._root is None:
            raise ValueError("the tree is empty")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.data

    def inorder(self) -> list[Any]:
        """Return the values in ascending order."""
        result: list[Any] = []
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.data)
            node = node.right
        return result