"""A self-balancing AVL tree of distinct values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator


@dataclass(eq=False)
class _Node:
    data: Any
    left: _Node | None = None
    right: _Node | None = None
    height: int = 1


def _height(node: _Node | None) -> int:
    return node.height if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: _Node | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(top: _Node) -> _Node:
    pivot = top.left
    top.left = pivot.right
    pivot.right = top
    _update(top)
    _update(pivot)
    return pivot


def _rotate_left(top: _Node) -> _Node:
    pivot = top.right
    top.right = pivot.left
    pivot.left = top
    _update(top)
    _update(pivot)
    return pivot


def _insert(node: _Node | None, value: Any) -> _Node:
    if node is None:
        return _Node(value)
    if value < node.data:
        node.left = _insert(node.left, value)
    elif value > node.data:
        node.right = _insert(node.right, value)
    else:
        return node
    _update(node)
    balance = _balance(node)
    if balance > 1 and value < node.left.data:
        return _rotate_right(node)
    if balance < -1 and value > node.right.data:
        return _rotate_left(node)
    if balance > 1 and value > node.left.data:
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1 and value < node.right.data:
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _delete(node: _Node | None, value: Any) -> _Node | None:
    if node is None:
        return None
    if value < node.data:
        node.left = _delete(node.left, value)
    elif value > node.data:
        node.right = _delete(node.right, value)
    else:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.data = successor.data
        node.right = _delete(node.right, successor.data)
    _update(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _walk(node: _Node | None, order: str) -> Iterator[Any]:
    if node is None:
        return
    if order == "pre":
        yield node.data
    yield from _walk(node.left, order)
    if order == "in":
        yield node.data
    yield from _walk(node.right, order)
    if order == "post":
        yield node.data


class AVLTree:
    """An AVL tree; inserting a value already present does nothing."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add ``value`` and rebalance."""
        self._root = _insert(self._root, value)

    def delete(self, value: Any) -> None:
        """Remove ``value`` if present and rebalance."""
        self._root = _delete(self._root, value)

    def height(self) -> int:
        """Number of levels; 0 for an empty tree."""
        return _height(self._root)

    def preorder(self) -> list[Any]:
        """Values in node-left-right order."""
        return list(_walk(self._root, "pre"))

    def inorder(self) -> list[Any]:
        """Values in ascending order."""
        return list(_walk(self._root, "in"))

    def postorder(self) -> list[Any]:
        """Values in left-right-node order."""
        return list(_walk(self._root, "post"))