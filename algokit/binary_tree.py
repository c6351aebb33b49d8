"""Binary trees built from level-order lists, with traversals and LCA."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterable, Iterator


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare by identity."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_tree(values: Iterable[Any]) -> TreeNode | None:
    """Build a complete tree: the children of item i are items 2i+1 and 2i+2."""
    nodes = [TreeNode(value) for value in values]
    if not nodes:
        return None
    for index, node in enumerate(nodes):
        left, right = 2 * index + 1, 2 * index + 2
        if left < len(nodes):
            node.left = nodes[left]
        if right < len(nodes):
            node.right = nodes[right]
    return nodes[0]


def _preorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield node.data
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.data
        yield from _inorder(node.right)


def _postorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.data


def preorder(root: TreeNode | None) -> list[Any]:
    """Node, left subtree, right subtree."""
    return list(_preorder(root))


def inorder(root: TreeNode | None) -> list[Any]:
    """Left subtree, node, right subtree."""
    return list(_inorder(root))


def postorder(root: TreeNode | None) -> list[Any]:
    """Left subtree, right subtree, node."""
    return list(_postorder(root))


def level_order(root: TreeNode | None) -> list[Any]:
    """Breadth-first, left to right."""
    if root is None:
        return []
    result = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        result.append(node.data)
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return result


def lowest_common_ancestor(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """Return the deepest node having both ``p`` and ``q`` below or at it.

    If only one of them is in the tree, that one is returned; if neither, None.
    """
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is None:
        return right
    if right is None:
        return left
    return root