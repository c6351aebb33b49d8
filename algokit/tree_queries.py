"""Binary lifting on rooted trees: k-th ancestors and lowest common ancestors."""

from __future__ import annotations

from typing import Iterable, Sequence


class AncestorTable:
    """Answers k-th ancestor queries on a forest given by parent pointers.

    ``parents[v]`` is the parent of node ``v``, or None for a root.
    """

    def __init__(self, parents: Sequence[int | None]) -> None:
        first = list(parents)
        size = len(first)
        for node, parent in enumerate(first):
            if parent is not None and not 0 <= parent < size:
                raise ValueError(f"parent {parent} of node {node} is not a node")
        table = [first]
        for _ in range(1, max(1, size.bit_length())):
            previous = table[-1]
            table.append([None if p is None else previous[p] for p in previous])
        self._up = table
        self._size = size

    def kth_ancestor(self, node: int, k: int) -> int | None:
        """Return the node ``k`` steps above ``node``, or None if there is none."""
        if not 0 <= node < self._size:
            raise IndexError(f"node {node} is outside 0..{self._size - 1}")
        if k < 0:
            raise ValueError("k must be non-negative")
        if k >= 1 << len(self._up):
            return None
        current: int | None = node
        for level, row in enumerate(self._up):
            if k >> level & 1:
                current = row[current]
                if current is None:
                    return None
        return current


class LowestCommonAncestor:
    """Lowest common ancestors and distances in a tree on nodes 0..n-1."""

    def __init__(self, n: int, edges: Iterable[tuple[int, int]], root: int = 0) -> None:
        if n < 1:
            raise ValueError("a tree needs at least one node")
        if not 0 <= root < n:
            raise ValueError(f"root {root} is outside 0..{n - 1}")
        adjacency: list[list[int]] = [[] for _ in range(n)]
        count = 0
        for a, b in edges:
            if not (0 <= a < n and 0 <= b < n):
                raise ValueError(f"edge ({a}, {b}) has a node outside 0..{n - 1}")
            adjacency[a].append(b)
            adjacency[b].append(a)
            count += 1
        if count != n - 1:
            raise ValueError("a tree on n nodes has exactly n - 1 edges")

        depth = [-1] * n
        parent = [root] * n
        depth[root] = 0
        stack = [root]
        while stack:
            node = stack.pop()
            for child in adjacency[node]:
                if depth[child] == -1:
                    depth[child] = depth[node] + 1
                    parent[child] = node
                    stack.append(child)
        if -1 in depth:
            raise ValueError("the edges do not connect all nodes")

        up = [parent]
        for _ in range(1, max(1, (n - 1).bit_length())):
            previous = up[-1]
            up.append([previous[previous[v]] for v in range(n)])
        self._up = up
        self._depth = depth
        self._size = n

    def _check(self, node: int) -> None:
        if not 0 <= node < self._size:
            raise IndexError(f"node {node} is outside 0..{self._size - 1}")

    def lca(self, a: int, b: int) -> int:
        """Return the deepest node that is an ancestor of both ``a`` and ``b``."""
        self._check(a)
        self._check(b)
        depth = self._depth
        if depth[a] < depth[b]:
            a, b = b, a
        diff = depth[a] - depth[b]
        for level, row in enumerate(self._up):
            if diff >> level & 1:
                a = row[a]
        if a == b:
            return a
        for row in reversed(self._up):
            if row[a] != row[b]:
                a = row[a]
                b = row[b]
        return self._up[0][a]

    def distance(self, a: int, b: int) -> int:
        """Return the number of edges on the path between ``a`` and ``b``."""
        ancestor = self.lca(a, b)
        return self._depth[a] + self._depth[b] - 2 * self._depth[ancestor]