"""A disjoint-set union with path compression and union by size."""

from __future__ import annotations

from typing import Hashable, Iterable


class DisjointSet:
    """Partition of hashable elements into disjoint sets."""

    def __init__(self, elements: Iterable[Hashable] = ()) -> None:
        self._parent: dict[Hashable, Hashable] = {}
        self._size: dict[Hashable, int] = {}
        for element in elements:
            self.add(element)

    def __len__(self) -> int:
        return len(self._parent)

    def __contains__(self, v: object) -> bool:
        return v in self._parent

    def add(self, v: Hashable) -> None:
        """Make ``v`` a singleton set; an element already present is left alone."""
        if v not in self._parent:
            self._parent[v] = v
            self._size[v] = 1

    def find(self, v: Hashable) -> Hashable:
        """Return the representative of the set holding ``v``."""
        parent = self._parent
        if v not in parent:
            raise KeyError(v)
        root = v
        while parent[root] != root:
            root = parent[root]
        while parent[v] != root:
            parent[v], v = root, parent[v]
        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Merge the sets of ``a`` and ``b``; return False if they were already one."""
        a = self.find(a)
        b = self.find(b)
        if a == b:
            return False
        if self._size[a] < self._size[b]:
            a, b = b, a
        self._parent[b] = a
        self._size[a] += self._size[b]
        return True

    def component_count(self) -> int:
        """Return the number of disjoint sets."""
        return sum(1 for element, parent in self._parent.items() if element == parent)