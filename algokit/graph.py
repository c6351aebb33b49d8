"""Adjacency-list graphs with traversals, cycle checks, topological order and bipartiteness."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator


class Graph:
    """A directed or undirected graph on integer vertices.

    Neighbours keep the order in which edges were added. Traversals start
    from every vertex that has outgoing edges, in ascending order.
    """

    def __init__(self, directed: bool = False) -> None:
        self.directed = directed
        self._adjacency: dict[int, list[int]] = {}

    def add_edge(self, a: int, b: int) -> None:
        """Add an edge from ``a`` to ``b`` (and back, if undirected)."""
        self._adjacency.setdefault(a, []).append(b)
        if not self.directed:
            self._adjacency.setdefault(b, []).append(a)

    def _unlink(self, a: int, b: int) -> None:
        try:
            self._adjacency[a].remove(b)
        except (KeyError, ValueError):
            raise KeyError(f"no edge from {a} to {b}") from None

    def remove_edge(self, a: int, b: int) -> None:
        """Remove one edge between ``a`` and ``b``; KeyError if there is none."""
        self._unlink(a, b)
        if not self.directed:
            self._unlink(b, a)

    def _neighbours(self, v: int) -> list[int]:
        return self._adjacency.get(v, [])

    def _starts(self) -> list[int]:
        return sorted(v for v, targets in self._adjacency.items() if targets)

    def _depth_first(self) -> Iterator[tuple[int, bool]]:
        """Yield (vertex, True) on entering and (vertex, False) on leaving."""
        visited: set[int] = set()
        for start in self._starts():
            if start in visited:
                continue
            visited.add(start)
            yield start, True
            stack = [(start, iter(self._neighbours(start)))]
            while stack:
                vertex, neighbours = stack[-1]
                for w in neighbours:
                    if w not in visited:
                        visited.add(w)
                        yield w, True
                        stack.append((w, iter(self._neighbours(w))))
                        break
                else:
                    stack.pop()
                    yield vertex, False

    def dfs(self) -> list[int]:
        """Vertices in depth-first preorder."""
        return [v for v, entering in self._depth_first() if entering]

    def bfs(self) -> list[int]:
        """Vertices in breadth-first order."""
        visited: set[int] = set()
        order: list[int] = []
        for start in self._starts():
            if start in visited:
                continue
            visited.add(start)
            order.append(start)
            queue = deque([start])
            while queue:
                for w in self._neighbours(queue.popleft()):
                    if w not in visited:
                        visited.add(w)
                        order.append(w)
                        queue.append(w)
        return order

    def has_cycle(self) -> bool:
        """Tell whether the graph contains a cycle."""
        return self._has_directed_cycle() if self.directed else self._has_undirected_cycle()

    def _has_undirected_cycle(self) -> bool:
        visited: set[int] = set()
        for start in self._starts():
            if start in visited:
                continue
            visited.add(start)
            stack = [(start, None, iter(self._neighbours(start)))]
            while stack:
                vertex, parent, neighbours = stack[-1]
                for w in neighbours:
                    if w == parent:
                        continue
                    if w in visited:
                        return True
                    visited.add(w)
                    stack.append((w, vertex, iter(self._neighbours(w))))
                    break
                else:
                    stack.pop()
        return False

    def _has_directed_cycle(self) -> bool:
        finished: set[int] = set()
        on_path: set[int] = set()
        for start in self._starts():
            if start in finished:
                continue
            on_path.add(start)
            stack = [(start, iter(self._neighbours(start)))]
            while stack:
                vertex, neighbours = stack[-1]
                for w in neighbours:
                    if w in on_path:
                        return True
                    if w not in finished:
                        on_path.add(w)
                        stack.append((w, iter(self._neighbours(w))))
                        break
                else:
                    stack.pop()
                    on_path.discard(vertex)
                    finished.add(vertex)
        return False

    def topological_sort(self) -> list[int]:
        """Vertices in reverse depth-first postorder; needs a directed acyclic graph."""
        if not self.directed:
            raise ValueError("topological order needs a directed graph")
        if self.has_cycle():
            raise ValueError("the graph has a cycle")
        finished = [v for v, entering in self._depth_first() if not entering]
        return finished[::-1]


def is_bipartite(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Tell whether the undirected graph on vertices 1..n can be two-coloured."""
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) has a vertex outside 1..{n}")
        adjacency[a].append(b)
        adjacency[b].append(a)
    colour = [0] * (n + 1)
    for start in range(1, n + 1):
        if colour[start]:
            continue
        colour[start] = 1
        queue = deque([start])
        while queue:
            vertex = queue.popleft()
            for other in adjacency[vertex]:
                if colour[other] == colour[vertex]:
                    return False
                if not colour[other]:
                    colour[other] = 3 - colour[vertex]
                    queue.append(other)
    return True