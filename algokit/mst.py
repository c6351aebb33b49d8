"""Minimum spanning trees by Kruskal's and Prim's algorithms.

Vertices are numbered 1..n; an edge is a ``(u, v, weight)`` triple.
"""

from __future__ import annotations

import math
from typing import Iterable

from .dsu import DisjointSet

Edge = tuple[int, int, float]


def _checked(n: int, edges: Iterable[Edge]) -> list[Edge]:
    if n < 1:
        raise ValueError("a graph needs at least one vertex")
    result = []
    for u, v, weight in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) has a vertex outside 1..{n}")
        result.append((u, v, weight))
    return result


def kruskal(n: int, edges: Iterable[Edge]) -> tuple[float, list[Edge]]:
    """Return the total weight and chosen edges of a minimum spanning forest.

    Edges are taken by weight, then by endpoints, so ties resolve the same
    way every time.
    """
    checked = _checked(n, edges)
    forest = DisjointSet(range(1, n + 1))
    chosen: list[Edge] = []
    total: float = 0
    for u, v, weight in sorted(checked, key=lambda e: (e[2], e[0], e[1])):
        if forest.union(u, v):
            chosen.append((u, v, weight))
            total += weight
    return total, chosen


def prim(n: int, edges: Iterable[Edge]) -> tuple[float, list[Edge]]:
    """Return the total weight and ``(parent, vertex, weight)`` edges of an MST grown from 1.

    The edges are listed for vertices 2..n in order. A disconnected graph
    raises ValueError.
    """
    checked = _checked(n, edges)
    adjacency: list[list[tuple[int, float]]] = [[] for _ in range(n + 1)]
    for u, v, weight in checked:
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))

    key: list[float] = [math.inf] * (n + 1)
    parent: list[int] = [0] * (n + 1)
    in_tree = [False] * (n + 1)
    key[1] = 0
    for _ in range(n):
        u = min(
            (v for v in range(1, n + 1) if not in_tree[v]),
            key=key.__getitem__,
        )
        if key[u] == math.inf:
            raise ValueError("the graph is not connected")
        in_tree[u] = True
        for v, weight in adjacency[u]:
            if not in_tree[v] and weight < key[v]:
                parent[v] = u
                key[v] = weight

    tree = [(parent[v], v, key[v]) for v in range(2, n + 1)]
    return sum(weight for _, _, weight in tree), tree