"""Shortest paths: Bellman-Ford, Dijkstra, Floyd-Warshall and multistage graphs.

Unreachable vertices get a distance of ``math.inf``. An edge is a
``(u, v, weight)`` triple.
"""

from __future__ import annotations

import heapq
import math
from collections import deque
from typing import Iterable

Edge = tuple[int, int, float]


def _checked(n: int, edges: Iterable[Edge], first: int = 0) -> list[Edge]:
    if n < 1:
        raise ValueError("a graph needs at least one vertex")
    last = first + n - 1
    result = []
    for u, v, weight in edges:
        if not (first <= u <= last and first <= v <= last):
            raise ValueError(f"edge ({u}, {v}) has a vertex outside {first}..{last}")
        result.append((u, v, weight))
    return result


def _check_vertex(n: int, vertex: int, role: str) -> None:
    if not 0 <= vertex < n:
        raise ValueError(f"{role} {vertex} is outside 0..{n - 1}")


def _undirected(n: int, edges: list[Edge]) -> list[list[tuple[int, float]]]:
    adjacency: list[list[tuple[int, float]]] = [[] for _ in range(n)]
    for u, v, weight in edges:
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))
    return adjacency


def _nonnegative(edges: list[Edge]) -> None:
    if any(weight < 0 for _, _, weight in edges):
        raise ValueError("Dijkstra's algorithm needs non-negative weights")


def bellman_ford(n: int, edges: Iterable[Edge], source: int) -> list[float]:
    """Distances from ``source`` over directed edges on vertices 0..n-1.

    Runs n - 1 rounds of relaxation; negative weights are allowed.
    """
    checked = _checked(n, edges)
    _check_vertex(n, source, "source")
    dist = [math.inf] * n
    dist[source] = 0
    for _ in range(n - 1):
        for u, v, weight in checked:
            if dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return dist


def dijkstra(n: int, edges: Iterable[Edge], source: int) -> list[float]:
    """Distances from ``source`` over undirected edges, using a binary heap."""
    checked = _checked(n, edges)
    _check_vertex(n, source, "source")
    _nonnegative(checked)
    adjacency = _undirected(n, checked)
    dist = [math.inf] * n
    dist[source] = 0
    heap: list[tuple[float, int]] = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for v, weight in adjacency[u]:
            if d + weight < dist[v]:
                dist[v] = d + weight
                heapq.heappush(heap, (dist[v], v))
    return dist


def dijkstra_dense(n: int, edges: Iterable[Edge], source: int) -> list[float]:
    """Distances from ``source`` over undirected edges, scanning for the minimum each step."""
    checked = _checked(n, edges)
    _check_vertex(n, source, "source")
    _nonnegative(checked)
    adjacency = _undirected(n, checked)
    dist = [math.inf] * n
    dist[source] = 0
    unmarked = set(range(n))
    while unmarked:
        u = min(sorted(unmarked), key=dist.__getitem__)
        unmarked.discard(u)
        for v, weight in adjacency[u]:
            if dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return dist


def floyd_warshall(n: int, edges: Iterable[Edge]) -> list[list[float]]:
    """All-pairs distances over directed edges on vertices 1..n.

    ``result[i - 1][j - 1]`` is the distance from i to j. When an edge is
    given twice, the last weight counts.
    """
    checked = _checked(n, edges, first=1)
    dist = [[0 if i == j else math.inf for j in range(n)] for i in range(n)]
    for u, v, weight in checked:
        dist[u - 1][v - 1] = weight
    for k in range(n):
        through = dist[k]
        for row in dist:
            to_k = row[k]
            if to_k == math.inf:
                continue
            for j, via in enumerate(through):
                if to_k + via < row[j]:
                    row[j] = to_k + via
    return dist


def multistage_shortest_path(
    n: int, edges: Iterable[Edge], source: int, destination: int
) -> tuple[list[list[int]], list[float], list[int]]:
    """Solve a multistage graph whose vertices are numbered in stage order.

    Returns ``(stages, costs, path)``: the vertices at each BFS level from
    ``source``, the cost from each vertex to ``destination`` (computed
    backwards from ``destination - 1`` down to ``source``), and the path
    followed by always stepping to the cheapest successor.
    """
    checked = _checked(n, edges)
    _check_vertex(n, source, "source")
    _check_vertex(n, destination, "destination")
    adjacency: list[list[int]] = [[] for _ in range(n)]
    weight: dict[tuple[int, int], float] = {}
    for u, v, w in checked:
        adjacency[u].append(v)
        weight[u, v] = w

    level = [-1] * n
    level[source] = 0
    queue = deque([source])
    while queue:
        current = queue.popleft()
        for child in adjacency[current]:
            if level[child] == -1:
                level[child] = level[current] + 1
                queue.append(child)
    stages = [
        [v for v in range(n) if level[v] == depth] for depth in range(max(level) + 1)
    ]

    costs = [math.inf] * n
    costs[destination] = 0
    for u in range(destination - 1, source - 1, -1):
        for v in adjacency[u]:
            costs[u] = min(costs[u], weight[u, v] + costs[v])

    path = [source]
    seen = {source}
    current = source
    while current != destination:
        reachable = [v for v in adjacency[current] if costs[v] < math.inf]
        if not reachable:
            raise ValueError(f"no path from {source} to {destination}")
        current = min(reachable, key=costs.__getitem__)
        if current in seen:
            raise ValueError("the vertex numbering does not follow the stages")
        seen.add(current)
        path.append(current)
    return stages, costs, path