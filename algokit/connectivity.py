"""Articulation points and bridges of undirected graphs (Tarjan's low-link method)."""

from __future__ import annotations

from typing import Iterable


def _adjacency(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    if n < 0:
        raise ValueError("n must be non-negative")
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) has a vertex outside 0..{n - 1}")
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def articulation_points(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return, in ascending order, the vertices whose removal disconnects their component."""
    adjacency = _adjacency(n, edges)
    tin = [0] * n
    low = [0] * n
    marked = [False] * n
    timer = 1
    for root in range(n):
        if tin[root]:
            continue
        tin[root] = low[root] = timer
        timer += 1
        root_children = 0
        stack = [(root, None, iter(adjacency[root]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for child in neighbours:
                if tin[child]:
                    low[node] = min(low[node], tin[child])
                    continue
                tin[child] = low[child] = timer
                timer += 1
                stack.append((child, node, iter(adjacency[child])))
                break
            else:
                stack.pop()
                if parent is not None:
                    low[parent] = min(low[parent], low[node])
                    if parent == root:
                        root_children += 1
                    elif low[node] >= tin[parent]:
                        marked[parent] = True
        if root_children > 1:
            marked[root] = True
    return [v for v in range(n) if marked[v]]


def bridges(n: int, edges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Return the edges whose removal disconnects the graph, as sorted ``(low, high)`` pairs."""
    adjacency = _adjacency(n, edges)
    tin = [0] * n
    low = [0] * n
    found: list[tuple[int, int]] = []
    timer = 1
    for root in range(n):
        if tin[root]:
            continue
        tin[root] = low[root] = timer
        timer += 1
        stack = [(root, None, iter(adjacency[root]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for child in neighbours:
                if child == parent:
                    continue
                if tin[child]:
                    low[node] = min(low[node], low[child])
                    continue
                tin[child] = low[child] = timer
                timer += 1
                stack.append((child, node, iter(adjacency[child])))
                break
            else:
                stack.pop()
                if parent is not None:
                    low[parent] = min(low[parent], low[node])
                    if low[node] > tin[parent]:
                        found.append((min(parent, node), max(parent, node)))
    return sorted(found)