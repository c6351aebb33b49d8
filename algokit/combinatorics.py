"""Backtracking: permutations, subsets, N queens and graph colouring."""

from __future__ import annotations

from typing import Any, Iterable


def permutations(values: Iterable[Any]) -> list[list[Any]]:
    """Return every ordering of ``values``, generated by swapping into place."""
    items = list(values)
    result: list[list[Any]] = []

    def permute(idx: int) -> None:
        if idx >= len(items):
            result.append(list(items))
            return
        for j in range(idx, len(items)):
            items[idx], items[j] = items[j], items[idx]
            permute(idx + 1)
            items[idx], items[j] = items[j], items[idx]

    permute(0)
    return result


def subsets(values: Iterable[Any]) -> list[list[Any]]:
    """Return all subsets in bitmask order; bit j of the mask selects values[j]."""
    items = list(values)
    return [
        [item for bit, item in enumerate(items) if mask >> bit & 1]
        for mask in range(1 << len(items))
    ]


def solve_n_queens(n: int) -> list[list[int]] | None:
    """Place ``n`` queens on an n-by-n board; return the first board found (1 = queen) or None."""
    if n < 0:
        raise ValueError("n must be non-negative")
    columns: list[int] = []
    used: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> bool:
        if row >= n:
            return True
        for col in range(n):
            if col in used or row - col in diagonals or row + col in anti_diagonals:
                continue
            columns.append(col)
            used.add(col)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            if place(row + 1):
                return True
            columns.pop()
            used.discard(col)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)
        return False

    if not place(0):
        return None
    return [[1 if c == col else 0 for c in range(n)] for col in columns]


def m_coloring(n: int, edges: Iterable[tuple[int, int]], m: int) -> list[int] | None:
    """Colour vertices 0..n-1 with colours 1..m so no edge joins equal colours.

    Returns the first colouring found, or None when none exists.
    """
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) has a vertex outside 0..{n - 1}")
        adjacency[u].append(v)
        adjacency[v].append(u)
    colors = [0] * n

    def assign(node: int) -> bool:
        if node >= n:
            return True
        for color in range(1, m + 1):
            if all(colors[other] != color for other in adjacency[node]):
                colors[node] = color
                if assign(node + 1):
                    return True
                colors[node] = 0
        return False

    return list(colors) if assign(0) else None