import random

import pytest

from algokit.tree_queries import AncestorTable, LowestCommonAncestor


def _random_parents(size, seed):
    rng = random.Random(seed)
    return [None] + [rng.randrange(i) for i in range(1, size)]


def _walk_up(parents, node, k):
    for _ in range(k):
        node = parents[node]
        if node is None:
            return None
    return node


def _path_to_root(parents, node):
    path = [node]
    while parents[node] is not None:
        node = parents[node]
        path.append(node)
    return path


def test_chain_ancestors():
    parents = [None, 0, 1, 2, 3]
    table = AncestorTable(parents)
    for k in range(5):
        assert table.kth_ancestor(4, k) == 4 - k
    assert table.kth_ancestor(4, 5) is None
    assert table.kth_ancestor(4, 1000) is None


def test_random_tree_ancestors_match_walking():
    parents = _random_parents(40, seed=1)
    table = AncestorTable(parents)
    for node in range(len(parents)):
        for k in range(45):
            assert table.kth_ancestor(node, k) == _walk_up(parents, node, k)


def test_ancestor_errors():
    table = AncestorTable([None, 0])
    with pytest.raises(ValueError):
        table.kth_ancestor(1, -1)
    with pytest.raises(IndexError):
        table.kth_ancestor(2, 1)
    with pytest.raises(ValueError):
        AncestorTable([None, 5])


def test_lca_matches_paths():
    parents = _random_parents(35, seed=2)
    edges = [(parent, child) for child, parent in enumerate(parents) if parent is not None]
    tree = LowestCommonAncestor(len(parents), edges)
    for a in range(len(parents)):
        path_a = _path_to_root(parents, a)
        for b in range(len(parents)):
            path_b = set(_path_to_root(parents, b))
            expected = next(node for node in path_a if node in path_b)
            assert tree.lca(a, b) == expected
            depth_a = len(path_a) - 1
            depth_b = len(path_b) - 1
            depth_l = len(_path_to_root(parents, expected)) - 1
            assert tree.distance(a, b) == depth_a + depth_b - 2 * depth_l


def test_chain_distance():
    n = 9
    edges = [(i, i + 1) for i in range(n - 1)]
    tree = LowestCommonAncestor(n, edges, root=0)
    for a in range(n):
        for b in range(n):
            assert tree.distance(a, b) == abs(a - b)
            assert tree.lca(a, b) == min(a, b)


def test_other_root():
    edges = [(0, 1), (1, 2), (1, 3)]
    tree = LowestCommonAncestor(4, edges, root=2)
    assert tree.lca(0, 3) == 1
    assert tree.lca(0, 2) == 2


def test_single_node():
    tree = LowestCommonAncestor(1, [])
    assert tree.lca(0, 0) == 0
    assert tree.distance(0, 0) == 0


def test_lca_errors():
    with pytest.raises(ValueError):
        LowestCommonAncestor(3, [(0, 1)])
    with pytest.raises(ValueError):
        LowestCommonAncestor(4, [(0, 1), (1, 0), (2, 3)])
    with pytest.raises(ValueError):
        LowestCommonAncestor(2, [(0, 2)])
    tree = LowestCommonAncestor(2, [(0, 1)])
    with pytest.raises(IndexError):
        tree.lca(0, 2)