import pytest

from algokit.dsu import DisjointSet


def test_singletons():
    dsu = DisjointSet(range(1, 6))
    assert dsu.component_count() == len(dsu)
    for v in range(1, 6):
        assert dsu.find(v) == v


def test_union_joins_sets():
    dsu = DisjointSet(range(1, 6))
    assert dsu.union(1, 2) is True
    assert dsu.union(3, 4) is True
    assert dsu.find(1) == dsu.find(2)
    assert dsu.find(3) == dsu.find(4)
    assert dsu.find(1) != dsu.find(3)
    assert dsu.component_count() == 3


def test_union_of_same_set_is_false():
    dsu = DisjointSet("abc")
    dsu.union("a", "b")
    assert dsu.union("b", "a") is False
    assert dsu.component_count() == len(dsu) - 1


def test_long_chain_collapses():
    dsu = DisjointSet(range(100))
    for v in range(99):
        dsu.union(v, v + 1)
    root = dsu.find(0)
    assert all(dsu.find(v) == root for v in range(100))
    assert dsu.component_count() == 1


def test_add_existing_keeps_set():
    dsu = DisjointSet([1, 2])
    dsu.union(1, 2)
    dsu.add(2)
    assert dsu.find(2) == dsu.find(1)
    dsu.add(7)
    assert 7 in dsu
    assert dsu.find(7) == 7


def test_unknown_element():
    dsu = DisjointSet([1])
    with pytest.raises(KeyError):
        dsu.find(2)
    with pytest.raises(KeyError):
        dsu.union(1, 2)