import pytest

from algokit.fenwick import FenwickTree

VALUES = [3, 2, 4, 5, 1, 1, 5, 3]


def test_range_sums_match_slices():
    tree = FenwickTree(VALUES)
    for left in range(len(VALUES)):
        for right in range(left, len(VALUES)):
            assert tree.range_sum(left, right) == sum(VALUES[left : right + 1])


def test_prefix_sum_counts_leading_items():
    tree = FenwickTree(VALUES)
    for count in range(len(VALUES) + 1):
        assert tree.prefix_sum(count) == sum(VALUES[:count])


def test_sample_queries():
    tree = FenwickTree(VALUES)
    assert tree.range_sum(0, 3) == 14
    assert tree.range_sum(4, 5) == 2
    tree.set(2, 1)
    assert tree.range_sum(0, 3) == 11


def test_set_replaces_item():
    tree = FenwickTree(VALUES)
    tree.set(5, 40)
    expected = list(VALUES)
    expected[5] = 40
    assert tree.range_sum(5, 5) == 40
    for left in range(len(expected)):
        for right in range(left, len(expected)):
            assert tree.range_sum(left, right) == sum(expected[left : right + 1])


def test_add_accumulates():
    tree = FenwickTree(VALUES)
    tree.add(0, 10)
    tree.add(0, -3)
    assert tree.prefix_sum(1) == VALUES[0] + 7
    assert tree.prefix_sum(len(VALUES)) == sum(VALUES) + 7


def test_empty_tree():
    tree = FenwickTree()
    assert len(tree) == 0
    assert tree.prefix_sum(0) == 0


def test_out_of_range_indices():
    tree = FenwickTree(VALUES)
    with pytest.raises(IndexError):
        tree.add(len(VALUES), 1)
    with pytest.raises(IndexError):
        tree.range_sum(-1, 2)
    with pytest.raises(IndexError):
        tree.prefix_sum(len(VALUES) + 1)


def test_reversed_range_is_rejected():
    tree = FenwickTree(VALUES)
    with pytest.raises(ValueError):
        tree.range_sum(4, 2)