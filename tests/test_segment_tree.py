import random

import pytest

from algokit.segment_tree import LazySumSegmentTree, MinSegmentTree

VALUES = [5, -2, 8, 3, 3, 0, 7, 11, -6, 4]


def _all_ranges(size):
    for left in range(size):
        for right in range(left, size):
            yield left, right


def test_min_query_matches_slices():
    tree = MinSegmentTree(VALUES)
    for left, right in _all_ranges(len(VALUES)):
        assert tree.query(left, right) == min(VALUES[left : right + 1])


def test_min_updates_are_seen():
    rng = random.Random(7)
    expected = list(VALUES)
    tree = MinSegmentTree(VALUES)
    for _ in range(50):
        position = rng.randrange(len(expected))
        value = rng.randint(-20, 20)
        tree.update(position, value)
        expected[position] = value
        left = rng.randrange(len(expected))
        right = rng.randrange(left, len(expected))
        assert tree.query(left, right) == min(expected[left : right + 1])


def test_min_single_item():
    tree = MinSegmentTree([9])
    tree.update(0, 4)
    assert tree.query(0, 0) == 4


def test_min_errors():
    with pytest.raises(ValueError):
        MinSegmentTree([])
    tree = MinSegmentTree(VALUES)
    with pytest.raises(IndexError):
        tree.update(len(VALUES), 1)
    with pytest.raises(IndexError):
        tree.query(0, len(VALUES))
    with pytest.raises(ValueError):
        tree.query(5, 2)


def test_lazy_query_without_updates():
    tree = LazySumSegmentTree(VALUES)
    for left, right in _all_ranges(len(VALUES)):
        assert tree.query(left, right) == sum(VALUES[left : right + 1])


def test_lazy_range_adds_match_list():
    rng = random.Random(11)
    expected = list(VALUES)
    tree = LazySumSegmentTree(VALUES)
    for _ in range(60):
        left = rng.randrange(len(expected))
        right = rng.randrange(left, len(expected))
        delta = rng.randint(-5, 5)
        tree.range_add(left, right, delta)
        for i in range(left, right + 1):
            expected[i] += delta
        for point in range(len(expected)):
            assert tree.query(point, point) == expected[point]
    for left, right in _all_ranges(len(expected)):
        assert tree.query(left, right) == sum(expected[left : right + 1])


def test_lazy_add_to_everything():
    tree = LazySumSegmentTree(VALUES)
    tree.range_add(0, len(VALUES) - 1, 2)
    assert tree.query(0, len(VALUES) - 1) == sum(VALUES) + 2 * len(VALUES)


def test_lazy_errors():
    with pytest.raises(ValueError):
        LazySumSegmentTree([])
    tree = LazySumSegmentTree(VALUES)
    with pytest.raises(IndexError):
        tree.range_add(-1, 3, 1)
    with pytest.raises(ValueError):
        tree.query(3, 1)