import pytest

from algokit.searching import binary_search, max_subarray_sum

SORTED = [2, 5, 9, 23, 45, 89, 98, 423]


@pytest.mark.parametrize("target", SORTED)
def test_binary_search_finds_every_element(target):
    index = binary_search(SORTED, target)
    assert SORTED[index] == target


def test_binary_search_position():
    assert binary_search(SORTED, 45) == SORTED.index(45)


@pytest.mark.parametrize("target", [0, 3, 24, 424, -1])
def test_binary_search_missing(target):
    assert binary_search(SORTED, target) is None


def test_binary_search_empty():
    assert binary_search([], 1) is None


def test_binary_search_duplicates():
    values = [1, 2, 2, 2, 3]
    assert values[binary_search(values, 2)] == 2


def test_max_subarray_sum_example():
    assert max_subarray_sum([2, -1, 2, 3, 4, -5]) == 10


def test_max_subarray_sum_all_negative_picks_largest():
    values = [-8, -3, -6, -2, -5]
    assert max_subarray_sum(values) == max(values)


def test_max_subarray_sum_all_positive_is_total():
    values = [1, 2, 3, 4]
    assert max_subarray_sum(values) == sum(values)


def test_max_subarray_sum_single():
    assert max_subarray_sum([-7]) == -7


def test_max_subarray_sum_at_least_each_element_and_total():
    values = [3, -4, 5, -1, 2, -6, 4, 1]
    result = max_subarray_sum(values)
    assert result >= max(values)
    assert result >= sum(values)


def test_max_subarray_sum_accepts_iterator():
    assert max_subarray_sum(iter([2, -1, 2, 3, 4, -5])) == 10


def test_max_subarray_sum_empty_raises():
    with pytest.raises(ValueError):
        max_subarray_sum([])