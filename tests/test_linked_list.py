import pytest

from algokit.linked_list import LinkedList


def test_construction_keeps_order():
    values = [5, 3, 8, 1]
    linked = LinkedList(values)
    assert list(linked) == values
    assert len(linked) == len(values)


def test_insert_at_head():
    values = [2, 3]
    linked = LinkedList(values)
    linked.insert_at_head(1)
    assert list(linked) == [1] + values
    assert len(linked) == 3


def test_insert_at_tail():
    values = [2, 3]
    linked = LinkedList(values)
    linked.insert_at_tail(4)
    assert list(linked) == values + [4]


def test_insert_in_middle():
    linked = LinkedList([1, 2, 3])
    linked.insert(9, 2)
    assert list(linked) == [1, 9, 2, 3]


def test_insert_at_ends_by_position():
    values = [1, 2, 3]
    linked = LinkedList(values)
    linked.insert(0, 1)
    linked.insert(4, len(linked) + 1)
    assert list(linked) == [0] + values + [4]
    linked.insert_at_tail(5)
    assert list(linked)[-1] == 5


def test_empty_list():
    linked = LinkedList()
    assert list(linked) == []
    assert len(linked) == 0
    linked.insert(7, 1)
    assert list(linked) == [7]


@pytest.mark.parametrize("position", [0, -1, 5])
def test_insert_out_of_range(position):
    linked = LinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        linked.insert(9, position)