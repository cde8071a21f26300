from collections import deque

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.doubly_linked import DoublyLinkedList


def test_rotate_worked_example():
    items = DoublyLinkedList([1, 2, 3, 4, 5, 6])
    items.rotate(3)
    assert list(items) == [4, 5, 6, 1, 2, 3]
    assert list(reversed(items)) == [3, 2, 1, 6, 5, 4]


def test_str_format():
    assert str(DoublyLinkedList([1, 2])) == "1->2->"
    assert str(DoublyLinkedList()) == ""


def test_prepend_and_pop():
    items = DoublyLinkedList([2, 3])
    items.prepend(1)
    assert list(items) == [1, 2, 3]
    assert items.pop_front() == 1
    assert list(reversed(items)) == [3, 2]


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        DoublyLinkedList().pop_front()


@pytest.mark.parametrize("position", [0, 3, -2])
def test_delete_out_of_range(position):
    with pytest.raises(IndexError):
        DoublyLinkedList([1, 2]).delete_at(position)


def test_rotate_empty_is_noop():
    items = DoublyLinkedList()
    items.rotate(4)
    assert list(items) == []


@given(st.lists(st.integers()))
def test_round_trip_both_directions(values):
    items = DoublyLinkedList(values)
    assert list(items) == values
    assert list(reversed(items)) == values[::-1]
    assert len(items) == len(values)


@given(st.lists(st.integers(), min_size=1), st.integers(min_value=-50, max_value=50))
def test_rotate_matches_deque(values, k):
    items = DoublyLinkedList(values)
    items.rotate(k)
    expected = deque(values)
    expected.rotate(k)
    assert list(items) == list(expected)
    assert list(reversed(items)) == list(reversed(expected))


@given(st.lists(st.integers(), min_size=1), st.data())
def test_delete_at_matches_list(values, data):
    position = data.draw(st.integers(min_value=1, max_value=len(values)))
    items = DoublyLinkedList(values)
    expected = list(values)
    assert items.delete_at(position) == expected.pop(position - 1)
    assert list(items) == expected
    assert list(reversed(items)) == expected[::-1]
    items.append("end")
    assert list(items)[-1] == "end"