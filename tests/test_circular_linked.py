import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.circular_linked import CircularLinkedList


def test_worked_example_from_driver():
    items = CircularLinkedList()
    for value in (1, 2, 3, 4):
        items.append(value)
    assert list(items) == [1, 2, 3, 4]
    items.prepend(5)
    assert list(items) == [5, 1, 2, 3, 4]
    assert items.delete_at(5) == 4
    assert list(items) == [5, 1, 2, 3]
    assert items.pop_front() == 5
    assert list(items) == [1, 2, 3]
    assert str(items) == "1 2 3"


def test_empty_list():
    items = CircularLinkedList()
    assert len(items) == 0
    assert list(items) == []
    with pytest.raises(IndexError):
        items.pop_front()


def test_pop_single_element_empties_list():
    items = CircularLinkedList([7])
    assert items.pop_front() == 7
    assert list(items) == []
    items.append(8)
    assert list(items) == [8]


def test_delete_tail_then_append():
    items = CircularLinkedList([1, 2, 3])
    assert items.delete_at(3) == 3
    items.append(9)
    assert list(items) == [1, 2, 9]


@pytest.mark.parametrize("position", [0, 4, -1])
def test_delete_out_of_range(position):
    items = CircularLinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        items.delete_at(position)


@given(st.lists(st.integers()))
def test_round_trip(values):
    items = CircularLinkedList(values)
    assert list(items) == values
    assert len(items) == len(values)


@given(st.lists(st.integers(), min_size=1), st.data())
def test_delete_at_matches_list(values, data):
    position = data.draw(st.integers(min_value=1, max_value=len(values)))
    items = CircularLinkedList(values)
    removed = items.delete_at(position)
    expected = list(values)
    assert removed == expected.pop(position - 1)
    assert list(items) == expected
    assert len(items) == len(expected)


@given(st.lists(st.integers()))
def test_prepend_reverses(values):
    items = CircularLinkedList()
    for value in values:
        items.prepend(value)
    assert list(items) == values[::-1]