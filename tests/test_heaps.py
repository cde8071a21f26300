from collections import Counter

import pytest
from hypothesis import given, strategies as st

from dsakit.heaps import kth_smallest, sort_nearly_sorted


def test_sort_nearly_sorted_example():
    values = [6, 5, 3, 2, 8, 10, 9]
    assert sort_nearly_sorted(values, 3) == sorted(values)


@given(st.lists(st.integers()), st.integers(min_value=0, max_value=10))
def test_sort_nearly_sorted_is_permutation(values, k):
    result = sort_nearly_sorted(values, k)
    assert Counter(result) == Counter(values)


@given(st.lists(st.integers(), max_size=30))
def test_sort_nearly_sorted_with_wide_window_sorts(values):
    assert sort_nearly_sorted(values, max(len(values) - 1, 0)) == sorted(values)


@given(st.lists(st.integers(), max_size=30), st.data())
def test_sort_nearly_sorted_handles_displaced_input(values, data):
    ordered = sorted(values)
    k = data.draw(st.integers(min_value=0, max_value=3))
    shuffled = list(ordered)
    for start in range(0, len(shuffled), k + 1):
        block = shuffled[start : start + k + 1]
        shuffled[start : start + k + 1] = block[::-1]
    assert sort_nearly_sorted(shuffled, k) == ordered


def test_sort_nearly_sorted_negative_k():
    with pytest.raises(ValueError):
        sort_nearly_sorted([1, 2], -1)


def test_kth_smallest_source_values():
    values = [1, 2, 3, 4, 5, 6, 7, 8, 9]
    for k in range(1, 10):
        assert kth_smallest(values, k) == values[k - 1]


@given(st.lists(st.integers(), min_size=1), st.data())
def test_kth_smallest_matches_sorted_position(values, data):
    k = data.draw(st.integers(min_value=1, max_value=len(values)))
    assert kth_smallest(values, k) == sorted(values)[k - 1]


@pytest.mark.parametrize("k", [0, 4, -1])
def test_kth_smallest_out_of_range(k):
    with pytest.raises(ValueError):
        kth_smallest([3, 1, 2], k)