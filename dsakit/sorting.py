"""Sorting routines and binary search over integer sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Optional, TypeVar

T = TypeVar("T")


def _lomuto_partition(items: list, low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def _first_pivot_partition(items: list, start: int, end: int) -> int:
    pivot = items[start]
    smaller = sum(1 for value in items[start + 1 : end + 1] if value <= pivot)
    pivot_index = start + smaller
    items[pivot_index], items[start] = items[start], items[pivot_index]

    i, j = start, end
    while i < pivot_index < j:
        while items[i] <= pivot:
            i += 1
        while items[j] > pivot:
            j -= 1
        if i < pivot_index < j:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1
    return pivot_index


def _quicksort_with(items: Iterable[T], partition) -> list[T]:
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = partition(result, low, high)
        pending.append((low, pivot - 1))
        pending.append((pivot + 1, high))
    return result


def quicksort(items: Iterable[T]) -> list[T]:
    """Return a sorted copy using quicksort with the last element as pivot."""
    return _quicksort_with(items, _lomuto_partition)


def quicksort_first_pivot(items: Iterable[T]) -> list[T]:
    """Return a sorted copy using quicksort with the first element as pivot."""
    return _quicksort_with(items, _first_pivot_partition)


def insertion_sort(items: Iterable[T]) -> list[T]:
    """Return a sorted copy using insertion sort."""
    result = list(items)
    for i in range(1, len(result)):
        current = result[i]
        j = i - 1
        while j >= 0 and result[j] > current:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result


def selection_sort(items: Iterable[T]) -> list[T]:
    """Return a sorted copy using selection sort."""
    result = list(items)
    for i in range(len(result)):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        if smallest != i:
            result[i], result[smallest] = result[smallest], result[i]
    return result


def _merge(first: list, second: list) -> list:
    merged = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def merge_sort(items: Iterable[T]) -> list[T]:
    """Return a sorted copy using top-down merge sort."""
    result = list(items)
    if len(result) <= 1:
        return result
    mid = (len(result) - 1) // 2 + 1
    return _merge(merge_sort(result[:mid]), merge_sort(result[mid:]))


def _sift_down(items: list, size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heapsort(items: Iterable[T]) -> list[T]:
    """Return a sorted copy using an in-place max-heap."""
    result = list(items)
    size = len(result)
    for i in range(size // 2 - 1, -1, -1):
        _sift_down(result, size, i)
    for end in range(size - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, end, 0)
    return result


def binary_search(sorted_items: Sequence[T], target: T) -> Optional[int]:
    """Return an index of target in an ascending sequence, or None if absent."""
    low, high = 0, len(sorted_items) - 1
    while low <= high:
        mid = (low + high) // 2
        value = sorted_items[mid]
        if value == target:
            return mid
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
    return None