"""Heap-based selection and sorting."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence


def sort_nearly_sorted(values: Iterable[int], k: int) -> list[int]:
    """Sort values in which every element is at most k places from its
    sorted position, using a min-heap of size k + 1."""
    if k < 0:
        raise ValueError("k must not be negative")
    heap: list[int] = []
    result: list[int] = []
    for value in values:
        heapq.heappush(heap, value)
        if len(heap) > k:
            result.append(heapq.heappop(heap))
    while heap:
        result.append(heapq.heappop(heap))
    return result


def kth_smallest(values: Sequence[int], k: int) -> int:
    """Return the k-th smallest value (1-based) using a bounded max-heap."""
    if not 1 <= k <= len(values):
        raise ValueError("k must lie between 1 and the number of values")
    heap: list[int] = []
    for value in values:
        heapq.heappush(heap, -value)
        if len(heap) > k:
            heapq.heappop(heap)
    return -heap[0]