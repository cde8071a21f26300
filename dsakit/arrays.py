"""Classic array problems: subarray sums, pairs, triplets and duplicates."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import accumulate
from typing import Optional


def max_subarray_sum(values: Sequence[int]) -> int:
    """Kadane's maximum subarray sum.

    The running sum is reset to zero whenever it turns negative, so a
    sequence of only negative numbers yields 0.
    """
    if not values:
        raise ValueError("values must not be empty")
    best = None
    current = 0
    for value in values:
        current = max(current + value, 0)
        best = current if best is None else max(best, current)
    return best


def max_subarray_sum_brute(values: Sequence[int]) -> int:
    """Maximum sum over all non-empty contiguous subarrays, by enumeration."""
    if not values:
        raise ValueError("values must not be empty")
    return max(subarray_sums(values))


def three_sum(nums: Sequence[int]) -> list[tuple[int, int, int]]:
    """Return the distinct ascending triplets of nums that sum to zero."""
    ordered = sorted(nums)
    size = len(ordered)
    triplets = []
    for i, first in enumerate(ordered):
        if i > 0 and first == ordered[i - 1]:
            continue
        target = -first
        j, k = i + 1, size - 1
        while j < k:
            pair = ordered[j] + ordered[k]
            if pair < target:
                j += 1
            elif pair > target:
                k -= 1
            else:
                triplets.append((first, ordered[j], ordered[k]))
                while j < size - 1 and ordered[j] == ordered[j + 1]:
                    j += 1
                while k > 0 and ordered[k] == ordered[k - 1]:
                    k -= 1
                j += 1
                k -= 1
    return triplets


def has_dominant_element(values: Sequence) -> bool:
    """True when exactly one value reaches the highest frequency."""
    counts = Counter(values)
    if not counts:
        return False
    top = max(counts.values())
    return sum(1 for count in counts.values() if count == top) == 1


def find_duplicates(nums: Sequence) -> list:
    """Return each value occurring more than once, listed once.

    A value is reported at its second-to-last occurrence, which fixes the order.
    """
    remaining = Counter(nums)
    duplicates = []
    for value in nums:
        if remaining[value] == 2:
            duplicates.append(value)
        remaining[value] -= 1
    return duplicates


def longest_arithmetic_subarray(values: Sequence[int]) -> int:
    """Length of the longest contiguous run with a constant difference."""
    if len(values) < 2:
        raise ValueError("at least two values are required")
    best = current = 2
    difference = values[1] - values[0]
    for previous, value in zip(values[1:], values[2:]):
        step = value - previous
        if step == difference:
            current += 1
        else:
            difference = step
            current = 2
        best = max(best, current)
    return best


def merge_sorted(first: Sequence, second: Sequence) -> list:
    """Merge two ascending sequences into one ascending list."""
    merged = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] <= second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def rank_positions(values: Sequence) -> list[int]:
    """Replace each value by its zero-based rank in sorted order."""
    order = sorted(range(len(values)), key=values.__getitem__)
    ranks = [0] * len(values)
    for rank, index in enumerate(order):
        ranks[index] = rank
    return ranks


def find_pair_with_sum(
    sorted_values: Sequence[int], target: int
) -> Optional[tuple[int, int]]:
    """Indices of two elements of an ascending sequence summing to target."""
    low, high = 0, len(sorted_values) - 1
    while low < high:
        total = sorted_values[low] + sorted_values[high]
        if total == target:
            return low, high
        if total > target:
            high -= 1
        else:
            low += 1
    return None


def subarray_sums(values: Sequence[int]) -> list[int]:
    """Sums of every contiguous subarray, grouped by start index."""
    return [
        total
        for start in range(len(values))
        for total in accumulate(values[start:])
    ]


def subarray_with_sum(
    values: Sequence[int], target: int
) -> Optional[tuple[int, int]]:
    """One-based inclusive bounds of the first window of non-negative values
    that adds up to target, or None when there is none."""
    if any(value < 0 for value in values):
        raise ValueError("values must be non-negative")
    start = 0
    current = 0
    for last, value in enumerate(values):
        current += value
        if current >= target:
            while target < current and start < last:
                current -= values[start]
                start += 1
            if current == target:
                return start + 1, last + 1
    return None


def reverse_list(values: Sequence) -> list:
    """Return the elements in reverse order, swapping from both ends."""
    result = list(values)
    size = len(result)
    for i in range(size // 2):
        result[i], result[size - i - 1] = result[size - i - 1], result[i]
    return result


def xor_swap(a: int, b: int) -> tuple[int, int]:
    """Swap two integers with exclusive-or and return them as (b, a)."""
    a ^= b
    b ^= a
    a ^= b
    return a, b