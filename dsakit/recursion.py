"""Backtracking and recursion classics."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Optional, TypeVar

T = TypeVar("T")


def solve_n_queens(n: int) -> Optional[list[list[int]]]:
    """Place n queens on an n-by-n board so that none attack each other.

    Rows are filled top to bottom, trying columns left to right; the first
    placement found is returned as a grid of 0 and 1, or None if there is none.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    columns: list[int] = []

    def safe(row: int, col: int) -> bool:
        return all(
            placed != col and abs(placed - col) != row - r
            for r, placed in enumerate(columns)
        )

    def place(row: int) -> bool:
        if row == n:
            return True
        for col in range(n):
            if safe(row, col):
                columns.append(col)
                if place(row + 1):
                    return True
                columns.pop()
        return False

    if not place(0):
        return None
    return [[int(c == col) for c in range(n)] for col in columns]


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number; values of n below 2 are returned as is."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def subsequences(values: Iterable[T]) -> Iterator[list[T]]:
    """Yield every subsequence, taking each element before leaving it out."""
    items = list(values)

    def walk(index: int, chosen: list[T]) -> Iterator[list[T]]:
        if index == len(items):
            yield list(chosen)
            return
        chosen.append(items[index])
        yield from walk(index + 1, chosen)
        chosen.pop()
        yield from walk(index + 1, chosen)

    yield from walk(0, [])


def first_subset_with_sum(values: Iterable[int], target: int) -> Optional[list[int]]:
    """Return the first subsequence, in take-before-skip order, that sums
    to target, or None if none does."""
    return next((chosen for chosen in subsequences(values) if sum(chosen) == target), None)


def tower_of_hanoi(n: int, source: str, target: str, helper: str) -> list[tuple[str, str]]:
    """Return the moves, as (from, to) pairs, that carry n discs from
    source to target."""
    if n < 0:
        raise ValueError("number of discs must not be negative")
    moves: list[tuple[str, str]] = []

    def move(count: int, src: str, dest: str, spare: str) -> None:
        if count == 0:
            return
        move(count - 1, src, spare, dest)
        moves.append((src, dest))
        move(count - 1, spare, dest, src)

    move(n, source, target, helper)
    return moves