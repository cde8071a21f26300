"""Circular singly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class _Node:
    value: Any
    next: Optional["_Node"] = None


class CircularLinkedList:
    """A singly linked list whose last node links back to the first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def prepend(self, value: Any) -> None:
        """Insert value at the front of the list."""
        node = _Node(value)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._size += 1

    def append(self, value: Any) -> None:
        """Insert value at the end of the list."""
        self.prepend(value)
        self._tail = self._tail.next

    def pop_front(self) -> Any:
        """Remove and return the first value; IndexError if empty."""
        if self._tail is None:
            raise IndexError("pop from empty list")
        head = self._tail.next
        if head is self._tail:
            self._tail = None
        else:
            self._tail.next = head.next
        self._size -= 1
        return head.value

    def delete_at(self, position: int) -> Any:
        """Remove and return the value at 1-based position."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} is outside the list")
        if position == 1:
            return self.pop_front()
        previous = self._tail.next
        for _ in range(position - 2):
            previous = previous.next
        target = previous.next
        previous.next = target.next
        if target is self._tail:
            self._tail = previous
        self._size -= 1
        return target.value

    def __iter__(self) -> Iterator[Any]:
        if self._tail is None:
            return
        node = self._tail.next
        for _ in range(self._size):
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)