"""Doubly linked list with rotation."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class _Node:
    value: Any
    prev: Optional["_Node"] = None
    next: Optional["_Node"] = None


class DoublyLinkedList:
    """A list whose nodes link both forwards and backwards."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def prepend(self, value: Any) -> None:
        """Insert value at the front."""
        node = _Node(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def append(self, value: Any) -> None:
        """Insert value at the end."""
        node = _Node(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _unlink(self, node: _Node) -> Any:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def pop_front(self) -> Any:
        """Remove and return the first value; IndexError if empty."""
        if self._head is None:
            raise IndexError("pop from empty list")
        return self._unlink(self._head)

    def delete_at(self, position: int) -> Any:
        """Remove and return the value at 1-based position."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} is outside the list")
        node = self._head
        for _ in range(position - 1):
            node = node.next
        return self._unlink(node)

    def rotate(self, k: int) -> None:
        """Move the last k nodes, in order, to the front."""
        if self._size == 0:
            return
        k %= self._size
        if k == 0:
            return
        new_tail = self._head
        for _ in range(self._size - k - 1):
            new_tail = new_tail.next
        new_head = new_tail.next
        self._tail.next = self._head
        self._head.prev = self._tail
        new_tail.next = None
        new_head.prev = None
        self._head, self._tail = new_head, new_tail

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self)