"""Singly linked lists: a list container and algorithms on raw node chains."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One link of a singly linked chain."""

    value: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list of values, appended at the tail."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add value at the end of the list."""
        node = Node(value)
        if self.head is None:
            self.head = node
        else:
            tail = self.head
            while tail.next is not None:
                tail = tail.next
            tail.next = node
        self._size += 1

    def prepend(self, value: Any) -> None:
        """Add value at the front of the list."""
        self.head = Node(value, self.head)
        self._size += 1

    def remove(self, value: Any) -> None:
        """Remove the first node holding value; ValueError if there is none."""
        previous: Optional[Node] = None
        current = self.head
        while current is not None:
            if current.value == value:
                if previous is None:
                    self.head = current.next
                else:
                    previous.next = current.next
                self._size -= 1
                return
            previous, current = current, current.next
        raise ValueError(f"{value!r} not found in list")

    def pop_front(self) -> Any:
        """Remove and return the first value; IndexError if the list is empty."""
        if self.head is None:
            raise IndexError("pop from empty list")
        node = self.head
        self.head = node.next
        self._size -= 1
        return node.value

    def __contains__(self, value: Any) -> bool:
        return any(item == value for item in self)

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self) + "NULL"


def _iter_nodes(head: Optional[Node]) -> Iterator[Node]:
    while head is not None:
        yield head
        head = head.next


def _node_at(head: Optional[Node], position: int) -> Node:
    if position >= 1:
        for index, node in enumerate(_iter_nodes(head), start=1):
            if index == position:
                return node
    raise ValueError(f"position {position} is outside the list")


def _tail(head: Optional[Node]) -> Node:
    if head is None:
        raise ValueError("list is empty")
    node = head
    while node.next is not None:
        node = node.next
    return node


def from_values(values: Iterable[Any]) -> Optional[Node]:
    """Build a chain holding values in order and return its head."""
    dummy = Node(None)
    tail = dummy
    for value in values:
        tail.next = Node(value)
        tail = tail.next
    return dummy.next


def to_values(head: Optional[Node]) -> list:
    """Values of the chain from head; ValueError if the chain loops."""
    seen: set[int] = set()
    values = []
    for node in _iter_nodes(head):
        if id(node) in seen:
            raise ValueError("list contains a cycle")
        seen.add(id(node))
        values.append(node.value)
    return values


def length(head: Optional[Node]) -> int:
    """Number of nodes in an acyclic chain."""
    return sum(1 for _ in _iter_nodes(head))


def reverse(head: Optional[Node]) -> Optional[Node]:
    """Reverse the chain in place and return the new head."""
    previous: Optional[Node] = None
    current = head
    while current is not None:
        following = current.next
        current.next = previous
        previous, current = current, following
    return previous


def reverse_recursive(head: Optional[Node]) -> Optional[Node]:
    """Reverse the chain in place by recursion and return the new head."""
    if head is None or head.next is None:
        return head
    new_head = reverse_recursive(head.next)
    head.next.next = head
    head.next = None
    return new_head


def reverse_in_groups(head: Optional[Node], k: int) -> Optional[Node]:
    """Reverse every run of k nodes; a shorter final run is reversed too."""
    if k < 1:
        raise ValueError("group size must be at least 1")
    new_head: Optional[Node] = None
    previous_tail: Optional[Node] = None
    current = head
    while current is not None:
        group_head = current
        previous: Optional[Node] = None
        for _ in range(k):
            if current is None:
                break
            following = current.next
            current.next = previous
            previous, current = current, following
        if previous_tail is None:
            new_head = previous
        else:
            previous_tail.next = previous
        previous_tail = group_head
    return new_head


def reverse_between(head: Optional[Node], left: int, right: int) -> Optional[Node]:
    """Reverse the nodes at 1-based positions left to right inclusive."""
    if not 1 <= left <= right <= length(head):
        raise ValueError("positions must satisfy 1 <= left <= right <= length")
    dummy = Node(None, head)
    before = dummy
    for _ in range(left - 1):
        before = before.next
    start = before.next
    previous: Optional[Node] = None
    current = start
    for _ in range(right - left + 1):
        following = current.next
        current.next = previous
        previous, current = current, following
    before.next = previous
    start.next = current
    return dummy.next


def remove_elements(head: Optional[Node], value: Any) -> Optional[Node]:
    """Unlink every node holding value and return the new head."""
    dummy = Node(None, head)
    node = dummy
    while node.next is not None:
        if node.next.value == value:
            node.next = node.next.next
        else:
            node = node.next
    return dummy.next


def merge_sorted(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Splice two ascending chains into one ascending chain."""
    dummy = Node(None)
    tail = dummy
    while first is not None and second is not None:
        if first.value <= second.value:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return dummy.next


def sort_list(head: Optional[Node]) -> Optional[Node]:
    """Sort the chain by merge sort and return the new head."""
    if head is None or head.next is None:
        return head
    before_middle = head
    slow = fast = head
    while fast is not None and fast.next is not None:
        before_middle = slow
        slow = slow.next
        fast = fast.next.next
    before_middle.next = None
    return merge_sorted(sort_list(head), sort_list(slow))


def is_palindrome(head: Optional[Node]) -> bool:
    """True when the values read the same both ways; the chain is restored."""
    if head is None or head.next is None:
        return True
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next
        fast = fast.next.next
    second = reverse(slow.next)
    slow.next = second
    result = True
    left, right = head, second
    while right is not None:
        if left.value != right.value:
            result = False
            break
        left, right = left.next, right.next
    slow.next = reverse(second)
    return result


def make_cycle(head: Optional[Node], position: int) -> None:
    """Link the tail back to the node at 1-based position."""
    target = _node_at(head, position)
    _tail(head).next = target


def has_cycle(head: Optional[Node]) -> bool:
    """Detect a loop with slow and fast pointers."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def remove_cycle(head: Optional[Node]) -> bool:
    """Break a loop in the chain; return True if there was one."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            break
    else:
        return False
    slow = head
    while slow is not fast:
        slow = slow.next
        fast = fast.next
    node = slow
    while node.next is not slow:
        node = node.next
    node.next = None
    return True


def intersect(first: Optional[Node], second: Optional[Node], position: int) -> None:
    """Join the tail of second to the node of first at 1-based position."""
    target = _node_at(first, position)
    _tail(second).next = target


def intersection_value(first: Optional[Node], second: Optional[Node]) -> Any:
    """Value of the first node shared by both chains, or None if they never meet."""
    len_first, len_second = length(first), length(second)
    longer, shorter = (first, second) if len_first > len_second else (second, first)
    for _ in range(abs(len_first - len_second)):
        longer = longer.next
    while longer is not None and shorter is not None:
        if longer is shorter:
            return longer.value
        longer, shorter = longer.next, shorter.next
    return None