"""Singly linked list with deletion, reversal and merge sort."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

__all__ = ["LinkedList", "Node"]


@dataclass(eq=False)
class Node:
    """One cell of a singly linked list."""

    data: Any
    next: Node | None = field(default=None, repr=False)


def _merge(first: Node | None, second: Node | None) -> Node | None:
    """Merge two sorted chains; on ties the node from first comes first."""
    anchor = Node(None)
    tail = anchor
    while first is not None and second is not None:
        if first.data <= second.data:
            tail.next = first
            first = first.next
        else:
            tail.next = second
            second = second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return anchor.next


def _sort_chain(head: Node | None) -> Node | None:
    if head is None or head.next is None:
        return head
    slow, fast = head, head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    second = slow.next
    slow.next = None
    return _merge(_sort_chain(head), _sort_chain(second))


class LinkedList:
    """A singly linked list of values, iterated from head to tail."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._size = 0
        for value in reversed(list(values)):
            self.push(value)

    def push(self, value: Any) -> None:
        """Insert value at the front of the list."""
        self.head = Node(value, self.head)
        self._size += 1

    def append(self, value: Any) -> None:
        """Insert value at the end of the list."""
        node = Node(value)
        if self.head is None:
            self.head = node
        else:
            tail = self.head
            while tail.next is not None:
                tail = tail.next
            tail.next = node
        self._size += 1

    def delete(self, key: Any) -> bool:
        """Remove the first node holding key; return whether one was found."""
        previous: Node | None = None
        current = self.head
        while current is not None and current.data != key:
            previous, current = current, current.next
        if current is None:
            return False
        if previous is None:
            self.head = current.next
        else:
            previous.next = current.next
        self._size -= 1
        return True

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous: Node | None = None
        current = self.head
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self.head = previous

    def merge_sort(self) -> None:
        """Sort the list in place, stably, by relinking its nodes."""
        self.head = _sort_chain(self.head)

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"