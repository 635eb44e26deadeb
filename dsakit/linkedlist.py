"""A singly linked list of integers with head and tail references."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice


@dataclass
class Node:
    """One link of a :class:`LinkedList`."""

    val: int
    next: Node | None = None


class LinkedList:
    """Singly linked list that tracks its head, tail and length."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Node | None = None
        self.tail: Node | None = None
        self.length = 0
        for value in values:
            self.insert_at_end(value)

    def _nodes(self) -> Iterator[Node]:
        current = self.head
        while current is not None:
            yield current
            current = current.next

    def _node_at(self, index: int) -> Node:
        return next(islice(self._nodes(), index, None))

    def insert_at_end(self, val: int) -> None:
        """Append ``val`` after the tail."""
        node = Node(val)
        self.length += 1
        if self.head is None:
            self.head = self.tail = node
            return
        assert self.tail is not None
        self.tail.next = node
        self.tail = node

    def insert_at_head(self, val: int) -> None:
        """Put ``val`` in front of the head."""
        node = Node(val, self.head)
        self.length += 1
        if self.head is None:
            self.tail = node
        self.head = node

    def insert_at(self, index: int, val: int) -> None:
        """Insert ``val`` so that it ends up at position ``index``.

        Raises IndexError unless ``0 <= index <= len(self)``.
        """
        if not 0 <= index <= self.length:
            raise IndexError(f"insert index {index} out of range")
        if index == 0:
            self.insert_at_head(val)
            return
        if index == self.length:
            self.insert_at_end(val)
            return
        previous = self._node_at(index - 1)
        previous.next = Node(val, previous.next)
        self.length += 1

    def delete_at(self, index: int) -> None:
        """Remove the item at position ``index``.

        Raises IndexError unless ``0 <= index < len(self)``.
        """
        if not 0 <= index < self.length:
            raise IndexError(f"delete index {index} out of range")
        if index == 0:
            assert self.head is not None
            self.head = self.head.next
            if self.head is None:
                self.tail = None
        else:
            previous = self._node_at(index - 1)
            assert previous.next is not None
            previous.next = previous.next.next
            if previous.next is None:
                self.tail = previous
        self.length -= 1

    def to_list(self) -> list[int]:
        """Return the values from head to tail."""
        return list(self)

    def __iter__(self) -> Iterator[int]:
        return (node.val for node in self._nodes())

    def __len__(self) -> int:
        return self.length

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "nil"

    def __repr__(self) -> str:
        return f"LinkedList({self.to_list()!r})"


def merge_two_lists(ll1: LinkedList, ll2: LinkedList) -> LinkedList:
    """Merge two sorted lists into a sorted list.

    When one list is empty the other one itself is returned.
    """
    if ll1.head is None:
        return ll2
    if ll2.head is None:
        return ll1
    return LinkedList(heapq.merge(ll1, ll2))


def reverse_linked_list(ll: LinkedList) -> None:
    """Reverse ``ll`` in place, swapping its head and tail."""
    if len(ll) <= 1:
        return

    previous: Node | None = None
    current = ll.head
    ll.tail = ll.head
    while current is not None:
        following = current.next
        current.next = previous
        previous = current
        current = following
    ll.head = previous