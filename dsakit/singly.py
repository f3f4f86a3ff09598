"""Singly linked list with positional insertion, deletion, middle lookup and reversal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """A node of a singly linked list."""

    data: Any
    next: Optional["Node"] = None


def _walk(head: Optional[Node]) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


def find_middle(head: Optional[Node]) -> Optional[Node]:
    """Return the middle node by counting the length first; None for an empty chain."""
    if head is None:
        return None
    length = sum(1 for _ in _walk(head))
    node = head
    for _ in range(length // 2):
        node = node.next
    return node


def find_middle_fast(head: Optional[Node]) -> Optional[Node]:
    """Return the middle node using slow and fast pointers; None for an empty chain."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
    return slow


def reverse_iterative(head: Optional[Node]) -> Optional[Node]:
    """Reverse a chain of nodes in place and return the new head."""
    prev: Optional[Node] = None
    curr = head
    while curr is not None:
        forward = curr.next
        curr.next = prev
        prev = curr
        curr = forward
    return prev


def reverse_recursive(head: Optional[Node]) -> Optional[Node]:
    """Reverse a chain of nodes in place recursively and return the new head."""
    if head is None or head.next is None:
        return head
    new_head = reverse_recursive(head.next)
    head.next.next = head
    head.next = None
    return new_head


class SinglyLinkedList:
    """A singly linked list tracking both head and tail; positions are 1-based."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self.tail: Optional[Node] = None
        for value in values:
            self.insert_at_tail(value)

    def insert_at_head(self, data: Any) -> None:
        node = Node(data, self.head)
        self.head = node
        if self.tail is None:
            self.tail = node

    def insert_at_tail(self, data: Any) -> None:
        node = Node(data)
        if self.tail is None:
            self.head = self.tail = node
        else:
            self.tail.next = node
            self.tail = node

    def _node_at(self, position: int) -> Node:
        if position >= 1:
            for index, node in enumerate(_walk(self.head), start=1):
                if index == position:
                    return node
        raise IndexError(f"position {position} out of range")

    def insert_at(self, position: int, data: Any) -> None:
        """Insert data so that it ends up at the given 1-based position."""
        if position == 1:
            self.insert_at_head(data)
            return
        if position < 1:
            raise IndexError(f"position {position} out of range")
        prev = self._node_at(position - 1)
        if prev.next is None:
            self.insert_at_tail(data)
        else:
            prev.next = Node(data, prev.next)

    def delete_at(self, position: int) -> Any:
        """Remove the node at the given 1-based position and return its data."""
        if self.head is None or position < 1:
            raise IndexError(f"position {position} out of range")
        if position == 1:
            node = self.head
            self.head = node.next
            if self.head is None:
                self.tail = None
            node.next = None
            return node.data
        prev = self._node_at(position - 1)
        curr = prev.next
        if curr is None:
            raise IndexError(f"position {position} out of range")
        prev.next = curr.next
        curr.next = None
        if prev.next is None:
            self.tail = prev
        return curr.data

    def first(self) -> Any:
        if self.head is None:
            raise IndexError("list is empty")
        return self.head.data

    def last(self) -> Any:
        if self.tail is None:
            raise IndexError("list is empty")
        return self.tail.data

    def middle(self) -> Any:
        """Return the data of the middle node (the second of two for even lengths)."""
        node = find_middle_fast(self.head)
        if node is None:
            raise IndexError("list is empty")
        return node.data

    def reverse(self) -> None:
        self.tail = self.head
        self.head = reverse_iterative(self.head)

    def __len__(self) -> int:
        return sum(1 for _ in _walk(self.head))

    def __iter__(self) -> Iterator[Any]:
        for node in _walk(self.head):
            yield node.data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"