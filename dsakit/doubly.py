"""Doubly linked list with positional insertion and deletion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class DoublyNode:
    """A node of a doubly linked list."""

    data: Any
    prev: Optional["DoublyNode"] = None
    next: Optional["DoublyNode"] = None


class DoublyLinkedList:
    """A doubly linked list tracking both head and tail; positions are 1-based."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[DoublyNode] = None
        self.tail: Optional[DoublyNode] = None
        for value in values:
            self.insert_at_tail(value)

    def _nodes(self) -> Iterator[DoublyNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, position: int) -> DoublyNode:
        if position >= 1:
            for index, node in enumerate(self._nodes(), start=1):
                if index == position:
                    return node
        raise IndexError(f"position {position} out of range")

    def insert_at_head(self, data: Any) -> None:
        node = DoublyNode(data, next=self.head)
        if self.head is None:
            self.tail = node
        else:
            self.head.prev = node
        self.head = node

    def insert_at_tail(self, data: Any) -> None:
        node = DoublyNode(data, prev=self.tail)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node

    def insert_at(self, position: int, data: Any) -> None:
        """Insert data so that it ends up at the given 1-based position."""
        if position == 1:
            self.insert_at_head(data)
            return
        if position < 1:
            raise IndexError(f"position {position} out of range")
        before = self._node_at(position - 1)
        if before.next is None:
            self.insert_at_tail(data)
            return
        node = DoublyNode(data, prev=before, next=before.next)
        before.next.prev = node
        before.next = node

    def delete_at(self, position: int) -> Any:
        """Remove the node at the given 1-based position and return its data."""
        node = self._node_at(position)
        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self.tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        return node.data

    def first(self) -> Any:
        if self.head is None:
            raise IndexError("list is empty")
        return self.head.data

    def last(self) -> Any:
        if self.tail is None:
            raise IndexError("list is empty")
        return self.tail.data

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.data

    def __reversed__(self) -> Iterator[Any]:
        node = self.tail
        while node is not None:
            yield node.data
            node = node.prev

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"