"""Circular singly linked list addressed through its tail node."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class CircularNode:
    """A node of a circular linked list."""

    data: Any
    next: Optional["CircularNode"] = None


class CircularLinkedList:
    """A circular list; iteration starts at the tail node."""

    def __init__(self) -> None:
        self.tail: Optional[CircularNode] = None

    def insert_after(self, data: Any, element: Any) -> None:
        """Insert data after the first node holding element.

        On an empty list the node becomes the only one, whatever element is.
        """
        if self.tail is None:
            node = CircularNode(data)
            node.next = node
            self.tail = node
            return
        curr = self.tail
        while curr.data != element:
            curr = curr.next
            if curr is self.tail:
                raise ValueError(f"{element!r} not in list")
        curr.next = CircularNode(data, curr.next)

    def delete(self, element: Any) -> None:
        """Remove the first node holding element, searching from after the tail."""
        if self.tail is None:
            raise IndexError("delete from empty list")
        prev = self.tail
        curr = self.tail.next
        while curr.data != element:
            prev, curr = curr, curr.next
            if prev is self.tail:
                raise ValueError(f"{element!r} not in list")
        if curr is prev:
            self.tail = None
        elif curr is self.tail:
            self.tail = prev
        prev.next = curr.next
        curr.next = None

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[Any]:
        if self.tail is None:
            return
        node = self.tail
        while True:
            yield node.data
            node = node.next
            if node is self.tail:
                break

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"