"""Array-backed stacks: a bounded stack, two stacks in one array, k stacks, and a min stack."""

from __future__ import annotations

from typing import Any


class BoundedStack:
    """A LIFO stack that holds at most ``size`` elements."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"capacity must be non-negative, got {size}")
        self._size = size
        self._items: list[Any] = []

    def push(self, element: Any) -> None:
        if len(self._items) >= self._size:
            raise OverflowError("stack overflow")
        self._items.append(element)

    def pop(self) -> Any:
        if not self._items:
            raise IndexError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class TwoStacks:
    """Two stacks sharing one fixed array, growing towards each other."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"capacity must be non-negative, got {size}")
        self._slots: list[Any] = [None] * size
        self._top1 = -1
        self._top2 = size

    def _has_room(self) -> bool:
        return self._top2 - self._top1 > 1

    def push1(self, x: Any) -> None:
        if not self._has_room():
            raise OverflowError("no room left in the shared array")
        self._top1 += 1
        self._slots[self._top1] = x

    def push2(self, x: Any) -> None:
        if not self._has_room():
            raise OverflowError("no room left in the shared array")
        self._top2 -= 1
        self._slots[self._top2] = x

    def pop1(self) -> Any:
        if self._top1 < 0:
            raise IndexError("pop from empty first stack")
        value = self._slots[self._top1]
        self._slots[self._top1] = None
        self._top1 -= 1
        return value

    def pop2(self) -> Any:
        if self._top2 >= len(self._slots):
            raise IndexError("pop from empty second stack")
        value = self._slots[self._top2]
        self._slots[self._top2] = None
        self._top2 += 1
        return value


class KStacks:
    """``s`` stacks sharing one array of ``n`` slots through a free list.

    Stacks are numbered from 1 to ``s``.
    """

    def __init__(self, n: int, s: int) -> None:
        if n < 1 or s < 1:
            raise ValueError("need at least one slot and one stack")
        self._slots: list[Any] = [None] * n
        self._next = [*range(1, n), -1]
        self._top = [-1] * s
        self._free = 0

    def _stack_index(self, stack: int) -> int:
        if not 1 <= stack <= len(self._top):
            raise ValueError(f"stack number {stack} out of range 1..{len(self._top)}")
        return stack - 1

    def push(self, element: Any, stack: int) -> None:
        which = self._stack_index(stack)
        if self._free == -1:
            raise OverflowError("all slots are in use")
        index = self._free
        self._free = self._next[index]
        self._slots[index] = element
        self._next[index] = self._top[which]
        self._top[which] = index

    def pop(self, stack: int) -> Any:
        which = self._stack_index(stack)
        index = self._top[which]
        if index == -1:
            raise IndexError(f"pop from empty stack {stack}")
        self._top[which] = self._next[index]
        self._next[index] = self._free
        self._free = index
        value = self._slots[index]
        self._slots[index] = None
        return value

    def peek(self, stack: int) -> Any:
        which = self._stack_index(stack)
        index = self._top[which]
        if index == -1:
            raise IndexError(f"stack {stack} is empty")
        return self._slots[index]


class MinStack:
    """A stack of numbers reporting its minimum in constant time and extra space.

    When a new minimum is pushed, ``2 * element - previous_min`` is stored in
    its place, which lets the previous minimum be recovered on pop.
    """

    def __init__(self) -> None:
        self._items: list[int] = []
        self._min = 0

    def push(self, element: int) -> None:
        if not self._items:
            self._min = element
            self._items.append(element)
        elif self._min < element:
            self._items.append(element)
        else:
            self._items.append(2 * element - self._min)
            self._min = element

    def pop(self) -> int:
        if not self._items:
            raise IndexError("pop from empty stack")
        curr = self._items.pop()
        if self._min < curr:
            return curr
        previous = self._min
        self._min = 2 * self._min - curr
        return previous

    def top(self) -> int:
        if not self._items:
            raise IndexError("stack is empty")
        curr = self._items[-1]
        return curr if curr > self._min else self._min

    def get_min(self) -> int:
        if not self._items:
            raise IndexError("stack is empty")
        return self._min

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)