"""Fixed-capacity queues and deques, plus a few queue-based algorithms."""

from __future__ import annotations

from collections import deque
from typing import Any, Sequence


def _check_capacity(size: int, minimum: int) -> None:
    if size < minimum:
        raise ValueError(f"capacity must be at least {minimum}, got {size}")


class ArrayQueue:
    """A linear array-backed queue.

    Slots freed by popping are only reused once the queue has been emptied
    completely, at which point both ends reset to the start of the array.
    """

    def __init__(self, size: int) -> None:
        _check_capacity(size, 0)
        self._slots: list[Any] = [None] * size
        self._front = 0
        self._rear = 0

    def push(self, element: Any) -> None:
        if self._rear == len(self._slots):
            raise OverflowError("queue overflow")
        self._slots[self._rear] = element
        self._rear += 1

    def pop(self) -> Any:
        if self.is_empty():
            raise IndexError("pop from empty queue")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front += 1
        if self._front == self._rear:
            self._front = self._rear = 0
        return value

    def front(self) -> Any:
        if self.is_empty():
            raise IndexError("queue is empty")
        return self._slots[self._front]

    def is_empty(self) -> bool:
        return self._front == self._rear

    def __len__(self) -> int:
        return self._rear - self._front


class _Ring:
    """Ring buffer storage shared by the circular queue and the deque."""

    def __init__(self, size: int) -> None:
        _check_capacity(size, 1)
        self._slots: list[Any] = [None] * size
        self._head = 0
        self._count = 0

    @property
    def _tail(self) -> int:
        return (self._head + self._count - 1) % len(self._slots)

    def _append(self, value: Any) -> None:
        if self.is_full():
            raise OverflowError("queue is full")
        self._count += 1
        self._slots[self._tail] = value

    def _appendleft(self, value: Any) -> None:
        if self.is_full():
            raise OverflowError("queue is full")
        self._head = (self._head - 1) % len(self._slots)
        self._slots[self._head] = value
        self._count += 1

    def _popleft(self) -> Any:
        if self.is_empty():
            raise IndexError("pop from empty queue")
        value = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % len(self._slots)
        self._count -= 1
        return value

    def _pop(self) -> Any:
        if self.is_empty():
            raise IndexError("pop from empty queue")
        tail = self._tail
        value = self._slots[tail]
        self._slots[tail] = None
        self._count -= 1
        return value

    def front(self) -> Any:
        if self.is_empty():
            raise IndexError("queue is empty")
        return self._slots[self._head]

    def rear(self) -> Any:
        if self.is_empty():
            raise IndexError("queue is empty")
        return self._slots[self._tail]

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == len(self._slots)

    def __len__(self) -> int:
        return self._count


class CircularQueue(_Ring):
    """A fixed-capacity FIFO queue over a ring buffer."""

    def __init__(self, size: int) -> None:
        super().__init__(size)

    def enqueue(self, value: Any) -> None:
        self._append(value)

    def dequeue(self) -> Any:
        return self._popleft()

    def front(self) -> Any:
        return super().front()

    def rear(self) -> Any:
        return super().rear()

    def is_empty(self) -> bool:
        return super().is_empty()

    def is_full(self) -> bool:
        return super().is_full()


class ArrayDeque(_Ring):
    """A fixed-capacity double-ended queue over a ring buffer."""

    def __init__(self, size: int) -> None:
        super().__init__(size)

    def push_front(self, value: Any) -> None:
        self._appendleft(value)

    def push_back(self, value: Any) -> None:
        self._append(value)

    def pop_front(self) -> Any:
        return self._popleft()

    def pop_back(self) -> Any:
        return self._pop()

    def front(self) -> Any:
        return super().front()

    def rear(self) -> Any:
        return super().rear()

    def is_empty(self) -> bool:
        return super().is_empty()

    def is_full(self) -> bool:
        return super().is_full()


def first_negative_in_windows(values: Sequence[int], k: int) -> list[int]:
    """Return the first negative number of every window of size k, or 0 if none."""
    if k < 1 or k > len(values):
        raise ValueError(f"window size {k} does not fit {len(values)} values")
    negatives: deque[int] = deque()
    answers: list[int] = []
    for index, value in enumerate(values):
        if negatives and index - negatives[0] >= k:
            negatives.popleft()
        if value < 0:
            negatives.append(index)
        if index >= k - 1:
            answers.append(values[negatives[0]] if negatives else 0)
    return answers


def reverse_queue(queue: deque) -> None:
    """Reverse a deque in place using only FIFO operations and a stack."""
    stack = []
    while queue:
        stack.append(queue.popleft())
    while stack:
        queue.append(stack.pop())