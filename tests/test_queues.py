from collections import deque

import pytest

from dsakit.queues import (
    ArrayDeque,
    ArrayQueue,
    CircularQueue,
    first_negative_in_windows,
    reverse_queue,
)


def test_array_queue_is_fifo():
    q = ArrayQueue(5)
    for value in (10, 20, 30, 40, 50):
        q.push(value)
    assert q.front() == 10
    assert q.pop() == 10
    assert q.front() == 20
    assert [q.pop() for _ in range(4)] == [20, 30, 40, 50]
    assert q.is_empty()


def test_array_queue_overflow():
    q = ArrayQueue(2)
    q.push(1)
    q.push(2)
    with pytest.raises(OverflowError):
        q.push(3)


def test_array_queue_reuses_slots_only_after_emptying():
    q = ArrayQueue(2)
    q.push(1)
    q.push(2)
    assert q.pop() == 1
    with pytest.raises(OverflowError):
        q.push(3)
    assert q.pop() == 2
    q.push(200)
    assert q.front() == 200
    assert len(q) == 1


def test_array_queue_empty_errors():
    q = ArrayQueue(3)
    with pytest.raises(IndexError):
        q.pop()
    with pytest.raises(IndexError):
        q.front()


def test_array_queue_negative_capacity():
    with pytest.raises(ValueError):
        ArrayQueue(-1)


def test_circular_queue_wraps_around():
    q = CircularQueue(2)
    q.enqueue(1)
    q.enqueue(2)
    assert q.is_full()
    with pytest.raises(OverflowError):
        q.enqueue(3)
    assert q.dequeue() == 1
    q.enqueue(3)
    assert q.front() == 2
    assert q.rear() == 3
    assert q.is_full()


def test_circular_queue_drains_in_order():
    q = CircularQueue(3)
    for value in (4, 5, 6):
        q.enqueue(value)
    assert [q.dequeue() for _ in range(3)] == [4, 5, 6]
    assert q.is_empty()
    with pytest.raises(IndexError):
        q.dequeue()
    with pytest.raises(IndexError):
        q.front()
    with pytest.raises(IndexError):
        q.rear()


def test_circular_queue_requires_capacity():
    with pytest.raises(ValueError):
        CircularQueue(0)


def test_deque_sequence():
    d = ArrayDeque(3)
    d.push_back(23)
    d.push_front(24)
    assert d.front() == 24
    assert d.rear() == 23
    assert d.pop_back() == 23
    assert d.front() == 24
    assert d.rear() == 24
    assert d.pop_front() == 24
    assert d.is_empty()
    d.push_back(20)
    d.push_front(30)
    d.push_back(40)
    assert d.front() == 30
    assert d.rear() == 40
    assert d.is_full()
    with pytest.raises(OverflowError):
        d.push_front(1)
    with pytest.raises(OverflowError):
        d.push_back(1)


def test_deque_empty_errors():
    d = ArrayDeque(2)
    with pytest.raises(IndexError):
        d.pop_front()
    with pytest.raises(IndexError):
        d.pop_back()
    with pytest.raises(IndexError):
        d.front()


def test_deque_behaves_as_stack_from_front():
    d = ArrayDeque(4)
    for value in (1, 2, 3, 4):
        d.push_front(value)
    assert [d.pop_front() for _ in range(4)] == [4, 3, 2, 1]


def test_first_negative_worked_example():
    assert first_negative_in_windows([-8, 4, 3, -6, 5], 2) == [-8, 0, -6, -6]


def test_first_negative_all_positive():
    values = [1, 2, 3, 4]
    assert first_negative_in_windows(values, 2) == [0, 0, 0]


def test_first_negative_window_count():
    values = [-1, -2, 3, -4, 5, 6, -7]
    for k in range(1, len(values) + 1):
        assert len(first_negative_in_windows(values, k)) == len(values) - k + 1


def test_first_negative_whole_list_window():
    values = [3, -5, -1]
    assert first_negative_in_windows(values, 3) == [-5]


@pytest.mark.parametrize("k", [0, 4])
def test_first_negative_bad_window(k):
    with pytest.raises(ValueError):
        first_negative_in_windows([1, -2, 3], k)


def test_reverse_queue():
    q = deque([1, 2, 3, 4, 5])
    reverse_queue(q)
    assert list(q) == [5, 4, 3, 2, 1]


def test_reverse_queue_twice_restores():
    q = deque(["a", "b", "c"])
    reverse_queue(q)
    reverse_queue(q)
    assert list(q) == ["a", "b", "c"]


def test_reverse_empty_queue():
    q = deque()
    reverse_queue(q)
    assert len(q) == 0