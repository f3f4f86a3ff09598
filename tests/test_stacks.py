import pytest

from dsakit.stacks import BoundedStack, KStacks, MinStack, TwoStacks


def test_bounded_stack_lifo_order():
    st = BoundedStack(5)
    for value in (3, 4, 9, 5, 8):
        st.push(value)
    assert st.peek() == 8
    assert st.pop() == 8
    assert st.peek() == 5
    assert st.pop() == 5
    assert st.peek() == 9
    assert len(st) == 3


def test_bounded_stack_overflow():
    st = BoundedStack(2)
    st.push(1)
    st.push(2)
    with pytest.raises(OverflowError):
        st.push(3)
    assert st.peek() == 2


def test_bounded_stack_underflow_and_empty():
    st = BoundedStack(1)
    assert st.is_empty() is True
    with pytest.raises(IndexError):
        st.pop()
    with pytest.raises(IndexError):
        st.peek()
    st.push(7)
    assert st.is_empty() is False


def test_bounded_stack_negative_capacity():
    with pytest.raises(ValueError):
        BoundedStack(-1)


def test_two_stacks_independent():
    st = TwoStacks(10)
    for value in (2, 3, 4, 5, 6):
        st.push1(value)
    for value in (7, 8, 9, 10, 11):
        st.push2(value)
    assert st.pop1() == 6
    assert st.pop2() == 11
    st.push2(33)
    assert st.pop2() == 33
    assert st.pop2() == 10
    assert st.pop1() == 5


def test_two_stacks_share_capacity():
    st = TwoStacks(3)
    st.push1(1)
    st.push2(2)
    st.push2(3)
    with pytest.raises(OverflowError):
        st.push1(4)
    with pytest.raises(OverflowError):
        st.push2(4)
    assert st.pop1() == 1
    st.push2(4)
    assert st.pop2() == 4


def test_two_stacks_underflow():
    st = TwoStacks(4)
    with pytest.raises(IndexError):
        st.pop1()
    with pytest.raises(IndexError):
        st.pop2()


def test_k_stacks_example():
    st = KStacks(20, 3)
    st.push(10, 1)
    st.push(20, 2)
    st.push(30, 3)
    st.push(40, 1)
    assert st.pop(1) == 40
    for value in (100, 200, 300, 400):
        st.push(value, 2)
    assert st.pop(2) == 400
    assert st.peek(1) == 10
    assert st.peek(2) == 300
    assert st.peek(3) == 30


def test_k_stacks_overflow_and_reuse():
    st = KStacks(3, 2)
    st.push(1, 1)
    st.push(2, 2)
    st.push(3, 1)
    with pytest.raises(OverflowError):
        st.push(4, 2)
    assert st.pop(1) == 3
    st.push(4, 2)
    assert st.pop(2) == 4
    assert st.pop(2) == 2
    assert st.pop(1) == 1


def test_k_stacks_errors():
    st = KStacks(4, 2)
    with pytest.raises(IndexError):
        st.pop(1)
    with pytest.raises(IndexError):
        st.peek(2)
    with pytest.raises(ValueError):
        st.push(1, 3)
    with pytest.raises(ValueError):
        st.peek(0)
    with pytest.raises(ValueError):
        KStacks(0, 1)


def test_min_stack_tracks_minimum():
    st = MinStack()
    st.push(5)
    assert st.get_min() == 5
    st.push(3)
    st.push(7)
    assert st.get_min() == 3
    assert st.top() == 7
    st.push(3)
    st.push(1)
    assert st.top() == 1
    assert st.get_min() == 1
    assert st.pop() == 1
    assert st.get_min() == 3
    assert st.pop() == 3
    assert st.get_min() == 3
    assert st.pop() == 7
    assert st.pop() == 3
    assert st.get_min() == 5
    assert st.pop() == 5
    assert st.is_empty() is True


def test_min_stack_negative_values():
    st = MinStack()
    for value in (-2, 4, -9, 6):
        st.push(value)
    assert st.get_min() == -9
    assert [st.pop() for _ in range(4)] == [6, -9, 4, -2]


def test_min_stack_empty_errors():
    st = MinStack()
    with pytest.raises(IndexError):
        st.pop()
    with pytest.raises(IndexError):
        st.top()
    with pytest.raises(IndexError):
        st.get_min()