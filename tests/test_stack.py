import pytest

from dsakit.stack import BoundedStack


def test_worked_example():
    st = BoundedStack(5)
    for value in [1, 2, 3, 4, 5]:
        st.push(value)
    assert st.is_empty() is False
    assert st.is_full() is True
    assert st.peek() == 5
    st.pop()
    st.pop()
    assert st.peek() == 3
    assert len(st) == 3


def test_push_when_full_raises_and_keeps_contents():
    st = BoundedStack(2)
    st.push(1)
    st.push(2)
    with pytest.raises(OverflowError):
        st.push(3)
    assert len(st) == 2
    assert st.peek() == 2


def test_pop_and_peek_on_empty_raise():
    st = BoundedStack(3)
    with pytest.raises(IndexError):
        st.pop()
    with pytest.raises(IndexError):
        st.peek()


def test_pop_returns_in_reverse_order():
    st = BoundedStack(4)
    for value in "abcd":
        st.push(value)
    assert [st.pop() for _ in range(4)] == ["d", "c", "b", "a"]
    assert st.is_empty() is True


def test_new_stack_state():
    st = BoundedStack(3)
    assert st.is_empty() is True
    assert st.is_full() is False
    assert len(st) == 0
    assert st.capacity == 3


def test_zero_capacity_is_always_full():
    st = BoundedStack(0)
    assert st.is_full() is True
    with pytest.raises(OverflowError):
        st.push(1)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        BoundedStack(-1)


def test_room_after_pop():
    st = BoundedStack(1)
    st.push(7)
    assert st.pop() == 7
    st.push(8)
    assert st.peek() == 8
    assert st.is_full() is True