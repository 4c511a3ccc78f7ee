import pytest

from dsakit.stack_ops import (
    copy_stack,
    insert_at_bottom,
    insert_at_index,
    min_value,
    next_greater,
    next_smaller,
    remove_at_bottom,
    remove_at_index,
    stock_span,
)


def test_copy_stack_same_order_and_independent():
    stack = [4, 3, 2, 1]
    copy = copy_stack(stack)
    assert copy == stack
    copy.append(9)
    assert stack == [4, 3, 2, 1]


def test_insert_at_bottom():
    stack = [1, 2, 3, 4]
    insert_at_bottom(stack, 100)
    assert stack[0] == 100
    assert stack[1:] == [1, 2, 3, 4]


def test_insert_at_bottom_empty():
    stack = []
    insert_at_bottom(stack, 5)
    assert stack == [5]


@pytest.mark.parametrize("index", [0, 1, 2, 4])
def test_insert_at_index(index):
    stack = [1, 2, 3, 4]
    insert_at_index(stack, 10, index)
    assert stack[index] == 10
    assert len(stack) == 5
    assert [v for v in stack if v != 10] == [1, 2, 3, 4]


@pytest.mark.parametrize("index", [-1, 5])
def test_insert_at_index_out_of_bounds(index):
    stack = [1, 2, 3, 4]
    with pytest.raises(IndexError):
        insert_at_index(stack, 10, index)
    assert stack == [1, 2, 3, 4]


def test_remove_at_bottom():
    stack = [1, 2, 3, 4]
    assert remove_at_bottom(stack) == 1
    assert stack == [2, 3, 4]


def test_remove_at_bottom_empty():
    with pytest.raises(IndexError):
        remove_at_bottom([])


def test_remove_at_index():
    stack = [1, 2, 3, 4]
    assert remove_at_index(stack, 2) == 3
    assert stack == [1, 2, 4]


@pytest.mark.parametrize("index", [-1, 4])
def test_remove_at_index_out_of_bounds(index):
    with pytest.raises(IndexError):
        remove_at_index([1, 2, 3, 4], index)


def test_min_value():
    stack = [0, 3, -11, 7, 10]
    assert min_value(stack) == -11
    assert stack == [0, 3, -11, 7, 10]


def test_min_value_empty():
    with pytest.raises(ValueError):
        min_value([])


def test_next_greater_example():
    assert next_greater([4, 5, 2, 25]) == [5, 25, 25, -1]


def test_next_smaller_example():
    assert next_smaller([4, 5, 2, 25]) == [2, 2, -1, -1]


@pytest.mark.parametrize("values", [[], [1], [3, 3, 3], [1, 2, 3], [3, 2, 1]])
def test_next_greater_and_smaller_lengths(values):
    greater = next_greater(values)
    smaller = next_smaller(values)
    assert len(greater) == len(smaller) == len(values)
    assert all(g == -1 or g > v for g, v in zip(greater, values))
    assert all(s == -1 or s < v for s, v in zip(smaller, values))


def test_next_greater_descending_all_missing():
    assert next_greater([9, 7, 5]) == [-1, -1, -1]


def test_stock_span_increasing_reaches_start():
    values = [1, 2, 3, 4, 5]
    assert stock_span(values) == [pos + 1 for pos in range(len(values))]


def test_stock_span_decreasing_all_one():
    assert stock_span([5, 4, 3, 2]) == [1, 1, 1, 1]


def test_stock_span_example():
    assert stock_span([100, 80, 60, 70, 60, 75, 85]) == [1, 1, 1, 2, 1, 4, 6]


@pytest.mark.parametrize("values", [[3, 1, 2, 5, 4], [2, 2, 2], [7]])
def test_stock_span_bounds(values):
    spans = stock_span(values)
    assert all(1 <= span <= pos + 1 for pos, span in enumerate(spans))