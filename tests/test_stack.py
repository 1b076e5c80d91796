import pytest

from algoshelf.stack import ArrayStack


def test_push_pop_is_last_in_first_out():
    stack = ArrayStack()
    for value in [1, 2, 3]:
        stack.push(value)
    assert [stack.pop() for _ in range(3)] == [3, 2, 1]
    assert len(stack) == 0


def test_peek_leaves_value():
    stack = ArrayStack()
    stack.push(4)
    stack.push(5)
    assert stack.peek() == 5
    assert len(stack) == 2


def test_empty_stack_raises():
    stack = ArrayStack()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.peek()


def test_iterates_top_to_bottom():
    stack = ArrayStack()
    for value in [1, 2, 3]:
        stack.push(value)
    assert list(stack) == [3, 2, 1]


def test_update_counts_from_top():
    stack = ArrayStack()
    for value in [1, 2, 3]:
        stack.push(value)
    stack.update(1, 30)
    stack.update(3, 10)
    assert list(stack) == [30, 2, 10]


@pytest.mark.parametrize("position", [0, 4])
def test_update_out_of_range(position):
    stack = ArrayStack()
    for value in [1, 2, 3]:
        stack.push(value)
    with pytest.raises(IndexError):
        stack.update(position, 9)


def test_capacity_limit():
    stack = ArrayStack(capacity=2)
    stack.push(1)
    stack.push(2)
    with pytest.raises(OverflowError):
        stack.push(3)
    assert list(stack) == [2, 1]


def test_default_capacity_is_one_hundred():
    stack = ArrayStack()
    for value in range(100):
        stack.push(value)
    with pytest.raises(OverflowError):
        stack.push(100)