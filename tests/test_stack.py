import pytest

from dsworkbench.stack import Stack


def test_values_come_back_in_reverse_order():
    stack = Stack()
    values = [1, 2, 3, 4, 5]
    for value in values:
        stack.push(value)
    popped = []
    while not stack.is_empty():
        popped.append(stack.pop())
    assert popped == list(reversed(values))


def test_peek_leaves_value_in_place():
    stack = Stack()
    stack.push("a")
    stack.push("b")
    assert stack.peek() == "b"
    assert len(stack) == 2
    assert stack.pop() == "b"
    assert stack.peek() == "a"


def test_new_stack_is_empty():
    stack = Stack()
    assert stack.is_empty() is True
    assert len(stack) == 0


def test_push_makes_stack_non_empty():
    stack = Stack()
    stack.push(7)
    assert stack.is_empty() is False
    assert len(stack) == 1


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Stack().pop()


def test_peek_empty_raises():
    with pytest.raises(IndexError):
        Stack().peek()


def test_pop_after_draining_raises():
    stack = Stack()
    stack.push(1)
    assert stack.pop() == 1
    with pytest.raises(IndexError):
        stack.pop()


def test_iteration_runs_from_top():
    stack = Stack()
    values = [10, 20, 30]
    for value in values:
        stack.push(value)
    assert list(stack) == list(reversed(values))