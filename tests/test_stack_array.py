import pytest

from dsalgo.stack_array import (
    ArrayStack,
    StackOverflowError,
    StackUnderflowError,
    main,
)

VALUES = [10, 20, 30, 40]


def make_stack(values, capacity=100):
    stack = ArrayStack(capacity)
    for value in values:
        stack.push(value)
    return stack


def test_pop_returns_values_in_lifo_order():
    stack = make_stack(VALUES)
    assert [stack.pop() for _ in VALUES] == VALUES[::-1]
    assert stack.is_empty()


def test_iteration_is_top_first():
    stack = make_stack(VALUES)
    assert list(stack) == VALUES[::-1]
    assert len(stack) == len(VALUES)


def test_underflow():
    with pytest.raises(StackUnderflowError, match="STACK UNDERFLOW"):
        ArrayStack().pop()


def test_overflow():
    stack = make_stack([1, 2], capacity=2)
    with pytest.raises(StackOverflowError, match="STACK OVERFLOW"):
        stack.push(3)
    assert list(stack) == [2, 1]


def test_insert_at_bottom():
    stack = make_stack(VALUES)
    stack.insert_at_bottom(5)
    assert list(stack)[-1] == 5
    assert list(stack)[:-1] == VALUES[::-1]


def test_insert_at_bottom_of_empty_stack():
    stack = ArrayStack()
    stack.insert_at_bottom(9)
    assert stack.pop() == 9


def test_insert_at_bottom_full_stack_unchanged():
    stack = make_stack([1, 2], capacity=2)
    with pytest.raises(StackOverflowError):
        stack.insert_at_bottom(0)
    assert list(stack) == [2, 1]


def test_reverse_round_trip():
    stack = make_stack(VALUES)
    stack.reverse()
    assert list(stack) == VALUES
    stack.reverse()
    assert list(stack) == VALUES[::-1]


def test_invalid_capacity():
    with pytest.raises(ValueError):
        ArrayStack(-1)


def test_display():
    assert ArrayStack().display() == "Stack is empty"
    stack = make_stack(VALUES)
    assert stack.display() == "Stack elements: " + " ".join(map(str, VALUES[::-1]))


def test_main_demo(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    original, reversed_part = out.split("Reversed Stack:")
    assert "Stack elements: 40 30 20 10" in original
    assert "Stack elements: " + " ".join(map(str, VALUES)) in reversed_part