"""Fixed-capacity LIFO stack stored in an array."""

from __future__ import annotations

import argparse
from collections.abc import Iterator

DEFAULT_CAPACITY = 100


class StackOverflowError(OverflowError):
    """Raised when a value is pushed onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when a value is popped from an empty stack."""


class ArrayStack:
    """Stack with a fixed capacity."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[int] = []

    def push(self, value: int) -> None:
        if len(self._items) == self.capacity:
            raise StackOverflowError("STACK OVERFLOW")
        self._items.append(value)

    def pop(self) -> int:
        if not self._items:
            raise StackUnderflowError("STACK UNDERFLOW")
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate from the top of the stack down to the bottom."""
        return reversed(self._items)

    def insert_at_bottom(self, value: int) -> None:
        if len(self._items) == self.capacity:
            raise StackOverflowError("STACK OVERFLOW")
        self._items.insert(0, value)

    def reverse(self) -> None:
        self._items.reverse()

    def display(self) -> str:
        if self.is_empty():
            return "Stack is empty"
        return "Stack elements: " + " ".join(str(value) for value in self)


def main(argv: list[str] | None = None) -> int:
    """Run the stack demonstration."""
    parser = argparse.ArgumentParser(description="Array stack demonstration.")
    parser.parse_args(argv)

    stack = ArrayStack()
    for value in (10, 20, 30, 40):
        stack.push(value)

    print("Original Stack:")
    print(stack.display())

    stack.reverse()

    print("Reversed Stack:")
    print(stack.display())
    return 0