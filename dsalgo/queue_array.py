"""Fixed-capacity FIFO queue stored in a linear array."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from itertools import islice

DEFAULT_CAPACITY = 100


class QueueOverflowError(OverflowError):
    """Raised when a value is enqueued into a queue with no free slot."""


class QueueUnderflowError(IndexError):
    """Raised when a value is read from an empty queue."""


def _render(label: str, values: Iterable[int]) -> str:
    return label + " ".join(str(value) for value in values)


class ArrayQueue:
    """Queue over a linear array of fixed capacity.

    Slots freed by dequeuing are reused only after the queue drains
    completely, so the queue is full once ``capacity`` values have been
    enqueued since it was last empty.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._slots: list[int] = []
        self._front = 0

    def is_empty(self) -> bool:
        return self._front >= len(self._slots)

    def is_full(self) -> bool:
        return len(self._slots) == self.capacity

    def enqueue(self, value: int) -> None:
        if self.is_full():
            raise QueueOverflowError("Queue Overflow!")
        self._slots.append(value)

    def dequeue(self) -> int:
        if self.is_empty():
            raise QueueUnderflowError("Queue Underflow!")
        value = self._slots[self._front]
        self._front += 1
        if self.is_empty():
            self._slots.clear()
            self._front = 0
        return value

    def peek(self) -> int:
        if self.is_empty():
            raise QueueUnderflowError("Queue is empty!")
        return self._slots[self._front]

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __iter__(self) -> Iterator[int]:
        return islice(self._slots, self._front, None)

    def __reversed__(self) -> Iterator[int]:
        return reversed(self._slots[self._front:])

    def reverse(self) -> None:
        """Reverse the queue in place; the front moves back to the first slot."""
        self._slots = list(reversed(self))
        self._front = 0

    def unique(self) -> list[int]:
        """Values in queue order, keeping only the first of each."""
        return list(dict.fromkeys(self))

    def display(self) -> str:
        if self.is_empty():
            return "Queue is empty!"
        return _render("Queue elements: ", self)

    def display_reverse(self) -> str:
        if self.is_empty():
            return "Queue is empty!"
        return _render("Queue elements in reverse: ", reversed(self))

    def display_unique(self) -> str:
        if self.is_empty():
            return "Queue is empty!"
        return _render("Queue elements (without duplicates): ", self.unique())


def main(argv: list[str] | None = None) -> int:
    """Run the queue demonstration."""
    parser = argparse.ArgumentParser(description="Array queue demonstration.")
    parser.parse_args(argv)

    queue = ArrayQueue()
    for value in (10, 20, 30, 20, 10, 40):
        queue.enqueue(value)
        print(f"{value} enqueued into queue.")

    print("\nBefore reversing:")
    print(queue.display())
    print(queue.display_reverse())

    print("\nQueue without duplicates:")
    print(queue.display_unique())

    queue.reverse()

    print("\nAfter reversing:")
    print(queue.display())
    return 0