"""Doubly linked list of integers with an interactive menu."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TextIO

from dsalgo.singly_linked import EmptyListError, PositionOutOfBoundsError


@dataclass(eq=False)
class _Node:
    value: int
    prev: _Node | None = None
    next: _Node | None = None


class DoublyLinkedList:
    """Doubly linked list; positions are 1-based."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _unlink(self, node: _Node) -> None:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1

    def push_front(self, value: int) -> None:
        node = _Node(value, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def push_back(self, value: int) -> None:
        node = _Node(value, self._tail, None)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at(self, value: int, position: int) -> None:
        """Insert so that ``value`` ends up at the 1-based ``position``."""
        if position < 1 or position > self._size + 1:
            raise PositionOutOfBoundsError("POS OUT OF BOUND")
        if position == 1:
            self.push_front(value)
            return
        if position == self._size + 1:
            self.push_back(value)
            return
        previous = next(node for index, node in enumerate(self._nodes(), start=2)
                        if index == position)
        previous = previous.prev
        assert previous is not None and previous.next is not None
        node = _Node(value, previous, previous.next)
        previous.next.prev = node
        previous.next = node
        self._size += 1

    def pop_front(self) -> int:
        if self._head is None:
            raise EmptyListError("LIST EMPTY")
        node = self._head
        self._unlink(node)
        return node.value

    def pop_back(self) -> int:
        if self._tail is None:
            raise EmptyListError("LIST EMPTY")
        node = self._tail
        self._unlink(node)
        return node.value

    def remove(self, value: int) -> None:
        """Remove the first node holding ``value``."""
        if self._head is None:
            raise EmptyListError("LIST EMPTY")
        for node in self._nodes():
            if node.value == value:
                self._unlink(node)
                return
        raise ValueError("Value not found")

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def display(self) -> str:
        if self._head is None:
            return "List IS EMPTY"
        return "".join(f"{value} <-> " for value in self) + "NULL"


MENU = """
Enter your choice:
1. Inserting in the Beginning
2. Inserting in the End
3. Inserting in Between
4. Deletion at the Beginning
5. Deletion at the End
6. Deletion in Between
7. Display the Linked List
8. Exit"""

EXIT_CHOICE = 8


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str], prompt: str) -> int:
    print(prompt, end="", flush=True)
    token = next(tokens, None)
    if token is None:
        raise EOFError
    return int(token)


def _run_choice(items: DoublyLinkedList, choice: int, tokens: Iterator[str]) -> None:
    try:
        if choice == 1:
            items.push_front(_read_int(tokens, "Enter the element: "))
        elif choice == 2:
            items.push_back(_read_int(tokens, "Enter the element: "))
        elif choice == 3:
            value = _read_int(tokens, "Enter element and the position to be inserted: ")
            position = _read_int(tokens, "")
            items.insert_at(value, position)
        elif choice == 4:
            print(f"Deleted first element: {items.pop_front()}")
        elif choice == 5:
            print(f"Deleted last element: {items.pop_back()}")
        elif choice == 6:
            value = _read_int(tokens, "Enter value to delete: ")
            items.remove(value)
            print(f"Deleted element: {value}")
        elif choice == 7:
            print("Display the Linked list:")
            print(items.display())
        elif choice == EXIT_CHOICE:
            print("Exiting program.")
        else:
            print("Invalid choice! Please enter a valid option.")
    except (IndexError, ValueError) as exc:
        print(exc)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive doubly linked list menu on standard input."""
    parser = argparse.ArgumentParser(description="Interactive doubly linked list.")
    parser.parse_args(argv)

    items = DoublyLinkedList()
    tokens = _tokens(sys.stdin)
    while True:
        print(MENU)
        try:
            choice = _read_int(tokens, "Choice: ")
        except EOFError:
            break
        except ValueError:
            print("Invalid choice! Please enter a valid option.")
            continue
        try:
            _run_choice(items, choice, tokens)
        except EOFError:
            break
        if choice == EXIT_CHOICE:
            break
    return 0