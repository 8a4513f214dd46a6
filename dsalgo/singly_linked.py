"""Singly linked list of integers with an interactive menu."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TextIO


class EmptyListError(IndexError):
    """Raised when an operation needs a non-empty list."""


class PositionOutOfBoundsError(IndexError):
    """Raised when an insertion position lies outside the list."""


@dataclass(eq=False)
class _Node:
    value: int
    next: _Node | None = None


class SinglyLinkedList:
    """Singly linked list; positions are 1-based."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        last: _Node | None = None
        for value in values:
            node = _Node(value)
            if last is None:
                self._head = node
            else:
                last.next = node
            last = node
            self._size += 1

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> _Node:
        for current, node in enumerate(self._nodes()):
            if current == index:
                return node
        raise PositionOutOfBoundsError("POS OUT OF BOUND")

    def push_front(self, value: int) -> None:
        self._head = _Node(value, self._head)
        self._size += 1

    def push_back(self, value: int) -> None:
        node = _Node(value)
        if self._head is None:
            self._head = node
        else:
            self._node_at(self._size - 1).next = node
        self._size += 1

    def insert_at(self, value: int, position: int) -> None:
        """Insert so that ``value`` ends up at the 1-based ``position``."""
        if position < 1 or position > self._size + 1:
            raise PositionOutOfBoundsError("POS OUT OF BOUND")
        if position == 1:
            self.push_front(value)
            return
        previous = self._node_at(position - 2)
        previous.next = _Node(value, previous.next)
        self._size += 1

    def pop_front(self) -> int:
        if self._head is None:
            raise EmptyListError("LIST EMPTY")
        value = self._head.value
        self._head = self._head.next
        self._size -= 1
        return value

    def pop_back(self) -> int:
        if self._head is None:
            raise EmptyListError("LIST EMPTY")
        if self._head.next is None:
            value = self._head.value
            self._head = None
        else:
            previous = self._node_at(self._size - 2)
            assert previous.next is not None
            value = previous.next.value
            previous.next = None
        self._size -= 1
        return value

    def remove(self, value: int) -> None:
        """Remove the first node holding ``value``."""
        if self._head is None:
            raise EmptyListError("LIST EMPTY")
        if self._head.value == value:
            self.pop_front()
            return
        previous = self._head
        while previous.next is not None and previous.next.value != value:
            previous = previous.next
        if previous.next is None:
            raise ValueError("Value not found")
        previous.next = previous.next.next
        self._size -= 1

    def remove_all(self, value: int) -> int:
        """Remove every node holding ``value`` and return how many went."""
        if self._head is None:
            raise EmptyListError("List is empty")
        removed = 0
        while self._head is not None and self._head.value == value:
            self._head = self._head.next
            removed += 1
        node = self._head
        while node is not None and node.next is not None:
            if node.next.value == value:
                node.next = node.next.next
                removed += 1
            else:
                node = node.next
        self._size -= removed
        return removed

    def position_of(self, value: int) -> int:
        """1-based position of the first node holding ``value``."""
        if self._head is None:
            raise EmptyListError("List is empty")
        for position, item in enumerate(self, start=1):
            if item == value:
                return position
        raise ValueError("Element not found")

    def middle(self) -> int:
        """Value at index ``len // 2``, counting from zero."""
        if self._head is None:
            raise EmptyListError("List is empty")
        return self._node_at(self._size // 2).value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def display(self) -> str:
        if self._head is None:
            return "List IS EMPTY"
        return "".join(f"{value} - > " for value in self) + "NULL"


MENU = """
Enter your choice:
1. Inserting in the Begining
2. Inserting in the End
3. Inserting in between
4. Deletion at the Begining
5. Deletion in the End
6. Deletion in between
7. Display the linked list
8. Searching an Element
9. Deleting all occurances of an element
10. Counting number of nodes in the linked list
11. Print the middle element in the linked list
12. Exit"""

EXIT_CHOICE = 12


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str], prompt: str) -> int:
    print(prompt, end="", flush=True)
    token = next(tokens, None)
    if token is None:
        raise EOFError
    return int(token)


def _run_choice(items: SinglyLinkedList, choice: int, tokens: Iterator[str]) -> None:
    try:
        if choice == 1:
            items.push_front(_read_int(tokens, "Enter the element: \n"))
        elif choice == 2:
            items.push_back(_read_int(tokens, "Enter the element: \n"))
        elif choice == 3:
            value = _read_int(tokens, "Enter element and the position to be inserted: \n")
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
        elif choice == 8:
            value = _read_int(tokens, "Enter value to search\n")
            try:
                position = items.position_of(value)
            except (EmptyListError, ValueError):
                print("Element not found")
            else:
                print(f"Element found at pos {position} in the linked list ")
        elif choice == 9:
            value = _read_int(tokens, "Deleting all occurances of element\n")
            removed = items.remove_all(value)
            print(f"Deleted {removed} occurrence(s) of {value}")
        elif choice == 10:
            print(f"Total nodes: {len(items)}")
        elif choice == 11:
            print(f"Middle element: {items.middle()}")
        elif choice == EXIT_CHOICE:
            print("Exiting program.")
        else:
            print("Invalid choice! Please enter a valid option.")
    except (IndexError, ValueError) as exc:
        print(exc)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive singly linked list menu on standard input."""
    parser = argparse.ArgumentParser(description="Interactive singly linked list.")
    parser.parse_args(argv)

    items = SinglyLinkedList()
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