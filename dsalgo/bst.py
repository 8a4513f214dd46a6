"""Unbalanced binary search tree of distinct integer keys."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


class DuplicateKeyError(ValueError):
    """Raised when a key already present in the tree is inserted again."""


@dataclass(eq=False)
class _Node:
    key: int
    left: _Node | None = None
    right: _Node | None = None


def _leftmost(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _rightmost(node: _Node) -> _Node:
    while node.right is not None:
        node = node.right
    return node


def _delete(node: _Node | None, key: int) -> _Node | None:
    if node is None:
        raise KeyError(key)
    if key < node.key:
        node.left = _delete(node.left, key)
    elif key > node.key:
        node.right = _delete(node.right, key)
    elif node.left is None:
        return node.right
    elif node.right is None:
        return node.left
    else:
        successor = _leftmost(node.right)
        node.key = successor.key
        node.right = _delete(node.right, successor.key)
    return node


def _height(node: _Node | None) -> int:
    if node is None:
        return -1
    return max(_height(node.left), _height(node.right)) + 1


def _leaves(node: _Node | None) -> int:
    if node is None:
        return 0
    if node.left is None and node.right is None:
        return 1
    return _leaves(node.left) + _leaves(node.right)


class BinarySearchTree:
    """Binary search tree; smaller keys go left, larger keys go right."""

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self._root: _Node | None = None
        for key in keys:
            self.insert(key)

    def _inorder_nodes(self) -> Iterator[_Node]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def insert(self, key: int) -> None:
        if self._root is None:
            self._root = _Node(key)
            return
        node = self._root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = _Node(key)
                    return
                node = node.left
            elif key > node.key:
                if node.right is None:
                    node.right = _Node(key)
                    return
                node = node.right
            else:
                raise DuplicateKeyError(f"DUPLICATE ELEMENT FOUND: {key}")

    def delete(self, key: int) -> None:
        """Remove ``key``; a node with two children takes its in-order successor."""
        self._root = _delete(self._root, key)

    def __contains__(self, key: object) -> bool:
        node = self._root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right  # type: ignore[operator]
        return False

    def maximum(self) -> int:
        if self._root is None:
            raise ValueError("tree is empty")
        return _rightmost(self._root).key

    def minimum(self) -> int:
        if self._root is None:
            raise ValueError("tree is empty")
        return _leftmost(self._root).key

    def height(self) -> int:
        """Edges on the longest root-to-leaf path; -1 for an empty tree."""
        return _height(self._root)

    def __len__(self) -> int:
        return sum(1 for _ in self._inorder_nodes())

    def leaf_count(self) -> int:
        return _leaves(self._root)

    def inorder(self) -> list[int]:
        return [node.key for node in self._inorder_nodes()]

    def to_greater_sum_tree(self) -> None:
        """Replace every key with the sum of the keys greater than it."""
        total = 0
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.right
            node = stack.pop()
            node.key, total = total, total + node.key
            node = node.left


def _render(tree: BinarySearchTree) -> str:
    return "".join(f"{key}->" for key in tree.inorder()) + "NULL"


def main(argv: list[str] | None = None) -> int:
    """Run the binary search tree demonstration."""
    parser = argparse.ArgumentParser(description="Binary search tree demonstration.")
    parser.parse_args(argv)

    tree = BinarySearchTree([10, 5, 15, 2, 7])
    print(f"Inorder Traversal: {_render(tree)}")

    tree.to_greater_sum_tree()
    print(f"Inorder after converting to GST: {_render(tree)}")

    try:
        tree.delete(10)
    except KeyError:
        print("EMPTY")
    print(f"Inorder Traversal after deleting root: {_render(tree)}")

    print(f"Height of tree: {tree.height()}")
    print(f"Max value: {tree.maximum()}")
    print(f"Min value: {tree.minimum()}")
    print(f"Total nodes: {len(tree)}")
    print(f"Leaf nodes: {tree.leaf_count()}")
    return 0