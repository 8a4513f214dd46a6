"""Self-balancing AVL tree of distinct integer keys."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class _Node:
    key: int
    left: _Node | None = None
    right: _Node | None = None
    height: int = 0


def _height(node: _Node | None) -> int:
    return -1 if node is None else node.height


def _update(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance(node: _Node | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_left(z: _Node) -> _Node:
    y = z.right
    assert y is not None
    z.right = y.left
    y.left = z
    _update(z)
    _update(y)
    return y


def _rotate_right(z: _Node) -> _Node:
    y = z.left
    assert y is not None
    z.left = y.right
    y.right = z
    _update(z)
    _update(y)
    return y


def _rebalance(node: _Node) -> _Node:
    _update(node)
    factor = _balance(node)
    if factor > 1 and _balance(node.left) >= 0:
        return _rotate_right(node)
    if factor < -1 and _balance(node.right) <= 0:
        return _rotate_left(node)
    if factor > 1:
        assert node.left is not None
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if factor < -1:
        assert node.right is not None
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node: _Node | None, key: int) -> _Node:
    if node is None:
        return _Node(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    elif key > node.key:
        node.right = _insert(node.right, key)
    else:
        return node
    return _rebalance(node)


def _delete(node: _Node | None, key: int) -> _Node | None:
    if node is None:
        return None
    if key < node.key:
        node.left = _delete(node.left, key)
    elif key > node.key:
        node.right = _delete(node.right, key)
    elif node.left is None:
        return node.right
    elif node.right is None:
        return node.left
    else:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.key = successor.key
        node.right = _delete(node.right, successor.key)
    return _rebalance(node)


def _preorder(node: _Node | None) -> Iterator[int]:
    if node is not None:
        yield node.key
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _count(node: _Node | None) -> int:
    if node is None:
        return 0
    return 1 + _count(node.left) + _count(node.right)


def _leaves(node: _Node | None) -> int:
    if node is None:
        return 0
    if node.left is None and node.right is None:
        return 1
    return _leaves(node.left) + _leaves(node.right)


class AVLTree:
    """AVL tree; inserting a key already present leaves the tree unchanged."""

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self._root: _Node | None = None
        for key in keys:
            self.insert(key)

    def insert(self, key: int) -> None:
        self._root = _insert(self._root, key)

    def delete(self, key: int) -> None:
        """Remove ``key`` if present; an absent key leaves the tree as it is."""
        self._root = _delete(self._root, key)

    def preorder(self) -> list[int]:
        return list(_preorder(self._root))

    def height(self) -> int:
        """Edges on the longest root-to-leaf path; -1 for an empty tree."""
        return _height(self._root)

    def __len__(self) -> int:
        return _count(self._root)

    def leaf_count(self) -> int:
        return _leaves(self._root)

    def internal_count(self) -> int:
        return len(self) - self.leaf_count()

    def minimum(self) -> int:
        node = self._root
        if node is None:
            raise ValueError("tree is empty")
        while node.left is not None:
            node = node.left
        return node.key

    def maximum(self) -> int:
        node = self._root
        if node is None:
            raise ValueError("tree is empty")
        while node.right is not None:
            node = node.right
        return node.key


def main(argv: list[str] | None = None) -> int:
    """Run the AVL tree demonstration."""
    parser = argparse.ArgumentParser(description="AVL tree demonstration.")
    parser.parse_args(argv)

    tree = AVLTree([5, 2, 1, 4, 3, 7, 6, 9, 16, 15])
    print("Preorder Traversal")
    print(" ".join(str(key) for key in tree.preorder()))
    print()

    tree.delete(7)
    print("Preorder Traversal after deletion")
    print(" ".join(str(key) for key in tree.preorder()))
    print()

    print(f"Total number of Nodes: {len(tree)}\n")
    print(f"Total number of leaves: {tree.leaf_count()}\n")
    print(f"Total number of internal nodes: {tree.internal_count()}\n")
    print(f"Minimum value in the avl tree: {tree.minimum()}\n")
    print(f"Maximum value in the avl tree: {tree.maximum()}\n")
    return 0