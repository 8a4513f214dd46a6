import math
import random

import pytest

from dsalgo.avl import AVLTree, main

DEMO_KEYS = [5, 2, 1, 4, 3, 7, 6, 9, 16, 15]


def _height_bound(count):
    return 1.4405 * math.log2(count + 2)


def test_demo_preorder_and_deletion():
    tree = AVLTree(DEMO_KEYS)
    assert tree.preorder() == [4, 2, 1, 3, 9, 6, 5, 7, 16, 15]
    tree.delete(7)
    assert tree.preorder() == [4, 2, 1, 3, 9, 6, 5, 16, 15]


def test_demo_counts_after_deletion():
    tree = AVLTree(DEMO_KEYS)
    tree.delete(7)
    assert len(tree) == len(DEMO_KEYS) - 1
    assert tree.leaf_count() == 4
    assert tree.internal_count() == len(tree) - tree.leaf_count()
    assert tree.minimum() == min(DEMO_KEYS)
    assert tree.maximum() == max(DEMO_KEYS)


def test_ascending_insertion_builds_perfect_tree():
    depth = 4
    tree = AVLTree(range(1, 2**depth))
    assert tree.height() == depth - 1
    assert tree.leaf_count() == 2 ** (depth - 1)
    assert len(tree) == 2**depth - 1


def test_duplicate_insert_is_ignored():
    tree = AVLTree(DEMO_KEYS)
    before = tree.preorder()
    tree.insert(9)
    assert tree.preorder() == before
    assert len(tree) == len(DEMO_KEYS)


def test_delete_missing_is_a_no_op():
    tree = AVLTree(DEMO_KEYS)
    before = tree.preorder()
    tree.delete(100)
    assert tree.preorder() == before


def test_empty_tree():
    tree = AVLTree()
    assert tree.height() == -1
    assert len(tree) == 0
    assert tree.preorder() == []
    with pytest.raises(ValueError):
        tree.minimum()
    with pytest.raises(ValueError):
        tree.maximum()


def test_random_operations_keep_balance():
    rng = random.Random(0)
    keys = rng.sample(range(1000), 200)
    tree = AVLTree(keys)
    assert sorted(tree.preorder()) == sorted(keys)
    assert tree.height() <= _height_bound(len(keys))

    removed = keys[::2]
    for key in removed:
        tree.delete(key)
    remaining = sorted(set(keys) - set(removed))
    assert sorted(tree.preorder()) == remaining
    assert tree.height() <= _height_bound(len(remaining))


def test_deleting_everything_empties_tree():
    tree = AVLTree(DEMO_KEYS)
    for key in DEMO_KEYS:
        tree.delete(key)
    assert len(tree) == 0
    assert tree.height() == -1


def test_main_prints_counts(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Preorder Traversal after deletion" in out
    assert f"Total number of Nodes: {len(DEMO_KEYS) - 1}" in out