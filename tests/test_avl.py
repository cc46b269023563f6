import math
import random

import pytest

from structlab.avl import AVLTree

DEMO_VALUES = [10, 20, 30, 40, 50, 25]


@pytest.fixture
def demo_tree():
    tree = AVLTree()
    for value in DEMO_VALUES:
        tree.insert(value)
    return tree


def test_demo_inorder_is_sorted(demo_tree):
    assert demo_tree.inorder() == sorted(DEMO_VALUES)


def test_demo_shape_after_rotations(demo_tree):
    assert demo_tree.preorder() == [30, 20, 10, 25, 40, 50]


def test_demo_after_removing_root(demo_tree):
    demo_tree.remove(30)
    assert demo_tree.preorder() == [40, 20, 10, 25, 50]
    assert demo_tree.inorder() == [10, 20, 25, 40, 50]
    assert 25 in demo_tree
    assert 30 not in demo_tree
    assert demo_tree.height() == 3


def test_empty_tree():
    tree = AVLTree()
    assert tree.height() == 0
    assert tree.inorder() == []
    assert 1 not in tree
    tree.remove(1)
    assert tree.preorder() == []


def test_duplicates_ignored():
    tree = AVLTree()
    tree.insert(5)
    tree.insert(5)
    assert tree.inorder() == [5]
    assert tree.height() == 1


def test_remove_missing_value_keeps_tree(demo_tree):
    before = demo_tree.preorder()
    demo_tree.remove(999)
    assert demo_tree.preorder() == before


def test_ascending_inserts_stay_balanced():
    tree = AVLTree()
    count = 1023
    for value in range(count):
        tree.insert(value)
    assert tree.inorder() == list(range(count))
    assert tree.height() <= 1.45 * math.log2(count + 2)


def test_random_inserts_and_removals():
    rng = random.Random(7)
    values = [rng.randrange(1000) for _ in range(300)]
    tree = AVLTree()
    for value in values:
        tree.insert(value)
    present = set(values)
    assert tree.inorder() == sorted(present)

    for value in values[::2]:
        tree.remove(value)
        present.discard(value)
    assert tree.inorder() == sorted(present)
    assert all(value in tree for value in present)
    assert all(value not in tree for value in set(values) - present)
    assert tree.height() <= 1.45 * math.log2(len(present) + 2)


def test_remove_everything():
    tree = AVLTree()
    for value in range(50):
        tree.insert(value)
    for value in range(50):
        tree.remove(value)
    assert tree.inorder() == []
    assert tree.height() == 0