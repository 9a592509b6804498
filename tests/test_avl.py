import math
import random

import pytest

from algocollect.avl import AVLTree


def build(keys):
    tree = AVLTree()
    for key in keys:
        tree.insert(key)
    return tree


def max_avl_height(count):
    return 1.4405 * math.log2(count + 2) - 0.3277


def test_ascending_inserts_balance():
    tree = build(range(1, 8))
    assert tree.level_order() == [4, 2, 6, 1, 3, 5, 7]


def test_deletions_follow_worked_example():
    tree = build(range(1, 8))
    tree.delete(1)
    assert tree.level_order() == [4, 2, 6, 3, 5, 7]
    tree.delete(4)
    assert tree.level_order() == [5, 2, 6, 3, 7]


def test_empty_tree():
    tree = AVLTree()
    assert tree.height() == 0
    assert tree.level_order() == []
    assert 1 not in tree


def test_height_stays_logarithmic_for_sorted_input():
    count = 1000
    tree = build(range(count))
    assert tree.height() <= max_avl_height(count)


def test_membership_matches_set_after_mixed_operations():
    rng = random.Random(7)
    keys = rng.sample(range(500), 200)
    tree = build(keys)
    removed = keys[::3]
    for key in removed:
        tree.delete(key)
    remaining = set(keys) - set(removed)
    assert all(key in tree for key in remaining)
    assert not any(key in tree for key in removed)
    assert sorted(tree.level_order()) == sorted(remaining)
    assert tree.height() <= max_avl_height(len(remaining))


def test_delete_missing_key_raises():
    tree = build([1, 2, 3])
    with pytest.raises(KeyError):
        tree.delete(9)
    assert sorted(tree.level_order()) == [1, 2, 3]


def test_duplicates_are_kept():
    tree = build([5, 5, 5])
    assert tree.level_order().count(5) == 3
    tree.delete(5)
    assert tree.level_order().count(5) == 2


def test_delete_everything():
    keys = list(range(50))
    tree = build(keys)
    for key in keys:
        tree.delete(key)
    assert tree.level_order() == []
    assert tree.height() == 0