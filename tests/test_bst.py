import random

import pytest

from algokit.bst import BST


def make_tree(values):
    tree = BST()
    for value in values:
        tree.insert(value)
    return tree


VALUES = [50, 30, 70, 20, 40, 60, 80, 35, 45, 65]


def test_iteration_is_sorted():
    tree = make_tree(VALUES)
    assert list(tree) == sorted(VALUES)
    assert len(tree) == len(VALUES)


def test_search_present_and_absent():
    tree = make_tree(VALUES)
    assert all(tree.search(v) for v in VALUES)
    assert not tree.search(55)
    assert 40 in tree
    assert 41 not in tree


def test_empty_tree():
    tree = BST()
    assert list(tree) == []
    assert len(tree) == 0
    assert 1 not in tree


def test_duplicates_are_kept():
    tree = make_tree([5, 5, 3, 5])
    assert list(tree) == [3, 5, 5, 5]
    tree.remove(5)
    assert list(tree) == [3, 5, 5]


@pytest.mark.parametrize("target", [20, 80, 65])
def test_remove_leaf(target):
    tree = make_tree(VALUES)
    tree.remove(target)
    assert target not in tree
    assert list(tree) == sorted(v for v in VALUES if v != target)


def test_remove_node_with_one_child():
    tree = make_tree(VALUES)
    tree.remove(60)
    assert list(tree) == sorted(v for v in VALUES if v != 60)
    assert 65 in tree


@pytest.mark.parametrize("target", [50, 30, 70, 40])
def test_remove_node_with_two_children(target):
    tree = make_tree(VALUES)
    tree.remove(target)
    assert target not in tree
    assert list(tree) == sorted(v for v in VALUES if v != target)
    assert len(tree) == len(VALUES) - 1


def test_remove_missing_is_noop():
    tree = make_tree(VALUES)
    tree.remove(999)
    assert list(tree) == sorted(VALUES)
    assert len(tree) == len(VALUES)


def test_remove_all_in_random_order():
    rng = random.Random(7)
    values = [rng.randint(0, 50) for _ in range(200)]
    tree = make_tree(values)
    remaining = sorted(values)
    order = values[:]
    rng.shuffle(order)
    for value in order:
        tree.remove(value)
        remaining.remove(value)
        assert list(tree) == remaining
    assert len(tree) == 0


def test_degenerate_tree_does_not_recurse():
    tree = make_tree(range(5000))
    assert len(tree) == 5000
    assert 4999 in tree
    tree.remove(0)
    assert next(iter(tree)) == 1