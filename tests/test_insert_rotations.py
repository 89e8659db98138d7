"""Tests for insertion and the rotations it triggers."""

import logging

import pytest

from avltreelib import AVLTree, InvalidArgumentError, check_invariants, in_order_values
from conftest import build_tree


def shape(node):
    """Nested (value, factor, left, right) tuple for structural asserts."""
    if node is None:
        return None
    return (node.value, node.balance_factor, shape(node.left), shape(node.right))


def test_empty_tree():
    tree = AVLTree()
    assert tree.is_empty()
    assert tree.size() == 0
    assert len(tree) == 0
    assert tree.root is None
    assert tree.height() == 0


def test_first_insert_becomes_root():
    tree = AVLTree()
    tree.insert(42)
    assert not tree.is_empty()
    assert tree.size() == 1
    assert tree.root.value == 42
    assert tree.root.parent is None
    assert tree.root.balance_factor == 0


def test_right_right_rotation():
    """10, 20, 30 ascending forces a single left rotation at 10."""
    print("\n=== Test: Right-Right Rotation ===")
    tree = build_tree([10, 20, 30])

    assert shape(tree.root) == (20, 0, (10, 0, None, None), (30, 0, None, None))
    assert tree.root.parent is None
    assert tree.root.left.parent is tree.root
    assert tree.root.right.parent is tree.root
    print("[PASS] Right-right rotation passed")


def test_left_left_rotation():
    tree = build_tree([30, 20, 10])
    assert shape(tree.root) == (20, 0, (10, 0, None, None), (30, 0, None, None))


def test_left_right_rotation():
    """30, 10, 20 needs a cross rotation pivoting on 20."""
    print("\n=== Test: Left-Right Rotation ===")
    tree = build_tree([30, 10, 20])

    assert shape(tree.root) == (20, 0, (10, 0, None, None), (30, 0, None, None))
    assert check_invariants(tree) == []
    print("[PASS] Left-right rotation passed")


def test_right_left_rotation():
    tree = build_tree([10, 30, 20])
    assert shape(tree.root) == (20, 0, (10, 0, None, None), (30, 0, None, None))


def test_rotation_below_root_reconnects_parent():
    # 50 stays the root; the rotation happens in its right subtree
    tree = build_tree([50, 40, 60, 70, 80])
    assert shape(tree.root) == (
        50, 1,
        (40, 0, None, None),
        (70, 0, (60, 0, None, None), (80, 0, None, None)),
    )
    assert tree.root.right.parent is tree.root


def test_cross_rotation_factor_updates():
    # Pivot 50 leans left before the rotation, so 60 ends up right-heavy
    tree = build_tree([40, 30, 60, 50, 70, 45])
    assert shape(tree.root) == (
        50, 0,
        (40, 0, (30, 0, None, None), (45, 0, None, None)),
        (60, 1, None, (70, 0, None, None)),
    )
    # Pivot 50 leans right, so 40 ends up left-heavy
    tree = build_tree([40, 30, 60, 50, 70, 55])
    assert shape(tree.root) == (
        50, 0,
        (40, -1, (30, 0, None, None), None),
        (60, 0, (55, 0, None, None), (70, 0, None, None)),
    )


def test_seven_ascending_is_perfect(seven_tree):
    assert seven_tree.root.value == 4
    assert seven_tree.height() == 3
    assert shape(seven_tree.root) == (
        4, 0,
        (2, 0, (1, 0, None, None), (3, 0, None, None)),
        (6, 0, (5, 0, None, None), (7, 0, None, None)),
    )


@pytest.mark.parametrize("levels", range(1, 9))
def test_ascending_power_of_two_minus_one_is_perfect(levels):
    tree = build_tree(range(2 ** levels - 1))
    assert tree.height() == levels
    assert check_invariants(tree) == []


def test_insert_walk_stops_on_balanced_ancestor():
    tree = build_tree([20, 10, 30])
    tree.insert(5)
    # 10 leans left, so does 20; nothing rotates
    assert shape(tree.root) == (
        20, -1, (10, -1, (5, 0, None, None), None), (30, 0, None, None),
    )
    tree.insert(25)
    # 30 becomes left-heavy and 20 returns to balanced
    assert tree.root.balance_factor == 0
    assert tree.root.right.balance_factor == -1


def test_duplicates_are_kept():
    tree = build_tree([5, 5, 5])
    assert tree.size() == 3
    assert in_order_values(tree) == [5, 5, 5]
    assert tree.height() == 2
    assert check_invariants(tree) == []


def test_duplicate_goes_left_of_equal_value():
    tree = build_tree([10, 20])
    tree.insert(10)
    assert shape(tree.root) == (10, 0, (10, 0, None, None), (20, 0, None, None))


def test_insert_then_contains():
    tree = build_tree([8, 3, 1, 6])
    for value in (8, 3, 1, 6):
        assert tree.contains(value)
        assert value in tree
    assert not tree.contains(7)
    assert 0 not in tree


def test_strings_are_supported():
    tree = build_tree(["pear", "apple", "fig", "kiwi"])
    assert in_order_values(tree) == ["apple", "fig", "kiwi", "pear"]
    assert tree.contains("fig")


def test_find_returns_node():
    tree = build_tree([2, 1, 3])
    node = tree.find(3)
    assert node is tree.root.right
    assert tree.find(99) is None


@pytest.mark.parametrize("operation", ["insert", "find", "contains", "delete"])
def test_none_is_rejected(operation):
    tree = build_tree([1, 2, 3])
    before = tree.debug_dump()
    with pytest.raises(InvalidArgumentError):
        getattr(tree, operation)(None)
    assert tree.size() == 3
    assert tree.debug_dump() == before


def test_rotation_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="avltreelib.core.tree"):
        build_tree([10, 20, 30])
    assert any("right-right rotation at 10" in r.getMessage() for r in caplog.records)

    caplog.clear()
    with caplog.at_level(logging.DEBUG, logger="avltreelib.core.tree"):
        build_tree([30, 10, 20])
    assert any("left-right rotation at 30" in r.getMessage() for r in caplog.records)
