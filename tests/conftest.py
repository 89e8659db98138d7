"""Shared pytest configuration and fixtures for avltreelib tests."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from avltreelib import AVLTree


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: large randomized runs (deselect with -m 'not slow')")


def build_tree(values, config=None) -> AVLTree:
    """Insert `values` one by one into a fresh tree."""
    tree = AVLTree(config)
    for value in values:
        tree.insert(value)
    return tree


@pytest.fixture
def seven_tree() -> AVLTree:
    """Perfectly balanced tree built from 1..7 inserted ascending.

        4
      2   6
     1 3 5 7
    """
    return build_tree(range(1, 8))


@pytest.fixture
def fib_tree() -> AVLTree:
    """Minimal (Fibonacci) AVL tree of height 4, every inner node left-heavy.

            5
          3   7
         2 4 6
        1
    """
    return build_tree([5, 3, 7, 2, 4, 6, 1])
