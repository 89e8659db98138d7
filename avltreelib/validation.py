"""Structural validation for AVL trees.

These checks recompute everything from scratch (heights, ordering,
back-references, node count) instead of trusting the stored balance
factors, so they can be used to verify the tree after any mutation.
"""

from typing import TYPE_CHECKING, Any, List, Optional

from .errors import InvariantViolationError

if TYPE_CHECKING:
    from .core.node import AVLNode
    from .core.tree import AVLTree


def compute_height(node: Optional['AVLNode']) -> int:
    """Height of the subtree rooted at `node` (empty = 0, leaf = 1)."""
    if node is None:
        return 0
    return 1 + max(compute_height(node.left), compute_height(node.right))


def check_invariants(tree: 'AVLTree') -> List[str]:
    """Check every AVL invariant of `tree`.

    Args:
        tree: Tree to check

    Returns:
        List of violation messages (empty if the tree is valid)
    """
    violations: List[str] = []
    root = tree.root

    if root is not None and root.parent is not None:
        violations.append(f"root {root.value!r} has a parent")

    previous: List[Any] = []
    reachable = _check_subtree(root, previous, violations)

    if reachable != tree.size():
        violations.append(
            f"size() is {tree.size()} but {reachable} nodes are reachable"
        )
    if tree.is_empty() != (root is None):
        violations.append("is_empty() disagrees with the root")
    return violations


def assert_valid(tree: 'AVLTree') -> None:
    """Raise InvariantViolationError if `tree` breaks any invariant."""
    violations = check_invariants(tree)
    if violations:
        raise InvariantViolationError(violations)


def _check_subtree(node: Optional['AVLNode'], previous: List[Any], violations: List[str]) -> int:
    """Check a subtree in-order; returns its node count.

    `previous` holds at most one item, the last value seen in-order.
    """
    if node is None:
        return 0

    count = 1
    for child in (node.left, node.right):
        if child is not None and child.parent is not node:
            violations.append(
                f"child {child.value!r} of {node.value!r} points to the wrong parent"
            )

    count += _check_subtree(node.left, previous, violations)

    if previous and node.value < previous[0]:
        violations.append(
            f"ordering broken: {node.value!r} follows {previous[0]!r} in-order"
        )
    previous[:] = [node.value]

    count += _check_subtree(node.right, previous, violations)

    actual = compute_height(node.right) - compute_height(node.left)
    if node.balance_factor != actual:
        violations.append(
            f"{node.value!r} stores balance factor {node.balance_factor}, actual is {actual}"
        )
    if actual not in (-1, 0, 1):
        violations.append(f"{node.value!r} is unbalanced ({actual})")
    return count
