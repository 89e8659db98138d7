"""AVLTree - a self-balancing binary search tree.

Every node carries a balance factor (height of its right subtree minus
height of its left subtree). Structural mutations walk from the point of
change toward the root adjusting those factors, and rotate as soon as a
node reaches +2 or -2, so the factor of every node stays in {-1, 0, 1}
and the height stays logarithmic in the number of stored values.

Duplicates are allowed: on insert, values equal to a node's value descend
to its left.
"""

import logging
from collections import deque
from typing import Any, Deque, List, Optional, Tuple

from ..config import TreeConfig
from ..errors import InvalidArgumentError
from ..validation import assert_valid, compute_height
from .node import AVLNode, LEFT, RIGHT, opposite

logger = logging.getLogger(__name__)


class AVLTree:
    """Generic AVL tree over totally ordered values.

    The tree is a plain single-threaded container: callers that share one
    between threads must provide their own locking.

    Example:
        >>> tree = AVLTree()
        >>> for v in (10, 20, 30):
        ...     tree.insert(v)
        >>> tree.root.value
        20
        >>> tree.delete(10)
        10
        >>> 10 in tree
        False
    """

    def __init__(self, config: Optional[TreeConfig] = None):
        """Create an empty tree.

        Args:
            config: Optional TreeConfig (defaults to TreeConfig())

        Raises:
            InvalidArgumentError: If the config does not validate
        """
        self.config = config if config is not None else TreeConfig()
        errors = self.config.validate()
        if errors:
            raise InvalidArgumentError(
                "Invalid tree configuration: " + "; ".join(errors)
            )
        self._root: Optional[AVLNode] = None
        self._count = 0

    # Queries

    @property
    def root(self) -> Optional[AVLNode]:
        """Root node, or None for the empty tree."""
        return self._root

    def is_empty(self) -> bool:
        return self._root is None

    def size(self) -> int:
        return self._count

    def height(self) -> int:
        """Number of levels in the tree (0 when empty)."""
        return compute_height(self._root)

    def __len__(self) -> int:
        return self._count

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __repr__(self) -> str:
        root = self._root.value if self._root is not None else None
        return f"{self.__class__.__name__}(size={self._count}, root={root!r})"

    def find(self, value: Any) -> Optional[AVLNode]:
        """Locate the node holding `value`.

        Args:
            value: Value to search for

        Returns:
            The first node met on the way down whose value equals `value`,
            or None if no node holds it

        Raises:
            InvalidArgumentError: If value is None
        """
        if value is None:
            raise InvalidArgumentError("Cannot search for None")
        current = self._root
        while current is not None and current.value != value:
            current = current.left if value < current.value else current.right
        return current

    def contains(self, value: Any) -> bool:
        """Check whether `value` is stored in the tree.

        Raises:
            InvalidArgumentError: If value is None
        """
        return self.find(value) is not None

    # Mutation

    def insert(self, value: Any) -> None:
        """Insert `value`, rebalancing on the way back up.

        Raises:
            InvalidArgumentError: If value is None
        """
        if value is None:
            raise InvalidArgumentError("Cannot insert None")
        node = AVLNode(value)
        if self._root is None:
            self._root = node
        else:
            current = self._root
            while True:
                side = LEFT if value <= current.value else RIGHT
                below = current.child(side)
                if below is None:
                    current.attach(node, side)
                    break
                current = below
            self._rebalance_after_insert(node)
        self._count += 1
        self._after_mutation()

    def delete(self, value: Any) -> Any:
        """Remove one occurrence of `value`.

        Args:
            value: Value to remove

        Returns:
            The removed value, or None if it was not in the tree

        Raises:
            InvalidArgumentError: If value is None
        """
        node = self.find(value)
        if node is None:
            return None
        removed = node.value

        if node.left is not None and node.right is not None:
            # Keep this node in place and consume its in-order successor,
            # which has no left child.
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.value = successor.value
            parent, side = self._splice_out(successor)
        else:
            parent, side = self._splice_out(node)

        self._rebalance_after_delete(parent, side)
        self._count -= 1
        self._after_mutation()
        return removed

    def debug_dump(self) -> str:
        """Render the tree level by level.

        Present nodes render as ``"<value> (<balance factor>)"``; absent
        child slots render as the configured placeholder. Every slot is
        followed by the configured separator, and a newline closes each
        complete level (after slot 1, 3, 7, 15, ...). Only nodes that
        exist have their child slots listed, so lower levels are not
        padded out to full width.

        Returns:
            Multi-line debugging string (not meant to be parsed)
        """
        dump = self.config.dump
        parts: List[str] = []
        queue: Deque[Optional[AVLNode]] = deque([self._root])
        position = 0
        while queue:
            position += 1
            node = queue.popleft()
            if node is not None:
                parts.append(f"{node.value} ({node.balance_factor})")
                queue.append(node.left)
                queue.append(node.right)
            else:
                parts.append(dump.placeholder)
            parts.append(dump.separator)
            if position & (position + 1) == 0:
                parts.append("\n")
        return "".join(parts)

    # Rebalancing internals

    def _rebalance_after_insert(self, child: AVLNode) -> None:
        """Walk from a new leaf toward the root updating balance factors.

        A factor of 0 means the subtree height did not change, +-1 means it
        grew by one, and +-2 is fixed with one rotation which restores the
        subtree's previous height.
        """
        parent = child.parent
        while parent is not None:
            if child is parent.left:
                factor = parent.decrement_factor()
            else:
                factor = parent.increment_factor()

            if factor == 0:
                logger.debug("insert walk stopped at %r", parent.value)
                return
            if factor in (-1, 1):
                child = parent
                parent = child.parent
                continue
            self._rotate(parent)
            return

    def _rebalance_after_delete(self, parent: Optional[AVLNode], side: Optional[str]) -> None:
        """Walk toward the root after `parent` lost height on `side`.

        Mirror image of the insert walk: a factor of +-1 means the subtree
        height is unchanged, 0 means it shrank and the walk continues. After
        a rotation the subtree shrank only when the new top is balanced.
        """
        while parent is not None:
            if side == LEFT:
                factor = parent.increment_factor()
            else:
                factor = parent.decrement_factor()

            if factor in (-1, 1):
                logger.debug("delete walk stopped at %r", parent.value)
                return
            top = parent
            if factor != 0:
                top = self._rotate(parent)
                if top.balance_factor != 0:
                    return

            parent = top.parent
            if parent is not None:
                side = parent.side_of(top)

    def _splice_out(self, node: AVLNode) -> Tuple[Optional[AVLNode], Optional[str]]:
        """Unlink a node that has at most one child.

        The sole child (if any) takes the node's slot.

        Returns:
            (former parent, side the node hung on), or (None, None) when the
            node was the root
        """
        child = node.left if node.left is not None else node.right
        parent = node.parent
        node.parent = node.left = node.right = None

        if parent is None:
            self._root = child
            if child is not None:
                child.parent = None
            return None, None

        side = parent.side_of(node)
        parent.attach(child, side)
        return parent, side

    def _replace(self, old: AVLNode, new: AVLNode) -> None:
        """Put `new` in the structural position currently held by `old`."""
        parent = old.parent
        if parent is None:
            self._root = new
            new.parent = None
            logger.debug("new root %r", new.value)
        else:
            parent.attach(new, parent.side_of(old))

    def _rotate(self, node: AVLNode) -> AVLNode:
        """Rebalance a node whose factor is +-2.

        Returns:
            The node now occupying `node`'s former position
        """
        if node.balance_factor < 0:
            if node.left.balance_factor <= 0:
                return self._rotate_single(node, LEFT)
            return self._rotate_cross(node, LEFT)
        if node.right.balance_factor >= 0:
            return self._rotate_single(node, RIGHT)
        return self._rotate_cross(node, RIGHT)

    def _rotate_single(self, top: AVLNode, heavy: str) -> AVLNode:
        """Left-left or right-right case.

        The heavy child replaces `top`, and `top` adopts the child's inner
        subtree.
        """
        inner = opposite(heavy)
        pivot = top.child(heavy)
        logger.debug("%s-%s rotation at %r", heavy, heavy, top.value)

        self._replace(top, pivot)
        top.attach(pivot.child(inner), heavy)
        pivot.attach(top, inner)

        lean = -1 if heavy == LEFT else 1
        if pivot.balance_factor == lean:
            top.balance_factor = 0
            pivot.balance_factor = 0
        else:
            # Pivot was balanced, which only happens on delete; the subtree
            # keeps its height.
            top.balance_factor = lean
            pivot.balance_factor = -lean
        return pivot

    def _rotate_cross(self, outer: AVLNode, heavy: str) -> AVLNode:
        """Left-right or right-left case.

        The grandchild on the inner side becomes the subtree top, with the
        heavy child and `outer` as its two children.
        """
        away = opposite(heavy)
        inner = outer.child(heavy)
        pivot = inner.child(away)
        logger.debug("%s-%s rotation at %r", heavy, away, outer.value)

        self._replace(outer, pivot)
        inner.attach(pivot.child(heavy), away)
        outer.attach(pivot.child(away), heavy)
        pivot.attach(inner, heavy)
        pivot.attach(outer, away)

        lean = -1 if heavy == LEFT else 1
        inner.balance_factor = 0
        outer.balance_factor = 0
        if pivot.balance_factor == lean:
            outer.balance_factor = -lean
        elif pivot.balance_factor == -lean:
            inner.balance_factor = lean
        pivot.balance_factor = 0
        return pivot

    def _after_mutation(self) -> None:
        if self.config.check_invariants:
            assert_valid(self)
