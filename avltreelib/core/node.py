"""AVLNode - the node entity of an AVL tree.

An AVLNode owns its two child slots and keeps a non-owning back-reference
to its parent. The node itself never rebalances anything: it only offers
the primitive attach operations the tree uses while restructuring, plus
the balance factor bookkeeping used during ancestor walks.
"""

from typing import Any, Dict, Optional

from ..errors import InvalidArgumentError

LEFT = "left"
RIGHT = "right"


class AVLNode:
    """A single node of an AVL tree.

    Attributes:
        value: Stored value (must be orderable against the other values)
        left: Left child or None
        right: Right child or None
        parent: Owning node, or None for the root
        balance_factor: height(right subtree) - height(left subtree)
    """

    __slots__ = ("value", "left", "right", "parent", "balance_factor")

    def __init__(self, value: Any):
        self.value = value
        self.left: Optional["AVLNode"] = None
        self.right: Optional["AVLNode"] = None
        self.parent: Optional["AVLNode"] = None
        self.balance_factor = 0

    def attach(self, child: Optional["AVLNode"], side: str) -> None:
        """Hang `child` under this node on an explicit side.

        `child` may be None, which clears the slot. When a child is given
        its parent back-reference is pointed at this node.

        Args:
            child: Node to attach, or None
            side: LEFT or RIGHT
        """
        if side == LEFT:
            self.left = child
        elif side == RIGHT:
            self.right = child
        else:
            raise InvalidArgumentError(f"Unknown side: {side!r}")
        if child is not None:
            child.parent = self

    def attach_inferred(self, child: "AVLNode") -> None:
        """Hang `child` under this node, choosing the side by value.

        Values less than or equal to this node's value go left, greater
        values go right.

        Raises:
            InvalidArgumentError: If child is None
        """
        if child is None:
            raise InvalidArgumentError(
                "Cannot infer the side of a missing child; "
                "use attach(child, side) to clear a slot"
            )
        self.attach(child, LEFT if child.value <= self.value else RIGHT)

    def side_of(self, child: "AVLNode") -> str:
        """Return the side on which `child` hangs (by identity)."""
        if child is self.left:
            return LEFT
        if child is self.right:
            return RIGHT
        raise InvalidArgumentError(f"{child!r} is not a child of {self!r}")

    def increment_factor(self) -> int:
        self.balance_factor += 1
        return self.balance_factor

    def decrement_factor(self) -> int:
        self.balance_factor -= 1
        return self.balance_factor

    def child(self, side: str) -> Optional["AVLNode"]:
        return self.left if side == LEFT else self.right

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def metadata(self) -> Dict[str, Any]:
        """Lightweight description of the node, for debugging and stats."""
        return {
            "value": self.value,
            "balance_factor": self.balance_factor,
            "is_root": self.parent is None,
            "children": int(self.left is not None) + int(self.right is not None),
        }

    def __str__(self) -> str:
        return f"{self.value} ({self.balance_factor})"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(value={self.value!r}, bf={self.balance_factor})"


def opposite(side: str) -> str:
    """Return the other side."""
    return RIGHT if side == LEFT else LEFT
