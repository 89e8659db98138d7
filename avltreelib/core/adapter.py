"""AVLTreeAdapter - navigation over AVL nodes.

Traversers never touch node attributes directly; they ask the adapter for
children and parents. This keeps the traversal algorithms independent of
how the node stores its links.
"""

from typing import Iterator, Optional

from .node import AVLNode


class AVLTreeAdapter:
    """Navigates the parent/child links of AVLNode instances.

    The adapter is read-only: it never modifies the tree it walks.
    """

    def get_children(self, node: AVLNode) -> Iterator[AVLNode]:
        """Yield the present children of `node`, left before right.

        Args:
            node: The parent node

        Returns:
            Iterator yielding zero, one or two AVLNode instances
        """
        if node.left is not None:
            yield node.left
        if node.right is not None:
            yield node.right

    def get_left(self, node: AVLNode) -> Optional[AVLNode]:
        return node.left

    def get_right(self, node: AVLNode) -> Optional[AVLNode]:
        return node.right

    def get_parent(self, node: AVLNode) -> Optional[AVLNode]:
        """Get the parent node, or None if `node` is the root."""
        return node.parent

    def get_depth(self, node: AVLNode) -> int:
        """Calculate the depth of a node by walking up to the root.

        Args:
            node: The node to get depth for

        Returns:
            Depth where root = 0
        """
        depth = 0
        current = node
        while True:
            parent = self.get_parent(current)
            if parent is None:
                break
            depth += 1
            current = parent
        return depth

    def get_siblings(self, node: AVLNode) -> Iterator[AVLNode]:
        """Yield the sibling of `node`, if it has one."""
        parent = self.get_parent(node)
        if parent is None:
            return
        for child in self.get_children(parent):
            if child is not node:
                yield child

    def estimated_size(self, node: Optional[AVLNode]) -> int:
        """Count the nodes in the subtree rooted at `node`.

        Exact for AVL trees, since every node is in memory.
        """
        if node is None:
            return 0
        return 1 + sum(self.estimated_size(child) for child in self.get_children(node))
