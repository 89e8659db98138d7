"""Tree traversal strategies for avltreelib.

Traversers implement the different orders in which an AVL tree can be
walked. They navigate exclusively through an AVLTreeAdapter and yield
(node, depth) tuples where depth is relative to the start node.

Traversers are read-only. Mutating the tree while a traversal is in
progress gives undefined results.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple

from ..errors import InvalidArgumentError
from .adapter import AVLTreeAdapter
from .node import AVLNode


class TreeTraverser(ABC):
    """Abstract base class for traversal strategies."""

    def __init__(self, adapter: AVLTreeAdapter):
        """Initialize traverser with an adapter.

        Args:
            adapter: AVLTreeAdapter for navigating the tree
        """
        self.adapter = adapter

    @abstractmethod
    def traverse(self,
                 root: Optional[AVLNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[AVLNode, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node (None yields nothing)
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first traversal: all nodes at depth N before depth N+1."""

    def traverse(self,
                 root: Optional[AVLNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[AVLNode, int]]:
        if root is None:
            return
        queue: Deque[Tuple[AVLNode, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in self.adapter.get_children(node):
                    queue.append((child, depth + 1))


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal: parent, then left, then right."""

    def traverse(self,
                 root: Optional[AVLNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[AVLNode, int]]:
        if root is None:
            return
        # Right child pushed first so the left one is popped first
        stack: List[Tuple[AVLNode, int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in reversed(list(self.adapter.get_children(node))):
                    stack.append((child, depth + 1))


class InOrderTraverser(TreeTraverser):
    """In-order traversal: left subtree, parent, right subtree.

    On a binary search tree this yields values in non-decreasing order.
    """

    def traverse(self,
                 root: Optional[AVLNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[AVLNode, int]]:
        stack: List[Tuple[AVLNode, int]] = []
        node = root
        depth = 0

        while stack or node is not None:
            # Descend along left links as far as the depth limit allows
            while node is not None:
                stack.append((node, depth))
                node = self.adapter.get_left(node) if self._should_explore(depth, max_depth) else None
                depth += 1

            node, depth = stack.pop()
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            node = self.adapter.get_right(node) if self._should_explore(depth, max_depth) else None
            depth += 1


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal: children before parent.

    Useful for bottom-up aggregation such as height computation.
    """

    def traverse(self,
                 root: Optional[AVLNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[AVLNode, int]]:

        def _traverse_recursive(node: AVLNode, depth: int) -> Iterator[Tuple[AVLNode, int]]:
            if self._should_explore(depth, max_depth):
                for child in self.adapter.get_children(node):
                    yield from _traverse_recursive(child, depth + 1)

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

        if root is not None:
            yield from _traverse_recursive(root, 0)


class LevelOrderTraverser(TreeTraverser):
    """Level-order traversal with level grouping.

    Yields the same order as breadth-first, but finishes collecting a
    whole level before moving to the next one.
    """

    def traverse(self,
                 root: Optional[AVLNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[AVLNode, int]]:
        current_level: List[AVLNode] = [root] if root is not None else []
        current_depth = 0

        while current_level and (max_depth is None or current_depth <= max_depth):
            next_level: List[AVLNode] = []

            for node in current_level:
                if self._should_yield(current_depth, min_depth, max_depth):
                    yield (node, current_depth)
                next_level.extend(self.adapter.get_children(node))

            current_level = next_level
            current_depth += 1


def create_traverser(strategy: str, adapter: AVLTreeAdapter) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (bfs, dfs_pre, in_order,
            dfs_post, level)
        adapter: AVLTreeAdapter for the tree

    Returns:
        TreeTraverser instance

    Raises:
        InvalidArgumentError: If strategy name is not recognized
    """
    strategies = {
        'bfs': BreadthFirstTraverser,
        'breadth_first': BreadthFirstTraverser,
        'dfs_pre': DepthFirstPreOrderTraverser,
        'pre_order': DepthFirstPreOrderTraverser,
        'in_order': InOrderTraverser,
        'inorder': InOrderTraverser,
        'dfs_post': DepthFirstPostOrderTraverser,
        'post_order': DepthFirstPostOrderTraverser,
        'level': LevelOrderTraverser,
        'level_order': LevelOrderTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise InvalidArgumentError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower](adapter)
