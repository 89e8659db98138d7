"""High-level API for avltreelib.

Simple functional helpers for walking and summarizing an AVLTree. They
wrap the adapter/traverser machinery for the common cases.
"""

from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from .config import TraversalStrategy
from .core.adapter import AVLTreeAdapter
from .core.node import AVLNode
from .core.traverser import create_traverser
from .core.tree import AVLTree
from .errors import InvalidArgumentError


def collect_tree_data(
    tree: AVLTree,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.IN_ORDER,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
) -> Iterator[Tuple[AVLNode, int]]:
    """Walk the tree yielding (node, depth) tuples.

    Args:
        tree: Tree to walk
        strategy: Traversal strategy (bfs, dfs_pre, in_order, dfs_post, level)
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding nodes

    Yields:
        (node, depth) tuples, depth 0 being the root
    """
    traverser = create_traverser(_parse_strategy(strategy).value, AVLTreeAdapter())
    yield from traverser.traverse(tree.root, max_depth=max_depth, min_depth=min_depth)


def traverse_tree(
    tree: AVLTree,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.IN_ORDER,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
) -> Iterator[AVLNode]:
    """Walk the tree yielding nodes.

    Example:
        >>> tree = AVLTree()
        >>> for v in (2, 1, 3):
        ...     tree.insert(v)
        >>> [node.value for node in traverse_tree(tree, "bfs")]
        [2, 1, 3]
    """
    for node, _ in collect_tree_data(tree, strategy, max_depth, min_depth):
        yield node


def in_order_values(tree: AVLTree) -> List[Any]:
    """Return the stored values in non-decreasing order."""
    return [node.value for node in traverse_tree(tree, TraversalStrategy.IN_ORDER)]


def count_nodes(tree: AVLTree, **kwargs) -> int:
    """Count nodes by walking the tree rather than trusting size()."""
    return sum(1 for _ in collect_tree_data(tree, **kwargs))


def tree_height(tree: AVLTree) -> int:
    """Number of levels in the tree (0 when empty)."""
    deepest = -1
    for _, depth in collect_tree_data(tree, TraversalStrategy.BREADTH_FIRST):
        deepest = max(deepest, depth)
    return deepest + 1


def get_leaf_nodes(tree: AVLTree) -> List[AVLNode]:
    """Return the leaves from left to right."""
    return [node for node in traverse_tree(tree) if node.is_leaf()]


def get_tree_stats(tree: AVLTree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with total/leaf/internal node counts, height, node
        count per depth and a histogram of balance factors
    """
    stats: Dict[str, Any] = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'height': 0,
        'depths': {},
        'balance_factors': {-1: 0, 0: 0, 1: 0},
    }

    for node, depth in collect_tree_data(tree, TraversalStrategy.BREADTH_FIRST):
        stats['total_nodes'] += 1
        if node.is_leaf():
            stats['leaf_nodes'] += 1
        stats['height'] = max(stats['height'], depth + 1)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1
        factor = node.balance_factor
        stats['balance_factors'][factor] = stats['balance_factors'].get(factor, 0) + 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    return stats


# Helper functions

def _parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum."""
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_map = {
        'bfs': TraversalStrategy.BREADTH_FIRST,
        'breadth_first': TraversalStrategy.BREADTH_FIRST,
        'dfs_pre': TraversalStrategy.DEPTH_FIRST_PRE,
        'pre_order': TraversalStrategy.DEPTH_FIRST_PRE,
        'in_order': TraversalStrategy.IN_ORDER,
        'inorder': TraversalStrategy.IN_ORDER,
        'dfs_post': TraversalStrategy.DEPTH_FIRST_POST,
        'post_order': TraversalStrategy.DEPTH_FIRST_POST,
        'level': TraversalStrategy.LEVEL_ORDER,
        'level_order': TraversalStrategy.LEVEL_ORDER,
    }

    key = strategy.lower() if isinstance(strategy, str) else strategy
    if key not in strategy_map:
        raise InvalidArgumentError(f"Unknown strategy: {strategy}")
    return strategy_map[key]
