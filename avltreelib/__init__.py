"""avltreelib - a self-balancing (AVL) binary search tree.

    from avltreelib import AVLTree

    tree = AVLTree()
    tree.insert(10)
    tree.insert(20)
    tree.insert(30)      # right-right rotation, 20 becomes the root
    print(tree.debug_dump())

Every insert and delete keeps each node's balance factor in {-1, 0, 1},
so lookups, insertions and deletions stay logarithmic.
"""

__version__ = "0.1.0"

from .core import (
    AVLNode,
    AVLTree,
    AVLTreeAdapter,
    LEFT,
    RIGHT,
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    InOrderTraverser,
    DepthFirstPostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .config import TreeConfig, DumpConfig, TraversalStrategy
from .errors import AVLTreeError, InvalidArgumentError, InvariantViolationError
from .validation import check_invariants, assert_valid, compute_height
from .api import (
    traverse_tree,
    collect_tree_data,
    in_order_values,
    count_nodes,
    tree_height,
    get_leaf_nodes,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Core
    "AVLNode",
    "AVLTree",
    "AVLTreeAdapter",
    "LEFT",
    "RIGHT",
    "TreeTraverser",
    "BreadthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "InOrderTraverser",
    "DepthFirstPostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    # Config
    "TreeConfig",
    "DumpConfig",
    "TraversalStrategy",
    # Errors
    "AVLTreeError",
    "InvalidArgumentError",
    "InvariantViolationError",
    # Validation
    "check_invariants",
    "assert_valid",
    "compute_height",
    # API
    "traverse_tree",
    "collect_tree_data",
    "in_order_values",
    "count_nodes",
    "tree_height",
    "get_leaf_nodes",
    "get_tree_stats",
]
