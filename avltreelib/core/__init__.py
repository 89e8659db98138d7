"""Core components of avltreelib: node, tree, adapter and traversers."""

from .node import AVLNode, LEFT, RIGHT
from .tree import AVLTree
from .adapter import AVLTreeAdapter
from .traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    InOrderTraverser,
    DepthFirstPostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)

__all__ = [
    "AVLNode",
    "LEFT",
    "RIGHT",
    "AVLTree",
    "AVLTreeAdapter",
    "TreeTraverser",
    "BreadthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "InOrderTraverser",
    "DepthFirstPostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
]
