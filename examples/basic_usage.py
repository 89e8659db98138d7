#!/usr/bin/env python3
"""
Basic avltreelib usage.

This example demonstrates:
- Inserting values and watching rotations keep the tree short
- Deleting values
- Walking the tree with the different traversal strategies
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from avltreelib import AVLTree, get_tree_stats, traverse_tree


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    tree = AVLTree()
    for value in range(1, 8):
        tree.insert(value)

    print("After inserting 1..7 ascending:")
    print(tree.debug_dump())

    tree.delete(4)
    print("After deleting 4:")
    print(tree.debug_dump())

    for strategy in ("bfs", "dfs_pre", "in_order", "dfs_post"):
        values = [node.value for node in traverse_tree(tree, strategy)]
        print(f"{strategy:>9}: {values}")

    stats = get_tree_stats(tree)
    print(f"\nNodes: {stats['total_nodes']}, height: {stats['height']}, leaves: {stats['leaf_nodes']}")


if __name__ == "__main__":
    main()
