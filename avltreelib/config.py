"""Configuration system for avltreelib.

The tree itself needs no tuning to be correct; configuration only covers
how the tree renders itself for debugging and whether it re-validates its
invariants after each mutation.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class TraversalStrategy(Enum):
    """How to walk the tree."""
    BREADTH_FIRST = "bfs"           # Level by level
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent before children
    IN_ORDER = "in_order"           # Left subtree, parent, right subtree
    DEPTH_FIRST_POST = "dfs_post"   # Children before parent
    LEVEL_ORDER = "level"           # Grouped by level


@dataclass
class DumpConfig:
    """Rendering options for AVLTree.debug_dump()."""

    placeholder: str = " -.- "   # Token for an empty child slot
    separator: str = " "         # Appended after every slot

    def validate(self) -> List[str]:
        errors = []
        if not self.placeholder:
            errors.append("placeholder cannot be empty")
        if "\n" in self.placeholder or "\n" in self.separator:
            errors.append("placeholder and separator cannot contain newlines")
        return errors


@dataclass
class TreeConfig:
    """Complete configuration for an AVLTree."""

    dump: DumpConfig = field(default_factory=DumpConfig)

    # Re-run full invariant validation after every insert/delete
    check_invariants: bool = False

    @classmethod
    def default(cls) -> 'TreeConfig':
        return cls()

    @classmethod
    def debug(cls) -> 'TreeConfig':
        """Create config that validates the whole tree after each mutation.

        Validation is O(n), so this is meant for tests and debugging.
        """
        return cls(check_invariants=True)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        if not isinstance(self.dump, DumpConfig):
            errors.append("dump must be a DumpConfig")
        else:
            errors.extend(self.dump.validate())
        if not isinstance(self.check_invariants, bool):
            errors.append("check_invariants must be a bool")
        return errors
