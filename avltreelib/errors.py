"""Exception hierarchy for avltreelib.

Looking up or deleting a value that is not stored is a normal outcome
(False / None), never an exception.
"""

from typing import List, Optional


class AVLTreeError(Exception):
    """Base class for all avltreelib errors."""
    pass


class InvalidArgumentError(AVLTreeError, ValueError):
    """Raised when a missing value or an invalid argument is supplied.

    Operations raising this error leave the tree untouched.
    """
    pass


class InvariantViolationError(AVLTreeError, AssertionError):
    """Raised when a structural check finds a broken tree invariant."""

    def __init__(self, violations: List[str], message: Optional[str] = None):
        self.violations = list(violations)
        if message is None:
            message = f"{len(self.violations)} invariant violation(s): " + "; ".join(self.violations)
        super().__init__(message)
