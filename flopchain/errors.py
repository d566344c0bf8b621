# flopchain/errors.py
"""
Exception types raised by the flopchain cost model and chain optimizer.
"""

from typing import Optional, Tuple


class FlopChainError(Exception):
    """Base exception for flopchain errors."""
    pass


class DimensionMismatch(FlopChainError, ValueError):
    """Matrix dimension error on add or multiply."""

    def __init__(self, operation: str, left: Tuple[int, int], right: Tuple[int, int]):
        self.operation = operation
        self.left = tuple(left)
        self.right = tuple(right)
        super().__init__(
            f"dimensions do not match for {operation}: "
            f"{self.left[0]} x {self.left[1]} vs {self.right[0]} x {self.right[1]}"
        )


class InvalidArgument(FlopChainError, ValueError):
    """Malformed chain, shape or name arguments."""
    pass


class NoInput(InvalidArgument):
    """Empty chain given to an optimizer configured to reject it."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "no matrices given")
