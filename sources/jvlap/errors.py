r"""
Errors raised when a cost matrix cannot be solved.

All errors derive from :class:`ValueError`, since they are raised on invalid
inputs before any solving takes place.
"""

from __future__ import annotations

__all__ = ["LAPError", "InvalidDimensionError", "NonFiniteCostError"]


class LAPError(ValueError):
    """
    Base class for input errors of the assignment solver.
    """


class InvalidDimensionError(LAPError):
    """
    The dimension is not positive, or the matrix is not square with that dimension.
    """


class NonFiniteCostError(LAPError):
    """
    The cost matrix contains a NaN or infinite entry.
    """
