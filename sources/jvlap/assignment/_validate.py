r"""
Input validation for the assignment solver.
"""

from __future__ import annotations

import typing as T

import numpy as np
import numpy.typing as NP

from ..errors import InvalidDimensionError, NonFiniteCostError

__all__ = ["check_cost_matrix"]


def check_cost_matrix(n: int, cost_matrix: NP.ArrayLike) -> NP.NDArray[np.float64]:
    """
    Validate a square cost matrix of dimension ``n``.

    Parameters
    ----------
    n
        Number of rows and columns.
    cost_matrix
        Cost matrix, any array-like of real numbers.

    Returns
    -------
    NDArray[float64]
        A C-contiguous copy of the cost matrix.

    Raises
    ------
    InvalidDimensionError
        When ``n`` is not a positive integer or the matrix shape is not ``(n, n)``.
    NonFiniteCostError
        When any entry is NaN or infinite.
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n <= 0:
        msg = f"Dimension must be a positive integer, got {n!r}!"
        raise InvalidDimensionError(msg)

    try:
        matrix = np.array(cost_matrix, dtype=np.float64, order="C", copy=True)
    except (TypeError, ValueError) as err:
        msg = f"Cost matrix could not be read as a {n}x{n} numeric matrix: {err}"
        raise InvalidDimensionError(msg) from err

    if matrix.shape != (n, n):
        msg = f"Expected a cost matrix of shape ({n}, {n}), got {matrix.shape}!"
        raise InvalidDimensionError(msg)

    finite = np.isfinite(matrix)
    if not finite.all():
        i, j = T.cast(T.Tuple[int, int], tuple(np.argwhere(~finite)[0]))
        msg = f"Cost matrix entry ({i}, {j}) is not finite: {matrix[i, j]}"
        raise NonFiniteCostError(msg)

    return matrix
