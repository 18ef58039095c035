r"""
Various utilities for working with assignment problems.
"""

from __future__ import annotations

import typing as T

import numpy as np
import numpy.typing as NP
import torch
from torch import Tensor

if T.TYPE_CHECKING:
    from ._lapjv import LAPSolution

__all__ = [
    "gather_total_cost",
    "pad_square",
    "split_assignment",
    "check_bijection",
    "dual_infeasibility",
    "slackness_residual",
]


def gather_total_cost(cost_matrix: Tensor, assignment: Tensor) -> Tensor:
    """
    Gather the total cost of an assignment. The amounts to summing all the assigned
    items from the cost matrix.

    Parameters
    ----------
    cost_matrix: Tensor[N, M]
        The cost matrix.
    assignment: Tensor[min(N, M), 2]
        The assignment tensor of row-column pairs.

    Returns
    -------
    Tensor[*]
        The total cost of the assignment.
    """

    return cost_matrix[assignment[:, 0], assignment[:, 1]].sum()


def pad_square(
    cost_matrix: NP.NDArray[np.float64],
) -> T.Tuple[NP.NDArray[np.float64], NP.NDArray[np.bool_]]:
    """
    Embed a rectangular cost matrix with non-finite (gated) entries into a square,
    finite matrix.

    Dummy rows or columns cost zero. Gated entries are replaced by a sentinel that
    exceeds twice the largest total any assignment of finite entries can reach, so
    that an optimal assignment uses as few gated entries as possible.

    Parameters
    ----------
    cost_matrix: NDArray[N, M]
        The cost matrix.

    Returns
    -------
    NDArray[S, S]
        Square matrix with ``S = max(N, M)``.
    NDArray[S, S]
        Mask of the entries that may be reported as matches.
    """
    rows_num, cols_num = cost_matrix.shape
    size = max(rows_num, cols_num)

    allowed = np.isfinite(cost_matrix)
    span = float(np.abs(cost_matrix[allowed]).max()) if allowed.any() else 1.0
    gate = 2.0 * size * span + 1.0

    square = np.zeros((size, size), dtype=np.float64)
    square[:rows_num, :cols_num] = np.where(allowed, cost_matrix, gate)

    mask = np.zeros((size, size), dtype=np.bool_)
    mask[:rows_num, :cols_num] = allowed

    return square, mask


def split_assignment(
    row_to_col: NP.NDArray[np.integer],
    mask: NP.NDArray[np.bool_],
    shape: T.Tuple[int, int],
    device: torch.device | str = "cpu",
) -> T.Tuple[Tensor, Tensor, Tensor]:
    """
    Convert a complete assignment of a padded matrix (see :func:`pad_square`) into
    matches and unmatched rows and columns of the original ``shape``.
    """
    rows_num, cols_num = shape
    rows = np.arange(row_to_col.shape[0])
    cols = np.asarray(row_to_col, dtype=np.int64)

    keep = mask[rows, cols]
    matches = np.column_stack((rows[keep], cols[keep])).astype(np.int64)

    unmatched_rows = np.setdiff1d(np.arange(rows_num), matches[:, 0])
    unmatched_cols = np.setdiff1d(np.arange(cols_num), matches[:, 1])

    return (
        torch.from_numpy(matches).to(device=device, dtype=torch.long),
        torch.from_numpy(unmatched_rows).to(device=device, dtype=torch.long),
        torch.from_numpy(unmatched_cols).to(device=device, dtype=torch.long),
    )


def check_bijection(row_to_col: NP.ArrayLike, col_to_row: NP.ArrayLike) -> bool:
    """
    Check whether both assignment vectors are permutations and mutual inverses.
    """
    x = np.asarray(row_to_col)
    y = np.asarray(col_to_row)
    n = x.shape[0]
    if y.shape != (n,):
        return False
    if not (np.all((x >= 0) & (x < n)) and np.all((y >= 0) & (y < n))):
        return False
    return bool(np.all(y[x] == np.arange(n)) and np.all(x[y] == np.arange(n)))


def dual_infeasibility(
    cost_matrix: NP.ArrayLike, u: NP.ArrayLike, v: NP.ArrayLike
) -> float:
    """
    Largest amount by which ``u[i] + v[j]`` exceeds ``cost[i, j]``. Zero or less for
    dual feasible variables.
    """
    cost = np.asarray(cost_matrix, dtype=np.float64)
    excess = np.asarray(u)[:, None] + np.asarray(v)[None, :] - cost
    return float(excess.max())


def slackness_residual(cost_matrix: NP.ArrayLike, solution: LAPSolution) -> float:
    """
    Largest absolute reduced cost over the assigned pairs, which is zero when
    complementary slackness holds.
    """
    cost = np.asarray(cost_matrix, dtype=np.float64)
    rows = np.arange(cost.shape[0])
    cols = solution.row_to_col
    residual = cost[rows, cols] - solution.u - solution.v[cols]
    return float(np.abs(residual).max())
