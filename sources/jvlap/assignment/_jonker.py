from __future__ import annotations

from typing import Tuple

import numpy as np
import torch
import torch.fx
import typing_extensions as TX

from ..debug import check_debug_enabled
from ._base import Assignment
from ._lapjv import lapjv
from ._utils import pad_square, split_assignment

__all__ = ["Jonker", "jonker_volgenant_assignment"]


class Jonker(Assignment):
    """
    Uses the Jonker-Volgenant algorithm to solve the linear assignment problem.
    """

    @TX.override
    def _assign(
        self, cost_matrix: torch.Tensor
    ) -> Tuple[torch.Tensor, torch.Tensor, torch.Tensor]:
        return jonker_volgenant_assignment(cost_matrix, self.threshold)


def jonker_volgenant_assignment(
    cost_matrix: torch.Tensor, threshold: float
) -> Tuple[torch.Tensor, torch.Tensor, torch.Tensor]:
    """
    Perform linear assignment of rows to columns with :func:`lapjv`. The cost
    matrix is padded to a square matrix first, such that rows or columns are
    left unmatched when the matrix is rectangular or when all their entries are
    non-finite or at least ``threshold``.
    """

    if min(cost_matrix.shape) == 0:
        return Assignment._no_match(cost_matrix)

    device = cost_matrix.device
    cost_matrix = cost_matrix.detach().cpu().contiguous()
    cost_matrix = np.ascontiguousarray(cost_matrix).astype(np.float64)
    cost_matrix = np.where(cost_matrix < threshold, cost_matrix, np.inf)

    square, mask = pad_square(cost_matrix)
    solution = lapjv(square.shape[0], square)
    matches, unmatched_a, unmatched_b = split_assignment(
        solution.row_to_col, mask, cost_matrix.shape, device
    )

    if check_debug_enabled():
        total = sum(float(cost_matrix[i, j]) for i, j in matches.tolist())
        print(f"Jonker-Volgenant Assignment completed with total cost: {total}")
        for i, j in matches.tolist():
            print(f"- match: C {i} -> D {j} (cost: {cost_matrix[i, j]})")
        print(f"Unmatched C: {unmatched_a.tolist()}")
        print(f"Unmatched D: {unmatched_b.tolist()}")

    return matches, unmatched_a, unmatched_b


torch.fx.wrap("jonker_volgenant_assignment")
