"""
Reference solver backed by the SciPy implementation of the Hungarian method,
used to cross-check :func:`.lapjv`.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np
import scipy.optimize
import torch
import torch.fx
import typing_extensions as TX
from torch import Tensor

from ._base import Assignment
from ._utils import pad_square, split_assignment

__all__ = ["Hungarian", "hungarian_assignment"]


class Hungarian(Assignment):
    r"""
    Implements the Hungarian algorithm for solving a linear assignment problem.
    """

    @TX.override
    def _assign(self, cost_matrix: Tensor) -> Tuple[Tensor, Tensor, Tensor]:
        """
        Solves the assignment problem using the Hungarian algorithm.

        Parameters
        ----------
        cost_matrix
            Cost matrix

        Returns
        -------
            Tuple of matches, unmatched rows and unmatched columns.
        """
        return hungarian_assignment(cost_matrix)


def hungarian_assignment(
    cost_matrix: torch.Tensor,
) -> Tuple[torch.Tensor, torch.Tensor, torch.Tensor]:
    """
    Perform linear assignment using the SciPy implementation
    """

    if min(cost_matrix.shape) == 0:
        return Assignment._no_match(cost_matrix)

    device = cost_matrix.device

    cm = cost_matrix.cpu().detach().contiguous().numpy().astype(np.float64)
    square, mask = pad_square(cm)

    _, col_ind = scipy.optimize.linear_sum_assignment(square)

    return split_assignment(col_ind, mask, cm.shape, device)


torch.fx.wrap("hungarian_assignment")
