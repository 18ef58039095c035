from __future__ import annotations

from abc import abstractmethod
from typing import Tuple

import torch

__all__ = ["Assignment"]


class Assignment(torch.nn.Module):
    """
    Solves a linear assignment problem (LAP) over a possibly rectangular cost
    matrix, where entries at or above the threshold are never matched.
    """

    threshold: float

    def __init__(self, threshold: float = torch.inf):
        super().__init__()

        self.threshold = threshold

    @torch.jit.script_if_tracing
    def forward(
        self, cost_matrix: torch.Tensor
    ) -> Tuple[torch.Tensor, torch.Tensor, torch.Tensor]:
        """
        Solve the cost matrix

        Parameters
        ----------
        cost_matrix
            Cost matrix (NxM) to solve, non-finite entries are never matched

        Returns
        -------
            Tuple of matches (N_match x 2), unmatched rows and unmatched columns
        """

        if min(cost_matrix.shape) == 0:
            return self._no_match(cost_matrix)

        cost_matrix = torch.where(cost_matrix < self.threshold, cost_matrix, torch.inf)

        return self._assign(cost_matrix)

    def extra_repr(self) -> str:
        return f"threshold={self.threshold}"

    @staticmethod
    def _no_match(
        cost_matrix: torch.Tensor,
    ) -> Tuple[torch.Tensor, torch.Tensor, torch.Tensor]:
        rows_num, cols_num = cost_matrix.shape
        device = cost_matrix.device
        return (
            torch.empty((0, 2), dtype=torch.long, device=device),
            torch.arange(rows_num, dtype=torch.long, device=device),
            torch.arange(cols_num, dtype=torch.long, device=device),
        )

    @abstractmethod
    def _assign(
        self, cost_matrix: torch.Tensor
    ) -> Tuple[torch.Tensor, torch.Tensor, torch.Tensor]:
        raise NotImplementedError
