r"""
Construction of reward and cost matrices from two labelled collections.
"""

from __future__ import annotations

import typing as T

import numpy as np
import numpy.typing as NP

from ..consts import ZERO_REWARD_COST

__all__ = ["reward_matrix", "reward_to_cost", "total_suitability_score"]

Score: T.TypeAlias = T.Callable[[str, str], float]


def reward_matrix(
    drivers: T.Sequence[str], addresses: T.Sequence[str], score: Score
) -> NP.NDArray[np.float64]:
    """
    Score every driver against every address.

    Parameters
    ----------
    drivers
        Row labels.
    addresses
        Column labels.
    score
        Reward of a ``(driver, address)`` pair.

    Returns
    -------
    NDArray[S, S]
        Rewards, square with ``S = max(len(drivers), len(addresses))``. Padded rows
        and columns have zero reward.
    """
    size = max(len(drivers), len(addresses))
    rewards = np.zeros((size, size), dtype=np.float64)
    for row, driver in enumerate(drivers):
        for col, address in enumerate(addresses):
            rewards[row, col] = score(driver, address)
    return rewards


def reward_to_cost(
    rewards: NP.ArrayLike, sentinel: float = ZERO_REWARD_COST
) -> NP.NDArray[np.float64]:
    """
    Convert rewards to costs by negation, such that minimizing the cost maximizes
    the reward. Zero rewards become ``sentinel``, which keeps unsuitable pairs out of
    the assignment whenever possible.
    """
    rewards = np.asarray(rewards, dtype=np.float64)
    return np.where(rewards == 0, sentinel, -rewards)


def total_suitability_score(
    rewards: NP.ArrayLike, row_to_col: NP.ArrayLike
) -> float:
    """
    Sum of the rewards of all assigned pairs.
    """
    rewards = np.asarray(rewards, dtype=np.float64)
    cols = np.asarray(row_to_col, dtype=np.int64)
    return float(rewards[np.arange(cols.shape[0]), cols].sum())
