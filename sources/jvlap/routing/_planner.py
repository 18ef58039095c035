r"""
Assign drivers to shipment destinations such that the total suitability score is
maximal.
"""

from __future__ import annotations

import typing as T

from ..assignment import lapjv
from ..debug import check_debug_enabled
from .matrices import Score, reward_matrix, reward_to_cost, total_suitability_score
from .suitability import suitability_score

__all__ = ["RoutePlan", "assign_routes"]


class RoutePlan(T.NamedTuple):
    """
    Result of :func:`assign_routes`.

    Attributes
    ----------
    total_score
        Sum of the suitability scores of all assigned pairs.
    assignments
        Destination address of each assigned driver.
    unassigned_drivers
        Drivers left without a destination, when there are more drivers than
        addresses.
    unassigned_addresses
        Addresses left without a driver, when there are more addresses than
        drivers.
    """

    total_score: float
    assignments: dict[str, str]
    unassigned_drivers: list[str]
    unassigned_addresses: list[str]


def assign_routes(
    drivers: T.Sequence[str],
    addresses: T.Sequence[str],
    score: Score = suitability_score,
) -> RoutePlan:
    """
    Build the reward matrix of all driver/address pairs, convert it to a cost
    matrix and solve it with :func:`lapjv`. When both collections differ in
    length, the matrix is padded with zero-reward entries and the surplus is
    reported as unassigned.
    """
    size = max(len(drivers), len(addresses))
    if size == 0:
        return RoutePlan(0.0, {}, [], [])

    rewards = reward_matrix(drivers, addresses, score)
    solution = lapjv(size, reward_to_cost(rewards))

    assignments: dict[str, str] = {}
    unassigned_drivers: list[str] = []
    for row, driver in enumerate(drivers):
        col = int(solution.row_to_col[row])
        if col < len(addresses):
            assignments[driver] = addresses[col]
        else:
            unassigned_drivers.append(driver)
    unassigned_addresses = [
        address
        for col, address in enumerate(addresses)
        if solution.col_to_row[col] >= len(drivers)
    ]

    total_score = total_suitability_score(rewards, solution.row_to_col)

    if check_debug_enabled():
        print(
            f"Assigned {len(assignments)} drivers to {len(addresses)} addresses "
            f"with total suitability score {total_score}"
        )

    return RoutePlan(total_score, assignments, unassigned_drivers, unassigned_addresses)
