r"""
Jonker-Volgenant shortest augmenting path solver for the square linear
assignment problem.

Reference: R. Jonker and A. Volgenant, "A Shortest Augmenting Path Algorithm for
Dense and Sparse Linear Assignment Problems", Computing 38, 325-340, 1987.

The solver runs five phases over a shared :class:`_SolverState`:

1. scale estimation, i.e. the ``big`` sentinel and the ``epsilon`` tolerance;
2. column reduction;
3. reduction transfer;
4. augmenting row reduction (two passes);
5. augmentation along a shortest path, once for every row that is still free.

The phases before augmentation are heuristics that cheaply assign most rows, such
that the comparatively expensive shortest path search runs for few rows only.
"""

from __future__ import annotations

import dataclasses as D
import typing as T

import numpy as np
import numpy.typing as NP

from ..consts import SCALE_FACTOR, UNASSIGNED
from ..debug import check_debug_enabled
from ._validate import check_cost_matrix

__all__ = ["LAPSolution", "Scale", "estimate_scale", "lapjv"]


class Scale(T.NamedTuple):
    """
    Tolerances derived from the magnitude of a cost matrix.
    """

    big: float
    epsilon: float


class LAPSolution(T.NamedTuple):
    """
    Solution of a square linear assignment problem.

    Attributes
    ----------
    cost
        Total cost of the assignment.
    row_to_col
        Column assigned to each row.
    col_to_row
        Row assigned to each column.
    u
        Row dual variables.
    v
        Column dual variables.
    """

    cost: float
    row_to_col: NP.NDArray[np.int32]
    col_to_row: NP.NDArray[np.int32]
    u: NP.NDArray[np.float64]
    v: NP.NDArray[np.float64]


def estimate_scale(cost_matrix: NP.NDArray[np.float64]) -> Scale:
    """
    Derive the ``big`` sentinel, which stands in for an infinite reduced cost, and
    the ``epsilon`` tolerance used to break ties. Both follow from the average
    magnitude ``sum(|cost|) / n`` of the matrix.

    An all-zero matrix collapses both values to zero, in which case ties are
    broken on exact equality.
    """
    n = cost_matrix.shape[0]
    mean = float(np.abs(cost_matrix).sum()) / n
    return Scale(big=SCALE_FACTOR * mean, epsilon=mean / SCALE_FACTOR)


@D.dataclass(slots=True)
class _SolverState:
    """
    Mutable state of a single solve, shared by all phases.

    The phases read and write single elements in tight loops, hence the buffers
    are plain lists rather than arrays.
    """

    n: int
    cost: list[list[float]]
    row_to_col: list[int]
    col_to_row: list[int]
    v: list[float]
    free: list[int] = D.field(default_factory=list)

    @classmethod
    def from_matrix(cls, cost_matrix: NP.NDArray[np.float64]) -> _SolverState:
        n = cost_matrix.shape[0]
        return cls(
            n=n,
            cost=cost_matrix.tolist(),
            row_to_col=[UNASSIGNED] * n,
            col_to_row=[UNASSIGNED] * n,
            v=[0.0] * n,
        )

    def assign(self, i: int, j: int) -> None:
        self.row_to_col[i] = j
        self.col_to_row[j] = i


def lapjv(n: int, cost_matrix: NP.ArrayLike) -> LAPSolution:
    """
    Solve the square linear assignment problem, i.e. find the permutation that
    assigns each row to a unique column at minimal total cost.

    Parameters
    ----------
    n
        Number of rows and columns.
    cost_matrix
        Cost matrix of shape ``(n, n)`` with finite entries. The input is copied
        and never modified.

    Returns
    -------
    LAPSolution
        Total cost, assignment in both directions, and the dual variables
        ``u`` and ``v`` for which ``u[i] + v[row_to_col[i]]`` equals the cost of
        every assigned pair.

    Raises
    ------
    InvalidDimensionError
        When ``n`` is not positive or the matrix is not of shape ``(n, n)``.
    NonFiniteCostError
        When the matrix has NaN or infinite entries.
    """
    matrix = check_cost_matrix(n, cost_matrix)
    scale = estimate_scale(matrix)
    state = _SolverState.from_matrix(matrix)

    debug = check_debug_enabled()
    if debug:
        print(f"Jonker-Volgenant on {n}x{n}: big = {scale.big}, epsilon = {scale.epsilon}")
        if scale.epsilon == 0.0:
            print("- degenerate scale: ties are broken on exact equality")

    matches = _column_reduction(state, matrix)
    _reduction_transfer(state, matches, scale)
    if debug:
        print(f"- free rows after reduction transfer: {len(state.free)}")

    for _ in range(2):
        _augmenting_row_reduction(state, scale)
    if debug:
        print(f"- free rows after augmenting row reduction: {len(state.free)}")

    for freerow in state.free:
        _augment(state, freerow)

    solution = _finalize(state)
    if debug:
        print(f"- total cost: {solution.cost}")
    return solution


def _column_reduction(
    state: _SolverState, matrix: NP.NDArray[np.float64]
) -> list[int]:
    """
    Initialize the column duals as the column minima, and assign each column to
    its minimal row unless that row is already assigned to a column with a
    smaller minimum. Returns how often each row was a column minimum.
    """
    v = state.v
    matches = [0] * state.n
    minimal_rows = np.argmin(matrix, axis=0).tolist()

    # Reverse order gives better results
    for j in range(state.n - 1, -1, -1):
        imin = minimal_rows[j]
        v[j] = state.cost[imin][j]
        matches[imin] += 1
        if matches[imin] == 1:
            state.assign(imin, j)
        elif v[j] < v[state.row_to_col[imin]]:
            j1 = state.row_to_col[imin]
            state.assign(imin, j)
            state.col_to_row[j1] = UNASSIGNED
        else:
            state.col_to_row[j] = UNASSIGNED
    return matches


def _reduction_transfer(state: _SolverState, matches: list[int], scale: Scale) -> None:
    big, epsilon = scale
    n, v = state.n, state.v

    for i in range(n):
        if matches[i] == 0:
            state.free.append(i)
            continue
        if matches[i] != 1:
            continue

        j1 = state.row_to_col[i]
        row = state.cost[i]
        minimum = big
        for j in range(n):
            if j == j1:
                continue
            h = row[j] - v[j]
            if h < minimum + epsilon:
                minimum = h
        v[j1] -= minimum


def _augmenting_row_reduction(state: _SolverState, scale: Scale) -> None:
    """
    Assign every free row to its minimal reduced-cost column, lowering that
    column's dual such that the row's reduced cost rises to its second minimum.

    A displaced row is scanned next when the minimum was strict, otherwise it is
    left for the next pass or the augmentation phase.
    """
    big, epsilon = scale
    n, v, col_to_row = state.n, state.v, state.col_to_row

    free = state.free
    still_free: list[int] = []
    k = 0
    while k < len(free):
        i = free[k]
        k += 1

        row = state.cost[i]
        umin = row[0] - v[0]
        usubmin = big
        j1 = 0
        j2 = 0
        for j in range(1, n):
            h = row[j] - v[j]
            if h < usubmin:
                if h >= umin:
                    usubmin = h
                    j2 = j
                else:
                    usubmin = umin
                    umin = h
                    j2 = j1
                    j1 = j

        i0 = col_to_row[j1]
        if umin < usubmin + epsilon:
            v[j1] -= usubmin + epsilon - umin
        elif i0 != UNASSIGNED:
            # Equal minima and j1 is taken, j2 may be free
            j1 = j2
            i0 = col_to_row[j2]

        state.assign(i, j1)

        if i0 == UNASSIGNED:
            continue
        if umin < usubmin:
            # Continue the augmenting path i - j1 with i0
            k -= 1
            free[k] = i0
        else:
            still_free.append(i0)

    state.free = still_free


def _augment(state: _SolverState, freerow: int) -> None:
    """
    Find a shortest augmenting path from ``freerow`` to an unassigned column and
    flip the assignment along it.

    Columns are kept in a single buffer split by two cursors: ``[0, low)`` are
    ready, ``[low, up)`` are at the current minimum distance and waiting to be
    scanned, and ``[up, n)`` are not reached yet.
    """
    n, cost, v = state.n, state.cost, state.v
    row_to_col, col_to_row = state.row_to_col, state.col_to_row

    distance = [cost[freerow][j] - v[j] for j in range(n)]
    predecessor = [freerow] * n
    columns = list(range(n))

    low = 0
    up = 0
    last = -1
    minimum = 0.0
    end = UNASSIGNED
    while end == UNASSIGNED:
        if up == low:
            # Collect all columns at the new minimum distance
            last = low - 1
            minimum = distance[columns[up]]
            up += 1
            for k in range(up, n):
                j = columns[k]
                h = distance[j]
                if h <= minimum:
                    if h < minimum:
                        up = low
                        minimum = h
                    columns[k] = columns[up]
                    columns[up] = j
                    up += 1

            for k in range(low, up):
                if col_to_row[columns[k]] == UNASSIGNED:
                    end = columns[k]
                    break
            if end != UNASSIGNED:
                break

        # Relax the unreached columns via the row assigned to the next scanned column
        j1 = columns[low]
        low += 1
        i = col_to_row[j1]
        row = cost[i]
        h = row[j1] - v[j1] - minimum
        for k in range(up, n):
            j = columns[k]
            candidate = row[j] - v[j] - h
            if candidate < distance[j]:
                predecessor[j] = i
                if candidate == minimum:
                    if col_to_row[j] == UNASSIGNED:
                        end = j
                        break
                    columns[k] = columns[up]
                    columns[up] = j
                    up += 1
                distance[j] = candidate

    for k in range(last + 1):
        j = columns[k]
        v[j] += distance[j] - minimum

    while True:
        i = predecessor[end]
        col_to_row[end] = i
        end, row_to_col[i] = row_to_col[i], end
        if i == freerow:
            break


def _finalize(state: _SolverState) -> LAPSolution:
    n, cost, v = state.n, state.cost, state.v
    u = np.zeros(n, dtype=np.float64)
    total = 0.0
    for i in range(n - 1, -1, -1):
        j = state.row_to_col[i]
        u[i] = cost[i][j] - v[j]
        total += cost[i][j]

    return LAPSolution(
        cost=total,
        row_to_col=np.asarray(state.row_to_col, dtype=np.int32),
        col_to_row=np.asarray(state.col_to_row, dtype=np.int32),
        u=u,
        v=np.asarray(v, dtype=np.float64),
    )
