r"""
Tests for the assignment modules of ``jvlap.assignment``.
"""

from __future__ import annotations

import time

import numpy as np
import pytest
import torch

from jvlap import assignment


@pytest.fixture(
    params=[
        (8, 8),
        (8, 10),
        (10, 8),
        (0, 0),
        (0, 4),
    ],
    ids=(
        "cost:square",
        "cost:tall",
        "cost:wide",
        "cost:empty",
        "cost:no-rows",
    ),
)
def cost_matrix(request):
    shape = request.param
    return torch.rand(shape, dtype=torch.float) ** 10


@pytest.fixture(
    params=[
        assignment.Hungarian,
        assignment.Jonker,
    ],
    ids=(
        "alg:hungarian",
        "alg:jonker",
    ),
    scope="module",
)
def solver(request):
    mod = request.param()
    assert isinstance(mod, assignment.Assignment)
    return mod


def test_assignment_invoke(cost_matrix, solver):
    matches, unmatch_rows, unmatch_cols = solver(cost_matrix)

    assert matches.shape[0] == min(cost_matrix.shape)
    assert matches.shape[1] == 2
    assert matches.dtype == torch.long
    assert unmatch_rows.shape[0] == cost_matrix.shape[0] - matches.shape[0]
    assert unmatch_cols.shape[0] == cost_matrix.shape[1] - matches.shape[0]
    assert not any(matches[:, 0] < 0)
    assert not any(matches[:, 1] < 0)
    assert not any(r in matches[:, 0] for r in unmatch_rows)
    assert not any(c in matches[:, 1] for c in unmatch_cols)


def generate_cost(size: int | float) -> tuple[torch.Tensor, torch.Tensor]:
    """
    Generate a random cost matrix and its optimal matching
    """

    size = round(size)
    cost_matrix = torch.randn(size, size, dtype=torch.float) * torch.randint(
        1, 10, (size, size)
    ).float() ** torch.randint(-2, 2, (size, size))

    cost_matrix = torch.nn.functional.softplus(cost_matrix)

    solution, _, _ = assignment.hungarian_assignment(cost_matrix)
    return cost_matrix, solution


@pytest.mark.parametrize(
    ["cost_matrix", "solution"],
    [
        (
            torch.arange(9, dtype=torch.float).reshape(3, 3),
            torch.tensor([[0, 0], [1, 1], [2, 2]]),
        ),
        (
            torch.arange(6, dtype=torch.float).reshape(2, 3),
            torch.tensor([[0, 0], [1, 1]]),
        ),
        (
            torch.arange(6, 0, -1, dtype=torch.float).reshape(2, 3),
            torch.tensor([[0, 2], [1, 1]]),
        ),
        generate_cost(2**4),
        generate_cost(2**5),
        generate_cost(2**6),
    ],
)
def test_assignment_known(cost_matrix, solution, solver):
    """
    Test if all algorithms can solve the known N x M cost matrix to known N x 2 matches
    """

    print(f"-- {solver.__class__.__name__} --")

    cost_matrix = torch.as_tensor(cost_matrix)

    print(
        f"- Cost matrix [{cost_matrix.shape[0]}, {cost_matrix.shape[1]}]: mean = {cost_matrix.mean():.3f}; std = {cost_matrix.std():.3f}; min = {cost_matrix.min():.3f}; max = {cost_matrix.max():.3f}"
    )

    solution = torch.as_tensor(solution)

    time_list = []
    warmup = 1
    trials = 3
    for i in range(warmup + trials):
        solve_time = time.process_time()
        matches, unmatch_row, unmatch_col = solver(cost_matrix)
        solve_time = time.process_time() - solve_time
        solve_time *= 1e3  # ms

        if i >= warmup:
            time_list.append(solve_time)

    solve_time_tensor = torch.tensor(time_list)
    solve_time_mean = solve_time_tensor.mean().item()
    solve_time_std = solve_time_tensor.std().item()

    print(f"- Solve time: {solve_time_mean:.3f} ms (std = {solve_time_std:e})")

    assert matches.shape == solution.shape

    matches = matches[matches[:, 0].argsort(dim=0).flatten(), :]

    total_cost = assignment.gather_total_cost(cost_matrix, matches)
    minimal_cost = assignment.gather_total_cost(cost_matrix, solution)
    ratio = total_cost / minimal_cost * 100

    print(f"- Total cost: {total_cost.item():.3f} ({ratio.item():.1f} %)")

    # Ties within epsilon of the padded problem may be broken either way
    square, _ = assignment.pad_square(cost_matrix.numpy().astype(np.float64))
    tolerance = square.shape[0] * assignment.estimate_scale(square).epsilon

    assert total_cost >= minimal_cost - 1e-4
    assert total_cost - minimal_cost <= tolerance + 1e-4


def test_assignment_threshold(solver):
    cost_matrix = torch.tensor([[0.1, 5.0], [5.0, 0.2]])

    gated = type(solver)(threshold=1.0)
    matches, unmatch_rows, unmatch_cols = gated(cost_matrix)

    assert matches.tolist() == [[0, 0], [1, 1]]
    assert unmatch_rows.numel() == 0
    assert unmatch_cols.numel() == 0
    assert "threshold=1.0" in repr(gated)

    matches, unmatch_rows, unmatch_cols = gated(cost_matrix + 2.0)

    assert matches.shape == (0, 2)
    assert unmatch_rows.tolist() == [0, 1]
    assert unmatch_cols.tolist() == [0, 1]


def test_assignment_non_finite(solver):
    cost_matrix = torch.tensor([[torch.inf, 1.0], [torch.nan, 2.0]])

    matches, unmatch_rows, unmatch_cols = solver(cost_matrix)

    assert matches.tolist() == [[0, 1]]
    assert unmatch_rows.tolist() == [1]
    assert unmatch_cols.tolist() == [0]


def test_assignment_prefers_more_matches(solver):
    """
    Gated entries must not force a cheaper but smaller matching.
    """
    cost_matrix = torch.tensor(
        [
            [1.0, 1.0, torch.inf],
            [torch.inf, 1.0, 1.0],
            [torch.inf, torch.inf, 1.0],
        ]
    )

    matches, _, _ = solver(cost_matrix)

    assert matches.tolist() == [[0, 0], [1, 1], [2, 2]]


def test_assignment_functional_empty():
    matches, unmatch_rows, unmatch_cols = assignment.jonker_volgenant_assignment(
        torch.empty((3, 0)), torch.inf
    )

    assert matches.shape == (0, 2)
    assert unmatch_rows.tolist() == [0, 1, 2]
    assert unmatch_cols.numel() == 0


def test_assignment_debug_output(debug_enabled, capsys):
    assignment.Jonker()(torch.tensor([[1.0, 2.0], [2.0, 1.0]]))

    out = capsys.readouterr().out
    assert "Jonker-Volgenant Assignment completed with total cost: 2.0" in out
    assert "- match: C 0 -> D 0" in out


def test_gather_total_cost():
    cost_matrix = torch.tensor([[1.0, 2.0, 3.0], [4.0, 2.0, 1.0], [2.0, 2.0, 2.0]])
    matches = torch.tensor([[0, 0], [1, 2], [2, 1]])

    assert assignment.gather_total_cost(cost_matrix, matches).item() == 4.0
