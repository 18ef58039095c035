r"""
Common set-up for all tests.

Defines fixtures for generating cost matrices and a brute-force reference solver.
"""

from __future__ import annotations

import itertools
import typing as T

import numpy as np
import pytest

from jvlap import debug


def _brute_force_minimum(cost_matrix: np.ndarray) -> float:
    n = cost_matrix.shape[0]
    perms = np.array(list(itertools.permutations(range(n))), dtype=np.int64)
    totals = cost_matrix[np.arange(n)[None, :], perms].sum(axis=1)
    return float(totals.min())


@pytest.fixture()
def brute_force() -> T.Callable[[np.ndarray], float]:
    """
    Minimal total cost over all ``n!`` permutations.
    """
    return _brute_force_minimum


@pytest.fixture()
def rng() -> np.random.Generator:
    return np.random.default_rng(1996)


@pytest.fixture()
def debug_enabled(monkeypatch):
    """
    Enable debug output for the duration of a test.
    """
    monkeypatch.setenv("JVLAP_DEBUG", "1")
    debug.check_debug_enabled.cache_clear()
    yield
    debug.check_debug_enabled.cache_clear()


@pytest.fixture(autouse=True)
def _reset_debug_cache():
    debug.check_debug_enabled.cache_clear()
    yield
    debug.check_debug_enabled.cache_clear()
