r"""
jvlap
=====

This module solves the square linear assignment problem with the Jonker-Volgenant
shortest augmenting path algorithm.

.. math::

    \min_{\sigma} \sum_i C_{i, \sigma(i)}

where :math:`\sigma` ranges over all permutations of the ``n`` columns.

Terminology
-----------

- **Dual variables**: row potentials ``u`` and column potentials ``v``.

- **Reduced cost**: ``C[i, j] - u[i] - v[j]``, which is zero for assigned pairs and
    non-negative otherwise at optimality.

- **Augmenting path**: an alternating path from a free row to a free column, along
    which flipping the assignment matches one more row.
"""

from __future__ import annotations

__version__ = "1.0.0"

from . import assignment, consts, debug, errors, routing
from .assignment import LAPSolution, lapjv
from .errors import *
