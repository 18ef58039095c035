"""
This package implements modules that solve a Linear Assignment Problem (LAP),
where the minimum cost must be computed over a cost-matrix.

The square problem is solved by :func:`lapjv`. The modules :class:`Jonker` and
:class:`Hungarian` accept rectangular cost tensors with forbidden entries.
"""

from __future__ import annotations

from ._base import *
from ._hungarian import *
from ._jonker import *
from ._lapjv import *
from ._utils import *
from ._validate import *
