"""
Route planning on top of the assignment solver: drivers are scored against
shipment destinations, and the assignment with the maximal total suitability
score is selected.
"""

from __future__ import annotations

from ._planner import *
from .matrices import *
from .suitability import *
