from __future__ import annotations

from typing import Final

UNASSIGNED: Final = -1
SCALE_FACTOR: Final = 10000.0
ZERO_REWARD_COST: Final = 100000.0
DEBUG_ENV: Final = "JVLAP_DEBUG"
