"""
Simple system to debug solver modules via process output messages
"""

from __future__ import annotations

import functools
import os

from .consts import DEBUG_ENV

__all__ = ["check_debug_enabled"]

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@functools.cache
def check_debug_enabled() -> bool:
    """
    Check whether debugging is enabled by reading the environment
    variable ``JVLAP_DEBUG``.
    """
    return os.environ.get(DEBUG_ENV, "").strip().lower() in _TRUTHY
