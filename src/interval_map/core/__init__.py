"""
Core data structure: a breakpoint-compressed piecewise-constant map.

- `IntervalMap` stores only the keys where the value changes.
- `validate_interval_map` checks ordering and canonical form.
"""

from .interval_map import Breakpoint, IntervalMap
from .validate import validate_interval_map

__all__ = [
    "Breakpoint",
    "IntervalMap",
    "validate_interval_map",
]
