"""
tiny-interval-map

Piecewise-constant maps over ordered keys, stored as value-change breakpoints.
"""

from .core.interval_map import Breakpoint, IntervalMap
from .core.validate import validate_interval_map

__all__ = [
    "Breakpoint",
    "IntervalMap",
    "validate_interval_map",
]
