"""
Structural validation of interval maps.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from interval_map.core.interval_map import IntervalMap


def validate_interval_map(imap: "IntervalMap") -> None:
    """
    Check the invariants every map must hold after a mutation:
    - breakpoint keys strictly increasing
    - no breakpoint repeats the value before it (baseline included)
    """
    entries = imap.items()
    _ensure_keys_increasing(entries)
    _ensure_canonical(imap.baseline, entries)


def _ensure_keys_increasing(entries) -> None:
    for prev, cur in zip(entries, entries[1:]):
        if not prev.key < cur.key:
            raise ValueError(
                f"Breakpoint keys out of order: {prev.key!r} followed by {cur.key!r}."
            )


def _ensure_canonical(baseline, entries) -> None:
    prev_value = baseline
    for entry in entries:
        if entry.value == prev_value:
            raise ValueError(
                f"Redundant breakpoint at {entry.key!r}: value {entry.value!r} "
                "repeats the preceding value."
            )
        prev_value = entry.value
