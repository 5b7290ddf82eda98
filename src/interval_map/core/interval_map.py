from __future__ import annotations

from dataclasses import dataclass
from operator import attrgetter
from typing import Generic, List, TypeVar

from sortedcontainers import SortedKeyList

from interval_map.core.validate import validate_interval_map
from interval_map.utils.config import config
from interval_map.utils.logging import logger

K = TypeVar("K")
V = TypeVar("V")


@dataclass(frozen=True)
class Breakpoint(Generic[K, V]):
    key: K
    value: V  # holds from `key` up to the next breakpoint


class IntervalMap(Generic[K, V]):
    """
    Piecewise-constant total function from an ordered key space to values.

    Only the keys where the value changes are stored. Everything below the
    first breakpoint maps to the baseline value given at construction.
    The stored breakpoints are always in canonical form: no breakpoint
    carries the same value as the one before it (or as the baseline, for
    the first one).

    Keys only need `<`; two keys are equal when neither is less than the
    other. Values only need `==`. Neither has to be hashable.

    Not thread-safe: callers must hold exclusive access while calling
    `assign`. Concurrent `lookup` calls are fine with no writer active.
    """

    def __init__(self, initial: V) -> None:
        self._baseline = initial
        self._entries: SortedKeyList = SortedKeyList(key=attrgetter("key"))

    @property
    def baseline(self) -> V:
        return self._baseline

    def lookup(self, key: K) -> V:
        """Value of the greatest breakpoint `<= key`, or the baseline."""
        idx = self._entries.bisect_key_right(key)
        if idx == 0:
            return self._baseline
        return self._entries[idx - 1].value

    def __getitem__(self, key: K) -> V:
        return self.lookup(key)

    # `__getitem__` would otherwise make the map look iterable.
    __iter__ = None

    def _value_below(self, key: K) -> V:
        idx = self._entries.bisect_key_left(key)
        if idx == 0:
            return self._baseline
        return self._entries[idx - 1].value

    def assign(self, key_begin: K, key_end: K, value: V) -> None:
        """
        Set every key in `[key_begin, key_end)` to `value`.

        Keys outside the interval keep their current value. An empty or
        inverted interval (`not key_begin < key_end`) is ignored.
        """
        if not key_begin < key_end:
            if config.debug:
                logger.debug("Ignoring empty interval [%r, %r).", key_begin, key_end)
            return

        value_before = self._value_below(key_begin)
        value_after = self.lookup(key_end)

        # Everything in [key_begin, key_end] goes; the entry at key_end is rebuilt below.
        lo = self._entries.bisect_key_left(key_begin)
        hi = self._entries.bisect_key_right(key_end)
        removed = hi - lo
        if removed:
            del self._entries[lo:hi]

        inserted = 0
        prev = value_before
        for entry in (Breakpoint(key_begin, value), Breakpoint(key_end, value_after)):
            if entry.value == prev:
                continue
            self._entries.add(entry)
            prev = entry.value
            inserted += 1

        nxt = lo + inserted
        if nxt < len(self._entries) and self._entries[nxt].value == prev:
            del self._entries[nxt]
            removed += 1

        if config.debug:
            logger.debug(
                "assign [%r, %r) -> %r: removed %d, inserted %d, now %d breakpoints.",
                key_begin,
                key_end,
                value,
                removed,
                inserted,
                len(self._entries),
            )
        if config.check_invariants:
            validate_interval_map(self)

    def items(self) -> List[Breakpoint[K, V]]:
        """
        Snapshot of the stored breakpoints in ascending key order.
        """
        return list(self._entries)

    def copy(self) -> "IntervalMap[K, V]":
        other: IntervalMap[K, V] = IntervalMap(self._baseline)
        other._entries.update(self._entries)
        return other

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntervalMap):
            return NotImplemented
        if not self._baseline == other._baseline or len(self) != len(other):
            return False
        for mine, theirs in zip(self._entries, other._entries):
            if mine.key < theirs.key or theirs.key < mine.key:
                return False
            if not mine.value == theirs.value:
                return False
        return True

    def __repr__(self) -> str:
        pairs = [(e.key, e.value) for e in self._entries]
        return f"{type(self).__name__}({self._baseline!r}, {pairs!r})"
