"""Monotonic clock used to timestamp key presses."""

from __future__ import annotations

from time import perf_counter
from typing import Callable, Iterable, Iterator, Optional


class MonotonicClock:
    """Return seconds from a monotonic source, relative to creation time."""

    def __init__(self, source: Optional[Callable[[], float]] = None) -> None:
        self._source = source or perf_counter
        self._origin = self._source()

    def now(self) -> float:
        return self._source() - self._origin


class ScriptedClock:
    """Clock that hands out pre-recorded timestamps in order."""

    def __init__(self, timestamps: Iterable[float]) -> None:
        self._timestamps: Iterator[float] = iter(timestamps)
        self.last: Optional[float] = None

    def now(self) -> float:
        try:
            self.last = next(self._timestamps)
        except StopIteration:
            raise RuntimeError("Scripted clock ran out of timestamps") from None
        return self.last
