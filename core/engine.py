"""Tempo estimation from timestamped key presses."""

from __future__ import annotations

import logging
import math
from collections import deque
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Deque, Optional

from config.settings import MAX_PRECISION, MIN_SAMPLE_SIZE
from core.outcome import EngineState, Outcome


def round_bpm(value: float, precision: int) -> float:
    """Round half away from zero on the shortest decimal form of ``value``.

    ``round_bpm(2.5, 0) == 3.0`` and ``round_bpm(0.125, 2) == 0.13``.
    """
    step = Decimal(1).scaleb(-precision)
    return float(Decimal(repr(value)).quantize(step, rounding=ROUND_HALF_UP))


class TempoEngine:
    """Track BPM using a rolling window of inter-press intervals.

    ``sample_size`` counts presses: a numeric estimate is produced once
    ``sample_size - 1`` intervals have been collected. A pause longer than
    ``reset_time`` seconds discards everything; the pause is only noticed
    when the next press arrives, and that press starts a new chain.
    """

    def __init__(
        self,
        precision: int = 0,
        reset_time: float = 5.0,
        sample_size: int = 5,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if not 0 <= precision <= MAX_PRECISION:
            raise ValueError(
                f"precision must be between 0 and {MAX_PRECISION}, got {precision}"
            )
        if not reset_time > 0:
            raise ValueError(f"reset time must be positive, got {reset_time}")
        if sample_size < MIN_SAMPLE_SIZE:
            raise ValueError(
                f"sample size must be at least {MIN_SAMPLE_SIZE}, got {sample_size}"
            )
        self._precision = precision
        self._reset_time = float(reset_time)
        self._sample_size = sample_size
        self._logger = logger or logging.getLogger(__name__)
        self._intervals: Deque[float] = deque(maxlen=sample_size - 1)
        self._last_press: Optional[float] = None
        self._bpm: Optional[float] = None

    @property
    def precision(self) -> int:
        return self._precision

    @property
    def reset_time(self) -> float:
        return self._reset_time

    @property
    def sample_size(self) -> int:
        return self._sample_size

    @property
    def window_capacity(self) -> int:
        """Intervals needed for an estimate: one fewer than the press count."""
        return self._sample_size - 1

    @property
    def window_length(self) -> int:
        return len(self._intervals)

    @property
    def last_press(self) -> Optional[float]:
        return self._last_press

    @property
    def bpm(self) -> Optional[float]:
        """Last numeric estimate, cleared on reset."""
        return self._bpm

    @property
    def state(self) -> EngineState:
        if self._last_press is None:
            return EngineState.EMPTY
        if len(self._intervals) == self.window_capacity:
            return EngineState.READY
        return EngineState.FILLING

    def record_press(self, timestamp: float) -> Outcome:
        """Register a press at ``timestamp`` seconds and return the outcome."""
        if self._last_press is None:
            self._last_press = timestamp
            return Outcome.idle()

        gap = timestamp - self._last_press
        if gap > self._reset_time:
            self._logger.info(
                "Pause of %.3fs exceeded reset time %.3fs; window cleared",
                gap,
                self._reset_time,
            )
            self._intervals.clear()
            self._bpm = None
            self._last_press = timestamp
            return Outcome.reset()

        if gap < 0:
            self._logger.warning(
                "Clock went backward by %.6fs; interval clamped to zero", -gap
            )
            gap = 0.0

        self._intervals.append(gap)
        self._last_press = timestamp

        if len(self._intervals) < self.window_capacity:
            return Outcome.idle()
        return self._estimate()

    def reset(self) -> None:
        self._intervals.clear()
        self._last_press = None
        self._bpm = None

    def _estimate(self) -> Outcome:
        if min(self._intervals) <= 0:
            self._logger.info("Zero-length interval in window; tempo undefined")
            return Outcome.degenerate()

        average = sum(self._intervals) / len(self._intervals)
        bpm = 60.0 / average
        if not math.isfinite(bpm):
            self._logger.info("Non-finite tempo from average interval %r", average)
            return Outcome.degenerate()

        try:
            rounded = round_bpm(bpm, self._precision)
        except InvalidOperation:
            self._logger.info("Tempo %r BPM too large to round", bpm)
            return Outcome.degenerate()
        self._bpm = rounded
        self._logger.debug("Tempo %.6f BPM from %d intervals", bpm, len(self._intervals))
        return Outcome.tempo(self._bpm)
