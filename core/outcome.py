"""Result values produced by the tempo engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class OutcomeKind(Enum):
    IDLE = "idle"
    RESET = "reset"
    TEMPO = "tempo"
    DEGENERATE = "degenerate"


class EngineState(Enum):
    """Readiness of the interval window."""

    EMPTY = "empty"
    FILLING = "filling"
    READY = "ready"


@dataclass(frozen=True)
class Outcome:
    """One engine answer per recorded press.

    ``bpm`` is only set for ``OutcomeKind.TEMPO``.
    """

    kind: OutcomeKind
    bpm: Optional[float] = None

    @classmethod
    def idle(cls) -> "Outcome":
        return cls(OutcomeKind.IDLE)

    @classmethod
    def reset(cls) -> "Outcome":
        return cls(OutcomeKind.RESET)

    @classmethod
    def tempo(cls, bpm: float) -> "Outcome":
        return cls(OutcomeKind.TEMPO, bpm)

    @classmethod
    def degenerate(cls) -> "Outcome":
        return cls(OutcomeKind.DEGENERATE)

    @property
    def has_tempo(self) -> bool:
        return self.kind is OutcomeKind.TEMPO
