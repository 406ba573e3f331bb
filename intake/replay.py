"""Replay recorded press timestamps instead of reading the keyboard.

Input is newline-delimited seconds, for example::

    0.0
    0.5
    1.0  # comments and blank lines are skipped

Pass ``-`` to read the list from STDIN.
"""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, List

from intake.keyboard import KeyEvent


def parse_timestamps(lines: Iterable[str]) -> List[float]:
    values: List[float] = []
    for number, line in enumerate(lines, start=1):
        text = line.split("#", 1)[0].strip()
        if not text:
            continue
        try:
            values.append(float(text))
        except ValueError:
            raise ValueError(f"line {number}: not a timestamp: {text!r}") from None
    return values


def load_timestamps(source: str) -> List[float]:
    if source == "-":
        return parse_timestamps(sys.stdin)
    with open(source, "r", encoding="utf-8") as handle:
        return parse_timestamps(handle)


def replay_events(timestamps: List[float]) -> Iterator[KeyEvent]:
    """One hit per timestamp, then a quit."""
    for _ in timestamps:
        yield KeyEvent.HIT
    yield KeyEvent.QUIT
