"""Console rendering of tempo outcomes."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from colorama import Fore, Style

from core.outcome import Outcome, OutcomeKind


class ConsolePresenter:
    """Print one line per engine outcome.

    The "keep going" hint is shown once per filling stretch, i.e. after
    startup and after each reset, not on every press.
    """

    def __init__(
        self,
        precision: int,
        reset_time: float,
        stream: Optional[TextIO] = None,
        error_stream: Optional[TextIO] = None,
    ) -> None:
        self._precision = precision
        self._reset_time = reset_time
        self._stream = stream or sys.stdout
        self._error_stream = error_stream or sys.stderr
        self._hinted = False

    def _write(self, color: str, text: str, stream: Optional[TextIO] = None) -> None:
        print(color + text + Style.RESET_ALL, file=stream or self._stream, flush=True)

    def banner(self) -> None:
        self._write(Fore.CYAN, "Hit any key (but q) in cadence (q to quit).")

    def farewell(self) -> None:
        self._write(Fore.CYAN, "Goodbye!")

    def error(self, message: str) -> None:
        self._write(Fore.RED, f"[ERROR] {message}")

    def fatal(self, message: str) -> None:
        """Report an error that ends the session."""
        self._write(Fore.RED, f"[ERROR] {message}", self._error_stream)

    def format_bpm(self, bpm: float) -> str:
        return f"{bpm:.{self._precision}f}"

    def render(self, outcome: Outcome) -> None:
        if outcome.kind is OutcomeKind.IDLE:
            if not self._hinted:
                self._write(Fore.YELLOW, "[INFO] hit any key again to run tempo processing...")
                self._hinted = True
        elif outcome.kind is OutcomeKind.RESET:
            self._hinted = False
            self._write(
                Fore.YELLOW,
                f"[RESET] no hit for more than {self._reset_time:g}s, measurement restarted",
            )
        elif outcome.kind is OutcomeKind.TEMPO:
            self._write(Fore.GREEN, f"[TEMPO] {self.format_bpm(outcome.bpm)} BPM")
        else:
            self.error("tempo too fast to measure")
