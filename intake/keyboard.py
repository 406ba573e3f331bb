"""Raw key capture from a terminal in cbreak mode."""

from __future__ import annotations

import codecs
import logging
import os
import select
import sys
import termios
import tty
from enum import Enum
from typing import Iterator, Optional

from config.settings import QUIT_KEYS

ESCAPE = "\x1b"
# Bytes of an escape sequence (arrow keys, F-keys) arrive together; a lone
# Esc is followed by silence.
ESCAPE_SEQUENCE_TIMEOUT = 0.05


class KeyEvent(Enum):
    HIT = "hit"
    QUIT = "quit"
    IGNORED = "ignored"


class TerminalError(RuntimeError):
    """Raised when key capture cannot be set up."""


def classify_key(key: str) -> KeyEvent:
    if key in QUIT_KEYS:
        return KeyEvent.QUIT
    if key in ("\n", "\r"):
        return KeyEvent.HIT
    if key.isprintable():
        return KeyEvent.HIT
    return KeyEvent.IGNORED


class KeyReader:
    """Read single key presses from ``fd`` without waiting for Enter.

    Use as a context manager so the terminal settings are restored on exit.
    """

    def __init__(self, fd: Optional[int] = None, logger: Optional[logging.Logger] = None) -> None:
        self._fd = sys.stdin.fileno() if fd is None else fd
        self._logger = logger or logging.getLogger(__name__)
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._saved = None

    def __enter__(self) -> "KeyReader":
        if not os.isatty(self._fd):
            raise TerminalError("standard input is not a terminal; use --replay to feed timestamps")
        try:
            self._saved = termios.tcgetattr(self._fd)
            tty.setcbreak(self._fd)
        except (termios.error, OSError) as exc:
            raise TerminalError(f"could not set up keyboard input: {exc}") from exc
        self._logger.info("Keyboard capture enabled on fd %d", self._fd)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._saved is None:
            return
        try:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved)
        except (termios.error, OSError) as err:
            self._logger.debug("Could not restore terminal settings: %s", err)
        self._saved = None

    def read_key(self) -> str:
        """Block until one full character is available. Empty string on EOF."""
        while True:
            chunk = os.read(self._fd, 1)
            if not chunk:
                return ""
            key = self._decoder.decode(chunk)
            if key:
                return key

    def read_event(self) -> KeyEvent:
        key = self.read_key()
        if not key:
            self._logger.info("Input closed")
            return KeyEvent.QUIT
        if key == ESCAPE and self._pending():
            self._skip_sequence()
            return KeyEvent.IGNORED
        return classify_key(key)

    def events(self) -> Iterator[KeyEvent]:
        """Yield key events up to and including the first quit request."""
        while True:
            event = self.read_event()
            yield event
            if event is KeyEvent.QUIT:
                return

    def _pending(self) -> bool:
        ready, _, _ = select.select([self._fd], [], [], ESCAPE_SEQUENCE_TIMEOUT)
        return bool(ready)

    def _skip_sequence(self) -> None:
        # CSI: ESC [ params final(0x40-0x7e); SS3: ESC O x; otherwise Alt+key.
        lead = os.read(self._fd, 1)
        if lead == b"[":
            while True:
                byte = os.read(self._fd, 1)
                if not byte or 0x40 <= byte[0] <= 0x7E:
                    return
        elif lead == b"O":
            os.read(self._fd, 1)
