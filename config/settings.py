"""Runtime settings loaded from environment variables."""

from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

APP_NAME = "keytempo"
APP_VERSION = "1.0.0"

LOG_DIR = os.getenv("KEYTEMPO_LOG_DIR", "logs")
LOG_LEVEL = os.getenv("KEYTEMPO_LOG_LEVEL", "WARNING").upper()

# Tempo defaults, overridden by command-line flags
PRECISION_RAW = os.getenv("KEYTEMPO_PRECISION", "0")
RESET_TIME_RAW = os.getenv("KEYTEMPO_RESET_TIME", "5")
SAMPLE_SIZE_RAW = os.getenv("KEYTEMPO_SAMPLE_SIZE", "5")

MAX_PRECISION = 5
MIN_SAMPLE_SIZE = 2

QUIT_KEYS = {"q", "\x1b"}


def _parse_int(value: Optional[str], fallback: int) -> int:
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def _parse_float(value: Optional[str], fallback: float) -> float:
    if value is None:
        return fallback
    try:
        return float(value)
    except ValueError:
        return fallback


DEFAULT_PRECISION = _parse_int(PRECISION_RAW, 0)
DEFAULT_RESET_TIME = _parse_float(RESET_TIME_RAW, 5.0)
DEFAULT_SAMPLE_SIZE = _parse_int(SAMPLE_SIZE_RAW, 5)
