"""Command-line options for a tempo session."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import List, Optional

from config.settings import (
    APP_NAME,
    APP_VERSION,
    DEFAULT_PRECISION,
    DEFAULT_RESET_TIME,
    DEFAULT_SAMPLE_SIZE,
    LOG_DIR,
    MAX_PRECISION,
)


@dataclass(frozen=True)
class TempoConfig:
    precision: int = DEFAULT_PRECISION
    reset_time: float = DEFAULT_RESET_TIME
    sample_size: int = DEFAULT_SAMPLE_SIZE
    replay: Optional[str] = None
    log_dir: Optional[str] = LOG_DIR


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Measure a tempo in BPM by hitting keys in cadence.",
    )
    parser.add_argument(
        "-p",
        "--precision",
        type=int,
        default=DEFAULT_PRECISION,
        help=f"Digits after the decimal point in the tempo (0-{MAX_PRECISION}).",
    )
    parser.add_argument(
        "-r",
        "--reset-time",
        type=float,
        default=DEFAULT_RESET_TIME,
        help="Seconds of pause before the measurement starts over.",
    )
    parser.add_argument(
        "-s",
        "--sample-size",
        type=int,
        default=DEFAULT_SAMPLE_SIZE,
        help="Number of hits needed to compute the tempo (at least 2).",
    )
    parser.add_argument(
        "--replay",
        metavar="FILE",
        default=None,
        help="Read press timestamps (seconds, one per line) from FILE, or '-' for STDIN.",
    )
    parser.add_argument(
        "--log-dir",
        default=LOG_DIR,
        help="Directory for session log files. Pass an empty string to disable.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {APP_VERSION}",
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> TempoConfig:
    args = build_parser().parse_args(argv)
    return TempoConfig(
        precision=args.precision,
        reset_time=args.reset_time,
        sample_size=args.sample_size,
        replay=args.replay,
        log_dir=args.log_dir or None,
    )
