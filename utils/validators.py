"""Configuration validation helpers."""

from __future__ import annotations

import logging
import math
import sys
from typing import List

from config.options import TempoConfig
from config.settings import MAX_PRECISION, MIN_SAMPLE_SIZE


def config_problems(config: TempoConfig) -> List[str]:
    problems = []
    if not 0 <= config.precision <= MAX_PRECISION:
        problems.append(
            f"precision must be between 0 and {MAX_PRECISION} (got {config.precision})"
        )
    if not (math.isfinite(config.reset_time) and config.reset_time > 0):
        problems.append(f"reset time must be a positive number of seconds (got {config.reset_time})")
    if config.sample_size < MIN_SAMPLE_SIZE:
        problems.append(
            f"sample size must be at least {MIN_SAMPLE_SIZE} (got {config.sample_size})"
        )
    return problems


def validate_config(config: TempoConfig, logger: logging.Logger) -> None:
    """Validate the tempo configuration and exit on failure."""
    problems = config_problems(config)
    if problems:
        logger.error("Invalid configuration: %s", "; ".join(problems))
        for problem in problems:
            print(f"[ERROR] {problem}", file=sys.stderr)
        raise SystemExit(1)
