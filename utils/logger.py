"""Logging setup."""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime
from typing import Optional

from config.settings import APP_NAME, LOG_LEVEL


def setup_logging(
    log_dir: Optional[str],
    logger_name: str = APP_NAME,
    console_level: str = LOG_LEVEL,
) -> logging.Logger:
    """Configure logging handlers and return the named logger.

    The session file receives everything from INFO up; the console only
    shows ``console_level`` and above, so routine events such as resets and
    degenerate windows stay in the file. Warnings like a backward clock
    still reach stderr.
    """
    stream = logging.StreamHandler(sys.stderr)
    stream.setLevel(console_level)
    handlers = [stream]
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        log_path = os.path.join(
            log_dir, f"{APP_NAME}_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
        )
        handlers.append(logging.FileHandler(log_path))
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=handlers,
    )
    return logging.getLogger(logger_name)
