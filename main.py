"""Entry point for the key tempo session."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from colorama import init

from config.options import TempoConfig, parse_args
from core.clock import MonotonicClock, ScriptedClock
from core.engine import TempoEngine
from display.console import ConsolePresenter
from intake.keyboard import KeyEvent, KeyReader, TerminalError
from intake.replay import load_timestamps, replay_events
from utils.logger import setup_logging
from utils.validators import validate_config


def run_session(
    engine: TempoEngine,
    events: Iterable[KeyEvent],
    clock,
    presenter: ConsolePresenter,
    logger: logging.Logger,
) -> int:
    """Feed hits to the engine until a quit event; return the hit count."""
    hits = 0
    for event in events:
        if event is KeyEvent.QUIT:
            logger.info("Exit requested by user")
            break
        if event is KeyEvent.IGNORED:
            continue
        outcome = engine.record_press(clock.now())
        hits += 1
        presenter.render(outcome)
    engine.reset()
    return hits


def main(argv: Optional[List[str]] = None) -> int:
    config: TempoConfig = parse_args(argv)
    logger = setup_logging(config.log_dir)
    validate_config(config, logger)

    init(autoreset=True)
    presenter = ConsolePresenter(config.precision, config.reset_time)

    timestamps = None
    if config.replay:
        try:
            timestamps = load_timestamps(config.replay)
        except (OSError, ValueError) as exc:
            logger.error("Unable to load replay %s: %s", config.replay, exc)
            presenter.fatal(f"cannot replay {config.replay}: {exc}")
            return 1

    engine = TempoEngine(
        precision=config.precision,
        reset_time=config.reset_time,
        sample_size=config.sample_size,
        logger=logger,
    )
    logger.info(
        "Starting session precision=%d reset_time=%.3fs sample_size=%d",
        config.precision,
        config.reset_time,
        config.sample_size,
    )

    try:
        if timestamps is not None:
            hits = run_session(
                engine, replay_events(timestamps), ScriptedClock(timestamps), presenter, logger
            )
            logger.info("Replayed %d hits", hits)
        else:
            with KeyReader(logger=logger) as reader:
                presenter.banner()
                hits = run_session(engine, reader.events(), MonotonicClock(), presenter, logger)
                logger.info("Recorded %d hits", hits)
    except TerminalError as exc:
        logger.error("Keyboard unavailable: %s", exc)
        presenter.fatal(str(exc))
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    finally:
        engine.reset()
        logger.info("Session stopped")

    presenter.farewell()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
