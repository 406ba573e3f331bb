import logging

import pytest

from config.options import TempoConfig
from utils.logger import setup_logging
from utils.validators import config_problems, validate_config


def _reset_root_logging() -> None:
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()


def test_setup_logging_creates_log_file(tmp_path) -> None:
    _reset_root_logging()
    log_dir = tmp_path / "logs"
    logger = setup_logging(str(log_dir))

    logger.info("test log line")

    log_files = list(log_dir.glob("keytempo_*.log"))
    assert log_files, "expected a log file in the log directory"
    assert "test log line" in log_files[0].read_text()
    _reset_root_logging()


def test_setup_logging_without_directory_uses_stream_only(tmp_path) -> None:
    _reset_root_logging()
    logger = setup_logging(None, logger_name="keytempo_test")

    assert logger.name == "keytempo_test"
    assert not any(
        isinstance(handler, logging.FileHandler) for handler in logging.getLogger().handlers
    )
    _reset_root_logging()


def test_valid_config_has_no_problems() -> None:
    assert config_problems(TempoConfig(precision=5, reset_time=0.1, sample_size=2)) == []


def test_config_problems_collects_every_issue() -> None:
    problems = config_problems(TempoConfig(precision=6, reset_time=0, sample_size=1))

    assert len(problems) == 3
    assert any("precision" in problem for problem in problems)
    assert any("reset time" in problem for problem in problems)
    assert any("sample size" in problem for problem in problems)


def test_validate_config_raises_on_sample_size_one(capsys) -> None:
    logger = logging.getLogger("test_validate")

    with pytest.raises(SystemExit) as excinfo:
        validate_config(TempoConfig(sample_size=1), logger)

    assert excinfo.value.code == 1
    assert "sample size must be at least 2" in capsys.readouterr().err


def test_validate_config_rejects_infinite_reset_time() -> None:
    logger = logging.getLogger("test_validate")

    with pytest.raises(SystemExit):
        validate_config(TempoConfig(reset_time=float("inf")), logger)
