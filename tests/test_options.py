import pytest

from config.options import TempoConfig, build_parser, parse_args
from config.settings import APP_VERSION


def test_defaults_come_from_settings() -> None:
    config = parse_args([])

    assert config == TempoConfig()
    assert config.replay is None


def test_short_and_long_flags() -> None:
    config = parse_args(["-p", "2", "--reset-time", "2.5", "-s", "8", "--log-dir", ""])

    assert config.precision == 2
    assert config.reset_time == 2.5
    assert config.sample_size == 8
    assert config.log_dir is None


def test_non_numeric_value_exits_with_usage_error(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        parse_args(["--sample-size", "many"])

    assert excinfo.value.code == 2
    assert "--sample-size" in capsys.readouterr().err


def test_version_flag_prints_version(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        parse_args(["--version"])

    assert excinfo.value.code == 0
    assert APP_VERSION in capsys.readouterr().out


def test_sample_size_help_counts_hits() -> None:
    text = " ".join(build_parser().format_help().split())

    assert "Number of hits needed to compute the tempo (at least 2)." in text
    assert "Number of intervals" not in text
