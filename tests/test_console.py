import io

from core.outcome import Outcome
from display.console import ConsolePresenter


def _lines(stream: io.StringIO):
    return [line for line in stream.getvalue().splitlines() if line.strip()]


def test_tempo_line_uses_precision() -> None:
    stream = io.StringIO()
    presenter = ConsolePresenter(precision=2, reset_time=5, stream=stream)

    presenter.render(Outcome.tempo(60.0))

    assert "[TEMPO] 60.00 BPM" in stream.getvalue()


def test_idle_hint_printed_once_per_stretch() -> None:
    stream = io.StringIO()
    presenter = ConsolePresenter(precision=0, reset_time=5, stream=stream)

    for _ in range(3):
        presenter.render(Outcome.idle())
    presenter.render(Outcome.reset())
    presenter.render(Outcome.idle())
    presenter.render(Outcome.idle())

    lines = _lines(stream)
    assert len(lines) == 3
    assert "[INFO]" in lines[0]
    assert "[RESET]" in lines[1] and "5s" in lines[1]
    assert "[INFO]" in lines[2]


def test_degenerate_outcome_prints_diagnostic() -> None:
    stream = io.StringIO()
    presenter = ConsolePresenter(precision=0, reset_time=5, stream=stream)

    presenter.render(Outcome.degenerate())

    output = stream.getvalue()
    assert "tempo too fast to measure" in output
    assert "inf" not in output.lower()


def test_banner_and_farewell() -> None:
    stream = io.StringIO()
    presenter = ConsolePresenter(precision=0, reset_time=5, stream=stream)

    presenter.banner()
    presenter.farewell()

    output = stream.getvalue()
    assert "Hit any key (but q) in cadence (q to quit)." in output
    assert "Goodbye!" in output


def test_fatal_errors_go_to_error_stream() -> None:
    stream = io.StringIO()
    errors = io.StringIO()
    presenter = ConsolePresenter(precision=0, reset_time=5, stream=stream, error_stream=errors)

    presenter.fatal("standard input is not a terminal")

    assert stream.getvalue() == ""
    assert "[ERROR] standard input is not a terminal" in errors.getvalue()
