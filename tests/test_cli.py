"""Tests for the console entry point and configuration."""
import io
from pathlib import Path
from unittest.mock import patch

from break_tracker.cli import main, parse_args, repl
from break_tracker.commands import CommandDispatcher
from break_tracker.config import DEFAULT_TIMES_FILE, TIMES_FILE_ENV, resolve_times_path
from break_tracker.logger_config import setup_logger
from break_tracker.storage import BreakTimeStore


def scripted(lines):
    """Return an ``input`` replacement feeding ``lines`` then EOF."""
    feed = iter(lines)

    def read(prompt):
        try:
            return next(feed)
        except StopIteration:
            raise EOFError

    return read


def test_resolve_default() -> None:
    assert resolve_times_path([], environ={}) == Path(DEFAULT_TIMES_FILE)


def test_resolve_filename_argument() -> None:
    assert resolve_times_path(["filename", "breaks.txt"], environ={}) == Path("breaks.txt")


def test_resolve_environment() -> None:
    assert resolve_times_path([], environ={TIMES_FILE_ENV: "env.txt"}) == Path("env.txt")


def test_resolve_argument_beats_environment() -> None:
    environ = {TIMES_FILE_ENV: "env.txt"}
    assert resolve_times_path(["filename", "arg.txt"], environ=environ) == Path("arg.txt")


def test_parse_args_defaults() -> None:
    args = parse_args([])
    assert args.positional == []
    assert args.file is None
    assert args.run_once is False


def test_run_once(tmp_path) -> None:
    path = tmp_path / "times.txt"
    path.write_text("09:0010:00\n10:0011:00\n", encoding="utf-8")
    out = io.StringIO()

    assert main(["filename", str(path), "--run-once"], out=out) == 0
    assert out.getvalue().splitlines() == [
        f"Current File: {path}, Total Drivers: 2",
        "Busiest period: 09:00-11:00 with 1 drivers on break. Free drivers: 1",
    ]


def test_run_once_without_breaks(tmp_path) -> None:
    out = io.StringIO()
    assert main(["--file", str(tmp_path / "none.txt"), "--run-once"], out=out) == 0
    assert out.getvalue().splitlines() == ["No break times found."]


def test_repl_until_exit(tmp_path) -> None:
    path = tmp_path / "times.txt"
    dispatcher = CommandDispatcher(BreakTimeStore(path))
    out = io.StringIO()

    code = repl(dispatcher, read=scripted(["add 12:0012:30", "", "exit", "run"]), out=out)

    assert code == 0
    lines = out.getvalue().splitlines()
    assert lines[0] == "Entry added: 12:0012:30"
    assert lines[-1] == "Exiting the application."
    assert path.read_text(encoding="utf-8") == "12:0012:30\n"


def test_repl_stops_at_end_of_input(tmp_path) -> None:
    dispatcher = CommandDispatcher(BreakTimeStore(tmp_path / "times.txt"))
    out = io.StringIO()
    assert repl(dispatcher, read=scripted(["help"]), out=out) == 0
    assert out.getvalue().startswith("Available commands:")


def test_setup_logger_installs_handlers_once(tmp_path) -> None:
    log_file = tmp_path / "tracker.log"
    logger = setup_logger("break_tracker.test_once", log_file=str(log_file))
    again = setup_logger("break_tracker.test_once", log_file=str(log_file))

    assert logger is again
    assert len(logger.handlers) == 2
    logger.info("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "[INFO] hello" in log_file.read_text(encoding="utf-8")


def test_run_once_with_undecodable_bytes(tmp_path) -> None:
    path = tmp_path / "bad.txt"
    path.write_bytes(b"13:0014:00\n\xff\xfe\n")
    out = io.StringIO()

    assert main(["--file", str(path), "--run-once"], out=out) == 0
    assert out.getvalue().splitlines() == [
        f"Current File: {path}, Total Drivers: 1",
        "Busiest period: 13:00-14:00 with 1 drivers on break. Free drivers: 0",
    ]


def test_startup_read_failure_is_reported(tmp_path) -> None:
    out = io.StringIO()
    with patch.object(BreakTimeStore, "load", side_effect=PermissionError("denied")):
        code = main(["--file", str(tmp_path / "times.txt"), "--run-once"], out=out)

    assert code == 0
    assert out.getvalue().splitlines() == ["Error: denied"]
