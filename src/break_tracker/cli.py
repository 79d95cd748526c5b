"""Interactive console for recording breaks and reporting the busiest period."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional, TextIO

from .commands import CommandDispatcher, CommandResult
from .config import resolve_times_path
from .logger_config import setup_logger
from .storage import BreakTimeStore

PROMPT = "> "


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="break-tracker",
        description="Track driver breaks and report when most drivers are on break",
    )
    parser.add_argument(
        "positional",
        nargs="*",
        metavar="filename PATH",
        help="Use PATH as the times file (same as --file PATH)",
    )
    parser.add_argument("--file", dest="file", help="Times file to read and append to")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostic messages",
    )
    parser.add_argument(
        "--run-once",
        action="store_true",
        help="Print the report and exit without entering the command loop",
    )
    return parser.parse_args(argv)


def _emit(result: CommandResult, out: TextIO) -> None:
    for message in result.messages:
        print(message, file=out)


def repl(
    dispatcher: CommandDispatcher,
    read: Callable[[str], str] = input,
    out: Optional[TextIO] = None,
) -> int:
    """Read commands until ``exit`` or end of input."""
    out = out or sys.stdout
    while True:
        try:
            line = read(PROMPT)
        except EOFError:
            return 0
        result = dispatcher.dispatch(line)
        _emit(result, out)
        if result.exit_requested:
            return 0


def main(argv: Optional[list[str]] = None, out: Optional[TextIO] = None) -> int:
    out = out or sys.stdout
    args = parse_args(argv)
    setup_logger("break_tracker", level=getattr(logging, args.log_level))

    path = args.file or resolve_times_path(args.positional)
    dispatcher = CommandDispatcher(BreakTimeStore(path))

    _emit(dispatcher.dispatch("run"), out)
    if args.run_once:
        return 0

    print("Type 'help' to see the list of commands", file=out)
    return repl(dispatcher, out=out)


if __name__ == "__main__":
    sys.exit(main())
