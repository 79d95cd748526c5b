"""Line-oriented commands operating on a :class:`BreakTimeStore`."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Sequence

from .analyzer import analyze
from .storage import BreakTimeStore
from .utils import format_interval, format_report, validate_entry

logger = logging.getLogger(__name__)

ADD_USAGE = "Usage: add <start time><end time> (example: add 13:1514:00)"
FILE_USAGE = "Usage: file <file path>"
NO_BREAKS = "No break times found."

HELP_LINES = [
    "Available commands:",
    "add <start time><end time>     - Adds a break time",
    "run                            - How many drivers are on break?",
    "file                           - Set file path",
    "list                           - Lists all break times",
    "help                           - Shows this help message",
    "exit                           - Exits the application",
]


@dataclass(slots=True)
class CommandResult:
    """Outcome of one command: text to show and whether it succeeded."""

    ok: bool
    messages: List[str] = field(default_factory=list)
    exit_requested: bool = False

    def extend(self, other: "CommandResult") -> "CommandResult":
        return CommandResult(
            ok=self.ok and other.ok,
            messages=self.messages + other.messages,
            exit_requested=self.exit_requested or other.exit_requested,
        )


class CommandDispatcher:
    def __init__(self, store: BreakTimeStore) -> None:
        self.store = store
        self._handlers: Dict[str, Callable[[Sequence[str]], CommandResult]] = {
            "add": self.add,
            "run": self.run,
            "file": self.set_file,
            "list": self.list_breaks,
            "help": self.help,
            "exit": self.exit,
        }

    @property
    def commands(self) -> List[str]:
        return list(self._handlers)

    def dispatch(self, line: str) -> CommandResult:
        tokens = line.split()
        if not tokens:
            return CommandResult(ok=True)

        name, params = tokens[0].lower(), tokens[1:]
        handler = self._handlers.get(name)
        if handler is None:
            return CommandResult(
                ok=False,
                messages=[f"Unknown command: {name}. Type 'help' for a list of commands."],
            )

        try:
            return handler(params)
        except (OSError, UnicodeError) as exc:
            logger.error("Command %s failed: %s", name, exc)
            return CommandResult(ok=False, messages=[f"Error: {exc}"])

    def run(self, params: Sequence[str] = ()) -> CommandResult:
        intervals = self.store.load()
        if not intervals:
            return CommandResult(ok=True, messages=[NO_BREAKS])
        report = analyze(intervals)
        return CommandResult(ok=True, messages=format_report(report, str(self.store.path)))

    def add(self, params: Sequence[str]) -> CommandResult:
        entry = params[0] if params else ""
        ok, message = validate_entry(entry)
        if len(params) == 1 and ok:
            try:
                self.store.append(entry)
                result = CommandResult(ok=True, messages=[f"Entry added: {entry}"])
            except OSError as exc:
                logger.error("Could not write %s: %s", self.store.path, exc)
                result = CommandResult(ok=False, messages=[f"Error writing to file: {exc}"])
        else:
            if len(params) > 1:
                message = "Expected a single break time entry."
            result = CommandResult(
                ok=False,
                messages=[f"Invalid break time: {' '.join(params)}", message, ADD_USAGE],
            )
        try:
            return result.extend(self.run())
        except OSError as exc:
            logger.error("Could not read %s: %s", self.store.path, exc)
            return result.extend(CommandResult(ok=False, messages=[f"Error: {exc}"]))

    def set_file(self, params: Sequence[str]) -> CommandResult:
        if len(params) != 1:
            return CommandResult(ok=False, messages=[FILE_USAGE]).extend(self.run())

        self.store = self.store.with_path(params[0])
        logger.info("Switched times file to %s", self.store.path)
        result = CommandResult(ok=True, messages=[f"File path set to: {self.store.path}"])
        return result.extend(self.run())

    def list_breaks(self, params: Sequence[str] = ()) -> CommandResult:
        intervals = self.store.load()
        if not intervals:
            return CommandResult(ok=True, messages=[NO_BREAKS])
        lines = [format_interval(interval) for interval in intervals]
        lines += format_report(analyze(intervals), str(self.store.path))
        return CommandResult(ok=True, messages=lines)

    def help(self, params: Sequence[str] = ()) -> CommandResult:
        return CommandResult(ok=True, messages=list(HELP_LINES))

    def exit(self, params: Sequence[str] = ()) -> CommandResult:
        return CommandResult(ok=True, messages=["Exiting the application."], exit_requested=True)
