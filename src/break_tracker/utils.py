"""Generic utility helpers used throughout the application."""
from __future__ import annotations

from datetime import datetime, time
from typing import BinaryIO, Optional, Tuple

import pandas as pd

from .models import AnalysisReport, Interval, TIME_FORMAT

ENTRY_LENGTH = 10

MSG_WRONG_LENGTH = "Time entry was not the right length."
MSG_NOT_A_TIME = "Entry was not recognized as valid time values."
MSG_START_NOT_BEFORE_END = "The break start time must be smaller than the end time."
MSG_ENTRY_OK = "New time entry was added to the table."


class InvalidEntryError(ValueError):
    """Raised when a break time entry fails validation."""


def parse_time(value: str) -> time:
    return datetime.strptime(value, TIME_FORMAT).time()


def format_time(value: time) -> str:
    return value.strftime(TIME_FORMAT)


def validate_time(time_str: str) -> bool:
    try:
        parse_time(time_str)
        return True
    except ValueError:
        return False


def _split_entry(entry: str) -> Optional[Tuple[time, time]]:
    try:
        return parse_time(entry[:5]), parse_time(entry[5:])
    except ValueError:
        return None


def validate_entry(entry: str) -> Tuple[bool, str]:
    """Check a ``HH:MMHH:MM`` entry; returns ``(ok, message)``."""
    if len(entry) != ENTRY_LENGTH:
        return False, MSG_WRONG_LENGTH

    times = _split_entry(entry)
    if times is None:
        return False, MSG_NOT_A_TIME

    start, end = times
    if start >= end:
        return False, MSG_START_NOT_BEFORE_END
    return True, MSG_ENTRY_OK


def parse_entry(entry: str) -> Interval:
    """Parse a validated entry into an :class:`Interval`.

    Raises :class:`InvalidEntryError` carrying the validation message.
    """
    ok, message = validate_entry(entry)
    if not ok:
        raise InvalidEntryError(message)
    start, end = _split_entry(entry)  # type: ignore[misc]
    return Interval(start, end)


def format_interval(interval: Interval) -> str:
    return f"{format_time(interval.start)}-{format_time(interval.end)}"


def format_report(report: AnalysisReport, source: str) -> list[str]:
    lines = [f"Current File: {source}, Total Drivers: {report.total_intervals}"]
    for period in report.periods:
        lines.append(
            f"Busiest period: {format_time(period.start)}-{format_time(period.end)} "
            f"with {period.concurrency} drivers on break. "
            f"Free drivers: {report.free_drivers}"
        )
    return lines


def report_to_frame(report: AnalysisReport) -> pd.DataFrame:
    """Tabulate the busiest periods, one row per period."""
    rows = [
        {
            **period.to_dict(),
            "free_drivers": report.free_drivers,
        }
        for period in report.periods
    ]
    return pd.DataFrame(rows, columns=["start", "end", "concurrency", "free_drivers"])


def export_to_excel(report: AnalysisReport, filepath: str | BinaryIO) -> bool:
    """Write the busiest periods to an Excel sheet.

    Returns ``False`` when there is nothing to export.
    """
    if report.is_empty:
        return False
    df = report_to_frame(report)
    df.columns = ["Start", "End", "Drivers on break", "Free drivers"]
    df.to_excel(filepath, index=False, engine="openpyxl")
    return True
