"""Driver break tracker: records break times and finds the busiest periods."""
from .analyzer import analyze, build_events, concurrency_timeline
from .commands import CommandDispatcher, CommandResult
from .config import DEFAULT_TIMES_FILE, resolve_times_path
from .logger_config import setup_logger
from .models import AnalysisReport, BusiestPeriod, Event, EventKind, Interval
from .storage import BreakTimeStore
from .utils import (
    InvalidEntryError,
    export_to_excel,
    format_interval,
    format_report,
    parse_entry,
    report_to_frame,
    validate_entry,
)

__all__ = [
    "analyze",
    "build_events",
    "concurrency_timeline",
    "CommandDispatcher",
    "CommandResult",
    "DEFAULT_TIMES_FILE",
    "resolve_times_path",
    "setup_logger",
    "AnalysisReport",
    "BusiestPeriod",
    "Event",
    "EventKind",
    "Interval",
    "BreakTimeStore",
    "InvalidEntryError",
    "export_to_excel",
    "format_interval",
    "format_report",
    "parse_entry",
    "report_to_frame",
    "validate_entry",
]
