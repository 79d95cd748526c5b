"""Domain model definitions for the break tracker."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, time
from enum import Enum
from typing import Any, Dict, List

TIME_FORMAT = "%H:%M"


def _fmt(value: time) -> str:
    return value.strftime(TIME_FORMAT)


@dataclass(frozen=True, slots=True)
class Interval:
    """A single driver break, half-open ``[start, end)``."""

    start: time
    end: time

    @classmethod
    def from_strings(cls, start: str, end: str) -> "Interval":
        return cls(
            datetime.strptime(start, TIME_FORMAT).time(),
            datetime.strptime(end, TIME_FORMAT).time(),
        )

    def to_entry(self) -> str:
        """Return the 10-character ``HH:MMHH:MM`` record used by the times file."""
        return _fmt(self.start) + _fmt(self.end)

    def contains(self, instant: time) -> bool:
        return self.start <= instant < self.end

    def to_dict(self) -> Dict[str, Any]:
        return {"start": _fmt(self.start), "end": _fmt(self.end)}


class EventKind(Enum):
    START = 1
    END = -1

    @property
    def rank(self) -> int:
        # START sorts ahead of END at the same instant
        return 0 if self is EventKind.START else 1


@dataclass(frozen=True, slots=True)
class Event:
    """A break boundary produced while sweeping."""

    time: time
    kind: EventKind

    @property
    def delta(self) -> int:
        return self.kind.value

    @property
    def sort_key(self) -> tuple[time, int]:
        return (self.time, self.kind.rank)


@dataclass(frozen=True, slots=True)
class BusiestPeriod:
    """A maximal span during which ``concurrency`` drivers are on break."""

    start: time
    end: time
    concurrency: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start": _fmt(self.start),
            "end": _fmt(self.end),
            "concurrency": self.concurrency,
        }


@dataclass(frozen=True, slots=True)
class AnalysisReport:
    """Result of one overlap analysis."""

    total_intervals: int
    max_concurrency: int
    periods: List[BusiestPeriod] = field(default_factory=list)

    @property
    def free_drivers(self) -> int:
        return self.total_intervals - self.max_concurrency

    @property
    def is_empty(self) -> bool:
        return not self.periods

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_intervals": self.total_intervals,
            "max_concurrency": self.max_concurrency,
            "free_drivers": self.free_drivers,
            "periods": [period.to_dict() for period in self.periods],
        }
