"""Busiest-period detection for driver breaks.

The analysis is a sweep over break boundaries. Every interval contributes a
START and an END event; events are sorted by time with START ahead of END at
the same instant, and all events sharing an instant are applied together
before the running count is compared with the maximum. The count seen at each
instant is therefore the number of breaks active in ``[instant, next)``, which
keeps touching breaks (one ends as the next begins) from being counted twice
while still letting them form one continuous period.
"""
from __future__ import annotations

from itertools import groupby
from operator import attrgetter
from typing import Iterable, List

import pandas as pd

from .models import AnalysisReport, BusiestPeriod, Event, EventKind, Interval, TIME_FORMAT

__all__ = ["build_events", "analyze", "concurrency_timeline"]


def build_events(intervals: Iterable[Interval]) -> List[Event]:
    """Return the sorted START/END events for ``intervals``."""
    events: List[Event] = []
    for interval in intervals:
        events.append(Event(interval.start, EventKind.START))
        events.append(Event(interval.end, EventKind.END))
    events.sort(key=attrgetter("sort_key"))
    return events


def analyze(intervals: Iterable[Interval]) -> AnalysisReport:
    """Find every maximal span where the number of overlapping breaks peaks.

    Periods tying the global maximum are all returned in chronological order.
    A period is split only when the count drops strictly below the maximum.
    """
    intervals = list(intervals)
    events = build_events(intervals)

    current = 0
    max_concurrency = 0
    open_start = None
    periods: List[BusiestPeriod] = []

    for instant, group in groupby(events, key=attrgetter("time")):
        current += sum(event.delta for event in group)

        if current > max_concurrency:
            max_concurrency = current
            periods.clear()
            open_start = instant
        elif current == max_concurrency and current > 0:
            if open_start is None:
                open_start = instant
        elif open_start is not None:
            periods.append(BusiestPeriod(open_start, instant, max_concurrency))
            open_start = None

    # every START has a matching END, so the sweep always finishes at zero
    if current != 0 or open_start is not None:
        raise RuntimeError("unbalanced break events")

    return AnalysisReport(
        total_intervals=len(intervals),
        max_concurrency=max_concurrency,
        periods=periods,
    )


def concurrency_timeline(intervals: Iterable[Interval]) -> pd.DataFrame:
    """Return the break count after each distinct boundary as a step series."""
    rows = []
    current = 0
    for instant, group in groupby(build_events(intervals), key=attrgetter("time")):
        current += sum(event.delta for event in group)
        rows.append({"time": instant.strftime(TIME_FORMAT), "concurrency": current})
    return pd.DataFrame(rows, columns=["time", "concurrency"])
