"""Plain-text persistence for break times.

Each line of the times file holds one break as a fixed-width record: the start
``HH:MM`` in characters 0-4 immediately followed by the end ``HH:MM`` in
characters 5-9.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterator, List

from .models import Interval
from .utils import InvalidEntryError, parse_entry

__all__ = ["BreakTimeStore"]

logger = logging.getLogger(__name__)


class BreakTimeStore:
    """Reads and appends break entries in a single times file."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def with_path(self, path: Path | str) -> "BreakTimeStore":
        return BreakTimeStore(path)

    def exists(self) -> bool:
        return self._path.is_file()

    @contextmanager
    def _open(self, mode: str) -> Iterator[IO[str]]:
        if "a" in mode:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            options = {"encoding": "utf-8"}
        else:
            # undecodable bytes become U+FFFD and the line fails validation
            options = {"encoding": "utf-8-sig", "errors": "replace"}
        with self._path.open(mode, **options) as handle:
            yield handle

    def load(self) -> List[Interval]:
        """Return every valid break in file order; a missing file yields ``[]``."""
        if not self.exists():
            return []

        intervals: List[Interval] = []
        with self._open("r") as handle:
            for lineno, raw in enumerate(handle, start=1):
                line = raw.strip()
                if not line:
                    continue
                try:
                    intervals.append(parse_entry(line))
                except InvalidEntryError as exc:
                    logger.warning("%s:%d skipped %r: %s", self._path, lineno, line, exc)
        return intervals

    def append(self, entry: str) -> Interval:
        interval = parse_entry(entry)
        with self._open("a") as handle:
            handle.write(interval.to_entry() + "\n")
        logger.info("Added break %s to %s", interval.to_entry(), self._path)
        return interval
