"""Runtime configuration for the break tracker."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional, Sequence

DEFAULT_TIMES_FILE = "times.txt"
TIMES_FILE_ENV = "BREAK_TRACKER_FILE"


def resolve_times_path(
    argv: Sequence[str] | None = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Path:
    """Pick the times file: ``filename <path>`` arguments, then env, then default."""
    argv = list(argv or [])
    environ = os.environ if environ is None else environ

    if len(argv) > 1 and argv[0] == "filename":
        return Path(argv[1])
    return Path(environ.get(TIMES_FILE_ENV) or DEFAULT_TIMES_FILE)
