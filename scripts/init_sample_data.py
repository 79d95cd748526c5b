"""Write a sample times file for trying out the break tracker."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = REPO_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from break_tracker import (
    DEFAULT_TIMES_FILE,
    BreakTimeStore,
    analyze,
    format_report,
)

SAMPLE_BREAKS = [
    "11:0011:30",
    "11:1512:00",
    "11:4512:15",
    "12:0012:45",
    "12:0012:30",
    "12:1513:00",
    "13:0014:00",
    "13:3014:30",
    "13:4514:15",
    "15:0015:20",
]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Write sample driver break times")
    parser.add_argument(
        "--file",
        default=str(REPO_ROOT / DEFAULT_TIMES_FILE),
        help="Times file to write (default: %(default)s)",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite the file if it already exists",
    )
    return parser.parse_args(argv)


def seed_sample_data(path: Path, force: bool) -> bool:
    store = BreakTimeStore(path)

    if store.exists() and not force:
        response = input(f"{path} already exists. Overwrite with sample data? (y/N): ")
        if response.lower() != "y":
            print("Cancelled")
            return False

    if store.exists():
        path.unlink()

    print("Inserting sample breaks...")
    for entry in SAMPLE_BREAKS:
        store.append(entry)
        print(f"  Added {entry}")

    for line in format_report(analyze(store.load()), str(path)):
        print(line)
    return True


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    return 0 if seed_sample_data(Path(args.file), args.force) else 1


if __name__ == "__main__":
    sys.exit(main())
