"""Command-line entry point of the counters application."""

from __future__ import annotations

import argparse
import os
import sys
import time
from collections.abc import Sequence

from sqlitecounters.counters import CounterModel
from sqlitecounters.database import DatabaseError, connect_to_database
from sqlitecounters.threads import ThreadManager
from sqlitecounters.window import MainWindow, database_file_name


def _non_negative_seconds(text: str) -> float:
    try:
        value = float(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from exc
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {text!r}")
    return value


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the command-line options."""
    parser = argparse.ArgumentParser(
        prog="sqlitecounters",
        description="Keep incrementing counters stored in an SQLite database.",
    )
    parser.add_argument(
        "--database",
        default=database_file_name(os.getcwd()),
        help="path of the SQLite database file",
    )
    parser.add_argument(
        "--headless",
        type=_non_negative_seconds,
        metavar="SECONDS",
        default=None,
        help="run the counters for SECONDS without a window and report",
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="in headless mode, store the counters in the database at the end",
    )
    return parser.parse_args(argv)


def _run_headless(window: MainWindow, seconds: float, save: bool) -> int:
    time.sleep(seconds)
    window.controller.on_stop()
    if save:
        window.controller.on_save()
    window.update_controls()
    print(f"Counter Increment Frequency: {window.frequency_text}")
    print(window.seconds_text)
    print(f"counters: {window.table_model.row_count()}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Load the counters, start incrementing them and show the window."""
    args = parse_args(argv)
    try:
        database = connect_to_database(args.database)
    except DatabaseError as exc:
        print(exc, file=sys.stderr)
        return 1

    with database:
        model = CounterModel(database.get_counters())
        manager = ThreadManager()
        manager.set_model(model)
        manager.launch_thread()
        try:
            window = MainWindow(database=database)
            window.set_model(model)
            window.set_thread_manager(manager)
            window.start_counters()
            if args.headless is None:
                status = window.run()
            else:
                status = _run_headless(window, args.headless, args.save)
        finally:
            manager.set_model(None)
            manager.stop_counters()
            manager.shutdown()
    return status


if __name__ == "__main__":
    sys.exit(main())