"""Storage of counter values in an SQLite database."""

from __future__ import annotations

import contextlib
import os
import sqlite3
from collections.abc import Iterable
from types import TracebackType

TABLE_NAME = "Counter"
"""Name of the table holding the counters."""

DATABASE_NAME = "testSqlBase.sqlite3"
"""File name of the counters database."""


class DatabaseError(Exception):
    """Raised when the counters database cannot be opened."""


class CounterDatabase:
    """Reads and writes counter values in an open SQLite connection."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection

    def get_counters(self) -> list[int]:
        """Return the stored counter values; empty if there is no table yet."""
        try:
            rows = self._connection.execute(
                f"SELECT valuecounter FROM {TABLE_NAME} ORDER BY id"
            ).fetchall()
        except sqlite3.OperationalError:
            return []
        return [_to_int(value) for (value,) in rows]

    def set_counters(self, values: Iterable[int]) -> None:
        """Replace the stored table with ``values``, keyed by position."""
        rows = [(index, int(value)) for index, value in enumerate(values)]
        with self._connection:
            self._connection.execute(f"DROP TABLE IF EXISTS {TABLE_NAME}")
            self._connection.execute(
                f"CREATE TABLE {TABLE_NAME} (id INT PRIMARY KEY, valuecounter INT)"
            )
            self._connection.executemany(
                f"INSERT INTO {TABLE_NAME} VALUES (?, ?)", rows
            )

    def close(self) -> None:
        """Close the underlying connection."""
        self._connection.close()

    def __enter__(self) -> CounterDatabase:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def _to_int(value: object) -> int:
    if value is None:
        return 0
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0


def connect_to_database(file_name: str | os.PathLike[str]) -> CounterDatabase:
    """Open (creating if needed) the SQLite database at ``file_name``.

    On failure the file is removed and DatabaseError is raised.
    """
    try:
        connection = sqlite3.connect(os.fspath(file_name))
        connection.execute("PRAGMA schema_version").fetchone()
    except sqlite3.Error as exc:
        with contextlib.suppress(OSError):
            os.remove(file_name)
        raise DatabaseError(f"Cannot open database: {exc}") from exc
    return CounterDatabase(connection)