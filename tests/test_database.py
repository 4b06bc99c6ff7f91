import sqlite3

import pytest

from sqlitecounters.database import (
    DATABASE_NAME,
    TABLE_NAME,
    DatabaseError,
    connect_to_database,
)


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / DATABASE_NAME


def test_counters_stored_in_table_named_by_source(db_path):
    with connect_to_database(db_path) as database:
        database.set_counters([1, 2])
    connection = sqlite3.connect(db_path)
    try:
        names = [
            row[0]
            for row in connection.execute(
                "SELECT name FROM sqlite_master WHERE type = 'table'"
            )
        ]
    finally:
        connection.close()
    assert TABLE_NAME == "Counter"
    assert "Counter" in names


def test_fresh_database_has_no_counters(db_path):
    with connect_to_database(db_path) as database:
        assert database.get_counters() == []


def test_round_trip(db_path):
    values = [4, 0, 17, 3]
    with connect_to_database(db_path) as database:
        database.set_counters(values)
        assert database.get_counters() == values


def test_values_persist_across_connections(db_path):
    with connect_to_database(db_path) as database:
        database.set_counters([7, 8, 9])
    with connect_to_database(db_path) as database:
        assert database.get_counters() == [7, 8, 9]


def test_set_counters_replaces_previous_table(db_path):
    with connect_to_database(db_path) as database:
        database.set_counters([1, 2, 3, 4])
        database.set_counters([5])
        assert database.get_counters() == [5]
        database.set_counters([])
        assert database.get_counters() == []


def test_table_layout_uses_positions_as_ids(db_path):
    with connect_to_database(db_path) as database:
        database.set_counters([10, 20])
    connection = sqlite3.connect(db_path)
    try:
        rows = connection.execute(
            f"SELECT id, valuecounter FROM {TABLE_NAME} ORDER BY id"
        ).fetchall()
    finally:
        connection.close()
    assert rows == [(0, 10), (1, 20)]


def test_connect_creates_file(db_path):
    database = connect_to_database(db_path)
    database.set_counters([1])
    database.close()
    assert db_path.exists()


def test_connect_to_unreachable_path_raises(tmp_path):
    target = tmp_path / "missing" / "dir" / DATABASE_NAME
    with pytest.raises(DatabaseError):
        connect_to_database(target)
    assert not target.exists()


def test_use_after_close_raises(db_path):
    database = connect_to_database(db_path)
    database.close()
    with pytest.raises(sqlite3.ProgrammingError):
        database.get_counters()