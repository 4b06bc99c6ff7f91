import pytest

from sqlitecounters.counters import CounterModel
from sqlitecounters.table_model import (
    HEADER_TITLE,
    CounterTableModel,
    ItemFlag,
    Orientation,
    Role,
)


@pytest.fixture
def table():
    return CounterTableModel(CounterModel([5, 7]))


def test_without_model_is_empty():
    table = CounterTableModel()
    assert table.row_count() == 0
    assert table.data(0, Role.DISPLAY) is None
    assert table.flags(0) == ItemFlag.NO_ITEM_FLAGS


def test_counts(table):
    assert table.row_count() == 2
    assert table.column_count() == 1


@pytest.mark.parametrize("role", [Role.DISPLAY, Role.EDIT])
def test_data_for_display_and_edit(table, role):
    assert table.data(0, role) == 5
    assert table.data(1, role) == 7


@pytest.mark.parametrize("role", [Role.DECORATION, Role.TOOL_TIP])
def test_data_for_other_roles_is_none(table, role):
    assert table.data(0, role) is None


@pytest.mark.parametrize("row", [-1, 2, 100])
def test_data_out_of_range_is_none(table, row):
    assert table.data(row, Role.DISPLAY) is None


def test_data_follows_model_changes():
    model = CounterModel([3])
    table = CounterTableModel()
    table.set_model(model)
    model.add_counter()
    model.increment_counters()
    assert table.row_count() == 2
    assert [table.data(row) for row in range(table.row_count())] == model.counters


def test_horizontal_header(table):
    assert table.header_data(0, Orientation.HORIZONTAL, Role.DISPLAY) == HEADER_TITLE
    assert table.header_data(0, Orientation.HORIZONTAL, Role.EDIT) is None


def test_vertical_header_is_one_based(table):
    assert table.header_data(0, Orientation.VERTICAL, Role.DISPLAY) == 1
    assert table.header_data(0, Orientation.VERTICAL, Role.TOOL_TIP) is None


def test_flags_for_valid_rows(table):
    flags = table.flags(1)
    assert ItemFlag.ENABLED in flags
    assert ItemFlag.SELECTABLE in flags
    assert ItemFlag.EDITABLE in flags


@pytest.mark.parametrize("row", [-1, 2])
def test_flags_for_invalid_rows(table, row):
    assert table.flags(row) == ItemFlag.NO_ITEM_FLAGS


def test_set_model_replaces_model(table):
    other = CounterModel([1, 2, 3])
    table.set_model(other)
    assert table.model is other
    assert table.row_count() == 3