"""Table view model exposing a counter model as a single-column table."""

from __future__ import annotations

import enum

from sqlitecounters.counters import CounterModel

HEADER_TITLE = "Counter"
"""Title of the only column of the table."""


class Role(enum.Enum):
    """Kind of value requested from the table model."""

    DISPLAY = enum.auto()
    DECORATION = enum.auto()
    EDIT = enum.auto()
    TOOL_TIP = enum.auto()


class Orientation(enum.Enum):
    """Orientation of a table header."""

    HORIZONTAL = enum.auto()
    VERTICAL = enum.auto()


class ItemFlag(enum.Flag):
    """Properties of a table cell."""

    NO_ITEM_FLAGS = 0
    SELECTABLE = 1
    EDITABLE = 2
    ENABLED = 32


class CounterTableModel:
    """Presents the values of a CounterModel as rows of one column."""

    def __init__(self, model: CounterModel | None = None) -> None:
        self._model = model

    @property
    def model(self) -> CounterModel | None:
        """The counter model being presented, if any."""
        return self._model

    def set_model(self, model: CounterModel | None) -> None:
        """Set the counter model to present."""
        self._model = model

    def row_count(self) -> int:
        """Return the number of rows: one per counter."""
        return len(self._model) if self._model is not None else 0

    def column_count(self) -> int:
        """Return the number of columns, which is always one."""
        return 1

    def data(self, row: int, role: Role = Role.DISPLAY) -> int | None:
        """Return the counter shown in ``row`` for display or edit roles."""
        if self._model is None:
            return None
        if role not in (Role.DISPLAY, Role.EDIT):
            return None
        counters = self._model.counters
        if not 0 <= row < len(counters):
            return None
        return counters[row]

    def header_data(
        self, section: int, orientation: Orientation, role: Role = Role.DISPLAY
    ) -> str | int | None:
        """Return the header title; vertical headers show one-based numbers."""
        if role is not Role.DISPLAY:
            return None
        if orientation is Orientation.HORIZONTAL:
            return HEADER_TITLE
        return section + 1

    def flags(self, row: int) -> ItemFlag:
        """Return the cell flags for ``row``; invalid rows have none."""
        if not 0 <= row < self.row_count():
            return ItemFlag.NO_ITEM_FLAGS
        return ItemFlag.ENABLED | ItemFlag.SELECTABLE | ItemFlag.EDITABLE