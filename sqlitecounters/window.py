"""Main window of the counters application and the logic behind it."""

from __future__ import annotations

import os
import time
from collections.abc import Callable, Iterable
from typing import Any

from sqlitecounters.counters import CounterModel, arithmetic_sum
from sqlitecounters.database import DATABASE_NAME, CounterDatabase
from sqlitecounters.table_model import CounterTableModel, Orientation, Role
from sqlitecounters.threads import ThreadManager

ADD_MANY_VALUES = 1000
"""Number of counters added at once by the "add 1000" action."""

TIMER_INTERVAL_MS = 100
"""Refresh interval of the window while counters are running."""

WINDOW_TITLE = "Counters Qualification Test"
WINDOW_GEOMETRY = "300x600"

_SHUTDOWN_POLL = 0.01
_SHUTDOWN_TIMEOUT = 1000.0


def database_file_name(directory: str | os.PathLike[str]) -> str:
    """Return the full path of the counters database inside ``directory``."""
    return os.path.join(os.fspath(directory), DATABASE_NAME)


class CounterController:
    """Handles the user actions on the counters independently of any widgets."""

    def __init__(
        self,
        model: CounterModel | None = None,
        thread_manager: ThreadManager | None = None,
        database: CounterDatabase | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._model = model
        self._thread_manager = thread_manager
        self.database = database
        self._clock = clock
        self._time_start: float | None = None
        self.counters_sum_start = 0

    @property
    def model(self) -> CounterModel | None:
        """The counter model being controlled."""
        return self._model

    @property
    def thread_manager(self) -> ThreadManager | None:
        """The thread manager driving the counters."""
        return self._thread_manager

    def set_model(self, model: CounterModel | None) -> None:
        """Set the counter model."""
        self._model = model

    def set_thread_manager(self, manager: ThreadManager | None) -> None:
        """Set the thread manager."""
        self._thread_manager = manager

    def _require_manager(self) -> ThreadManager:
        if self._thread_manager is None:
            raise RuntimeError("no thread manager is set")
        return self._thread_manager

    def on_start(self) -> bool:
        """Record t0 and the counter sum, then start the counters.

        Returns False when there is no model to work on.
        """
        if self._model is None:
            return False
        manager = self._require_manager()
        self._time_start = self._clock()
        self.counters_sum_start = arithmetic_sum(self._model.counters)
        manager.start_counters()
        return True

    def on_stop(self) -> bool:
        """Stop the counters; returns False when there is no model."""
        if self._model is None:
            return False
        self._require_manager().stop_counters()
        return True

    def on_add(self) -> None:
        """Append one counter."""
        if self._model is None:
            return
        self._model.add_counter()

    def on_add_many(self) -> None:
        """Append ADD_MANY_VALUES counters."""
        if self._model is None:
            return
        for _ in range(ADD_MANY_VALUES):
            self._model.add_counter()

    def on_remove(self, selected_rows: Iterable[int] = ()) -> None:
        """Remove the selected rows, or the last row when nothing is selected."""
        if self._model is None:
            return
        rows = sorted(set(selected_rows), reverse=True)
        if not rows:
            self._model.remove_counter(-1)
            return
        for row in rows:
            self._model.remove_counter(row)

    def on_save(self) -> None:
        """Store the current counters in the database."""
        if self._model is None:
            raise RuntimeError("no counter model is set")
        if self.database is None:
            raise RuntimeError("no database is connected")
        self.database.set_counters(self._model.counters)

    @property
    def elapsed_seconds(self) -> int:
        """Whole seconds since the counters were last started."""
        if self._time_start is None:
            return 0
        return max(0, int(self._clock() - self._time_start))

    def frequency(self) -> float:
        """Return the average counter increase per second since t0."""
        elapsed = self.elapsed_seconds
        if elapsed <= 0 or self._model is None:
            return 0.0
        return (arithmetic_sum(self._model.counters) - self.counters_sum_start) / elapsed

    def shutdown(self) -> None:
        """Detach the model and wait until the running increment completes."""
        manager = self._thread_manager
        if manager is None:
            return
        manager.set_model(None)
        manager.stop_counters()
        deadline = time.monotonic() + _SHUTDOWN_TIMEOUT
        while not manager.is_counters_done() and time.monotonic() < deadline:
            time.sleep(_SHUTDOWN_POLL)


class MainWindow:
    """Window with the counters table and the buttons that act on it."""

    def __init__(
        self,
        database: CounterDatabase | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.controller = CounterController(database=database, clock=clock)
        self.table_model = CounterTableModel()
        self.frequency_text = "0"
        self.seconds_text = "sec: 0"
        self.sum_start_text = ""
        self._root: Any = None
        self._ui: dict[str, Any] = {}

    def set_model(self, model: CounterModel | None) -> None:
        """Set the counter model shown in the window."""
        self.controller.set_model(model)
        self.table_model.set_model(model)
        self.update_controls()

    def set_thread_manager(self, manager: ThreadManager | None) -> None:
        """Set the thread manager driving the counters."""
        self.controller.set_thread_manager(manager)

    def start_counters(self) -> None:
        """Start increasing the counters."""
        self._on_start()

    def update_controls(self) -> None:
        """Recompute the frequency and elapsed time and refresh the view."""
        self.frequency_text = f"{self.controller.frequency():.10g}"
        self.seconds_text = f"sec: {self.controller.elapsed_seconds}"
        self._refresh_view()

    def run(self) -> int:
        """Show the window and process events until it is closed."""
        import tkinter as tk

        root = tk.Tk()
        self._root = root
        root.title(WINDOW_TITLE)
        root.geometry(WINDOW_GEOMETRY)
        self._build(root)
        root.protocol("WM_DELETE_WINDOW", self._on_close)
        self.update_controls()
        self._reload_database_view()
        root.after(TIMER_INTERVAL_MS, self._on_timer)
        try:
            root.mainloop()
        finally:
            self._ui = {}
            self._root = None
            try:
                root.destroy()
            except tk.TclError:
                pass
        return 0

    # actions

    def _on_start(self) -> None:
        if self.controller.on_start():
            self.sum_start_text = f"{self.controller.counters_sum_start:.10g}"
            sum_var = self._ui.get("sum_start")
            if sum_var is not None:
                sum_var.set(self.sum_start_text)

    def _on_stop(self) -> None:
        if self.controller.on_stop():
            self.update_controls()

    def _on_add(self) -> None:
        self.controller.on_add()
        self.update_controls()

    def _on_add_many(self) -> None:
        self.controller.on_add_many()
        self.update_controls()

    def _on_remove(self) -> None:
        tree = self._ui.get("counters")
        selected = [int(iid) for iid in tree.selection()] if tree is not None else []
        self.controller.on_remove(selected)
        self.update_controls()

    def _on_save(self) -> None:
        self.controller.on_save()
        self._reload_database_view()

    def _on_timer(self) -> None:
        if self._root is None:
            return
        manager = self.controller.thread_manager
        if manager is not None and manager.is_started():
            self.update_controls()
        self._root.after(TIMER_INTERVAL_MS, self._on_timer)

    def _on_close(self) -> None:
        self.controller.shutdown()
        if self._root is not None:
            self._root.quit()

    def _on_more(self) -> None:
        frame = self._ui["extra"]
        if self._ui["more"].get():
            frame.grid()
        else:
            frame.grid_remove()

    def _on_sqlite(self) -> None:
        tree = self._ui["database"]
        if self._ui["show_database"].get():
            tree.grid()
        else:
            tree.grid_remove()

    # view

    def _build(self, root: Any) -> None:
        import tkinter as tk
        from tkinter import ttk

        for column in range(3):
            root.columnconfigure(column, weight=1)
        root.rowconfigure(1, weight=1)

        frequency_frame = ttk.Frame(root)
        frequency_frame.grid(row=0, column=0, columnspan=3, sticky="ew")
        ttk.Label(frequency_frame, text="Counter Increment Frequency:").pack(side="left")
        frequency_var = tk.StringVar(value=self.frequency_text)
        tk.Label(frequency_frame, textvariable=frequency_var, bg="lightgray").pack(
            side="left", fill="x", expand=True
        )

        counters = ttk.Treeview(
            root, columns=("counter",), show="headings", selectmode="extended"
        )
        title = self.table_model.header_data(0, Orientation.HORIZONTAL, Role.DISPLAY)
        counters.heading("counter", text=str(title))
        counters.grid(row=1, column=0, columnspan=3, sticky="nsew")

        more_var = tk.BooleanVar(value=False)
        ttk.Checkbutton(root, text="More", variable=more_var, command=self._on_more).grid(
            row=2, column=0, columnspan=3, sticky="w"
        )

        extra = ttk.Frame(root, padding=2)
        extra.grid(row=3, column=0, columnspan=3, sticky="nsew")
        for column in range(3):
            extra.columnconfigure(column, weight=1)
        ttk.Button(extra, text="start", command=self._on_start).grid(row=0, column=0)
        ttk.Button(extra, text="stop", command=self._on_stop).grid(row=0, column=1)
        show_database_var = tk.BooleanVar(value=False)
        ttk.Checkbutton(
            extra,
            text="SQLite",
            variable=show_database_var,
            command=self._on_sqlite,
            style="Toolbutton",
        ).grid(row=0, column=2)
        ttk.Button(
            extra, text=f"add {ADD_MANY_VALUES}", command=self._on_add_many
        ).grid(row=1, column=0)
        sum_start_var = tk.StringVar(value=self.sum_start_text)
        ttk.Entry(extra, textvariable=sum_start_var).grid(row=1, column=1)
        seconds_var = tk.StringVar(value=self.seconds_text)
        ttk.Label(extra, textvariable=seconds_var).grid(row=1, column=2)
        database = ttk.Treeview(extra, columns=("key", "counter"), show="headings")
        database.heading("key", text="Key")
        database.heading("counter", text="Counter")
        database.grid(row=2, column=0, columnspan=3, sticky="nsew")

        ttk.Button(root, text="add", command=self._on_add).grid(row=4, column=0)
        ttk.Button(root, text="remove", command=self._on_remove).grid(row=4, column=1)
        ttk.Button(root, text="save", command=self._on_save).grid(row=4, column=2)

        self._ui = {
            "frequency": frequency_var,
            "counters": counters,
            "more": more_var,
            "extra": extra,
            "show_database": show_database_var,
            "sum_start": sum_start_var,
            "seconds": seconds_var,
            "database": database,
        }
        self._on_more()
        self._on_sqlite()

    def _refresh_view(self) -> None:
        if not self._ui:
            return
        self._ui["frequency"].set(self.frequency_text)
        self._ui["seconds"].set(self.seconds_text)
        model = self.table_model.model
        values = model.counters if model is not None else []
        _sync_tree(self._ui["counters"], [(value,) for value in values])

    def _reload_database_view(self) -> None:
        database = self.controller.database
        if not self._ui or database is None:
            return
        _sync_tree(self._ui["database"], list(enumerate(database.get_counters())))


def _sync_tree(tree: Any, rows: list[tuple[Any, ...]]) -> None:
    """Make the rows of a tree view match ``rows``, keyed by position."""
    for iid in tree.get_children()[len(rows):]:
        tree.delete(iid)
    for index, row in enumerate(rows):
        iid = str(index)
        if tree.exists(iid):
            tree.item(iid, values=row)
        else:
            tree.insert("", "end", iid=iid, values=row)