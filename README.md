# sqlitecounters

A small desktop application that keeps a list of integer counters. A
background thread increments every counter continuously, and a `tkinter`
window shows the counters and how fast their total is growing. From the
window you can add, remove and save counters to an SQLite database.

## Installation

```
pip install .
```

There are no third-party dependencies. The window uses `tkinter`, which ships
with most Python installations; the headless mode does not need it.

## Running

```
sqlitecounters
```

On start the counters are loaded from the database file, the background
thread is launched and counting begins. Options:

- `--database PATH` – the SQLite file to use. The default is
  `testSqlBase.sqlite3` in the current directory. The file is created if it
  does not exist. If it cannot be opened, it is removed, an error is printed
  and the command exits with status 1.
- `--headless SECONDS` – run the counters for `SECONDS` without a window, then
  stop them and print the increment frequency, the elapsed seconds and the
  number of counters.
- `--save` – in headless mode, store the counters in the database before the
  report is printed.

Run `sqlitecounters --help` to see the options.

In the window:

- **add** appends a counter with value 0.
- **remove** deletes the selected rows, or the last counter when nothing is
  selected.
- **save** replaces the database table `Counter` with the current values.
- **More** shows extra controls:
  - **start** and **stop** for the counting.
  - **add 1000**, which appends a thousand counters at once.
  - The total of all counters when counting started.
  - The whole seconds since then.
  - **SQLite**, which shows the stored table.

The label at the top shows the counter increment frequency. This is the
growth of the total of all counters since counting started, divided by the
whole seconds elapsed. It reads 0 during the first second. While counting
runs, the window refreshes every 100 ms. Closing the window detaches the
model from the background thread and waits for the increment in progress to
finish.

## Using the library

```python
from sqlitecounters.counters import CounterModel, arithmetic_sum
from sqlitecounters.database import connect_to_database
from sqlitecounters.threads import ThreadManager

db = connect_to_database("counters.sqlite3")
model = CounterModel()
model.set_counters(db.get_counters())
model.add_counter()

manager = ThreadManager()
manager.set_model(model)
manager.launch_thread()
manager.start_counters()
# ... later
manager.stop_counters()
manager.shutdown()

print(arithmetic_sum(model.counters))
db.set_counters(model.counters)
db.close()
```

The modules:

- `sqlitecounters.counters`
  - `CounterModel` is thread safe: adding, removing, replacing and
    incrementing counters all take the same lock, and `counters` returns a
    snapshot list.
  - `remove_counter(-1)` removes the last counter.
  - `remove_counter` returns `False` when there is nothing to remove and
    raises `IndexError` for a position that does not exist.
  - `arithmetic_sum` adds the values up.
- `sqlitecounters.database`
  - `connect_to_database` returns a `CounterDatabase`, which can be used as a
    context manager. If the database cannot be opened it raises
    `DatabaseError`.
  - `get_counters` returns the stored values in key order. If the table does
    not exist yet, it returns an empty list.
  - `set_counters` drops the table and recreates it, keying the values by
    position.
- `sqlitecounters.threads`
  - `ThreadManager` runs the increments in a daemon thread.
  - `is_started` and `is_counters_done` report its state.
  - `shutdown` ends the thread and waits for it.
- `sqlitecounters.table_model`
  - `CounterTableModel` presents a `CounterModel` as a one-column table
    headed "Counter".
  - It uses the `Role`, `Orientation` and `ItemFlag` enums.
- `sqlitecounters.window`
  - `CounterController` holds the window's actions (start, stop, add, add
    many, remove, save, frequency, shutdown) without any widgets, so they can
    be driven from code.
  - `MainWindow` builds the `tkinter` window around it.
  - `database_file_name(directory)` gives the default database path in a
    directory.
- `sqlitecounters.app`
  - `main` is the command's entry point.
  - `parse_args` parses its options.

## Limitations

- Counter values cannot be edited by hand in the window. They change only
  through the background increments, **add** and **remove**.
- The **SQLite** table shows the stored values read-only. It is reloaded when
  the window opens and after each **save**.