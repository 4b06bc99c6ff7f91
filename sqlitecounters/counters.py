"""A thread-safe set of integer counters and the algorithms over them."""

from __future__ import annotations

import threading
from collections.abc import Iterable

DEFAULT_VALUE = 0
"""Value given to every newly added counter."""


class CounterModel:
    """Manages a list of integer counters guarded by a lock."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._lock = threading.Lock()
        self._counters: list[int] = [int(value) for value in values]

    @property
    def counters(self) -> list[int]:
        """A snapshot of the current counter values."""
        with self._lock:
            return list(self._counters)

    def __len__(self) -> int:
        with self._lock:
            return len(self._counters)

    def add_counter(self) -> None:
        """Append a new counter holding the default value."""
        with self._lock:
            self._counters.append(DEFAULT_VALUE)

    def remove_counter(self, position: int) -> bool:
        """Remove the counter at ``position``; -1 removes the last one.

        Returns False when there is nothing to remove. Raises IndexError
        when ``position`` does not name an existing counter.
        """
        with self._lock:
            if not self._counters:
                return False
            if position != -1 and not 0 <= position < len(self._counters):
                raise IndexError(f"counter position out of range: {position}")
            del self._counters[position]
            return True

    def set_counters(self, values: Iterable[int]) -> None:
        """Replace all counters with ``values``."""
        new_values = [int(value) for value in values]
        with self._lock:
            self._counters = new_values

    def increment_counters(self) -> None:
        """Add one to every counter."""
        with self._lock:
            self._counters = [value + 1 for value in self._counters]


def arithmetic_sum(values: Iterable[int]) -> int:
    """Return the sum of the counter values."""
    return sum(values, 0)