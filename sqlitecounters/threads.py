"""Background thread that keeps incrementing a counter model."""

from __future__ import annotations

import threading
import time

from sqlitecounters.counters import CounterModel

_IDLE_WAIT = 0.005


class ThreadManager:
    """Runs counter increments in a separate daemon thread."""

    def __init__(self) -> None:
        self._model: CounterModel | None = None
        self._state_lock = threading.Lock()
        self._active = False
        self._done = True
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def set_model(self, model: CounterModel | None) -> None:
        """Set the model to increment, or None to pause work."""
        self._model = model

    def launch_thread(self) -> None:
        """Create the worker thread and start it without blocking."""
        if self._thread is not None and self._thread.is_alive():
            raise RuntimeError("worker thread is already running")
        self._stop.clear()
        self._thread = threading.Thread(
            target=self._run, name="counter-increments", daemon=True
        )
        self._thread.start()

    def is_started(self) -> bool:
        """Return True if the counters are being increased."""
        with self._state_lock:
            return self._active

    def is_counters_done(self) -> bool:
        """Return True if no increment is in progress."""
        with self._state_lock:
            return self._done

    def start_counters(self) -> None:
        """Resume increasing the counters."""
        with self._state_lock:
            self._active = True

    def stop_counters(self) -> None:
        """Stop increasing the counters."""
        with self._state_lock:
            self._active = False

    def shutdown(self) -> None:
        """Stop the worker thread and wait for it to finish."""
        self._stop.set()
        thread = self._thread
        if thread is not None:
            thread.join()
        self._thread = None

    def _run(self) -> None:
        while not self._stop.is_set():
            model = self._model
            with self._state_lock:
                working = model is not None and self._active
                if working:
                    self._done = False
            if not working or model is None:
                self._stop.wait(_IDLE_WAIT)
                continue
            try:
                model.increment_counters()
            finally:
                with self._state_lock:
                    self._done = True
            time.sleep(0)