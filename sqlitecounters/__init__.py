"""Counters incremented in a background thread, shown in a window and stored in SQLite."""

__version__ = "0.1.0"

__all__ = ["__version__"]