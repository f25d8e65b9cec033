"""Sorting and daily summaries of timestamped temperature readings."""

__version__ = "0.1.0"
__all__ = ["daily", "readings"]