"""Lenient conversion of values to numbers, text, lists, times and durations."""

__version__ = "0.1.0"