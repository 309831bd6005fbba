"""Output formatting module."""

from .formatters import JSONFormatter, OutputFormatter, TableFormatter, sort_entries

__all__ = [
    "OutputFormatter",
    "JSONFormatter",
    "TableFormatter",
    "sort_entries",
]
