"""Output formatters for token listings.

Provides two output formats:
- JSON: Machine-readable, the raw provider entries
- Table: Human-readable CLI output with the market table columns
"""

import json
from abc import ABC, abstractmethod
from io import StringIO
from typing import Any, Callable, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.models import TokenListEntry
from ..core.types import SortColumn



# Nullable numeric columns sort as 0, like the web table
_SORT_KEYS: dict[SortColumn, Callable[[TokenListEntry], Any]] = {
    SortColumn.RANK: lambda e: e.market_cap_rank or 0,
    SortColumn.NAME: lambda e: e.name.casefold(),
    SortColumn.PRICE: lambda e: e.current_price or 0,
    SortColumn.PRICE_CHANGE: lambda e: e.price_change_percentage_24h or 0,
    SortColumn.MARKET_CAP: lambda e: e.market_cap or 0,
    SortColumn.VOLUME: lambda e: e.total_volume or 0,
}


def sort_entries(
    entries: Sequence[TokenListEntry],
    column: SortColumn,
    descending: bool = False,
) -> list[TokenListEntry]:
    """Return entries sorted by a table column. The sort is stable."""
    return sorted(entries, key=_SORT_KEYS[column], reverse=descending)


def format_usd(value: float | None, decimals: int = 0) -> str:
    """Format a USD amount with thousands separators, or N/A."""
    if value is None:
        return "N/A"
    return f"${value:,.{decimals}f}"


def format_change(change: float | None) -> str:
    """Format a 24h change with a direction arrow."""
    if change is None:
        return "N/A"
    arrow = "▲" if change >= 0 else "▼"
    return f"{arrow} {change:.2f}%"


class OutputFormatter(ABC):
    """Abstract base class for listing formatters."""

    @abstractmethod
    def format(self, entries: Sequence[TokenListEntry]) -> str:
        """Format the entries as a string."""
        pass

    def format_to_file(self, entries: Sequence[TokenListEntry], filepath: str) -> None:
        """Write formatted entries to a file."""
        with open(filepath, "w", encoding="utf-8") as f:
            f.write(self.format(entries))


class JSONFormatter(OutputFormatter):
    """Formats entries as JSON, keeping every provider field."""

    def __init__(self, indent: int = 2):
        self.indent = indent

    def format(self, entries: Sequence[TokenListEntry]) -> str:
        """Format entries as a JSON array."""
        data = [entry.model_dump(exclude_unset=True) for entry in entries]
        return json.dumps(data, indent=self.indent, ensure_ascii=False)


class TableFormatter(OutputFormatter):
    """Formats entries as a rich table for CLI output."""

    def __init__(self, color: bool = True, width: int = 120):
        """
        Initialize table formatter.

        Args:
            color: Emit ANSI styling
            width: Maximum table width
        """
        self.color = color
        self.width = width

    def format(self, entries: Sequence[TokenListEntry]) -> str:
        """Render the listing with rank, name, price, change, market cap and volume."""
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self.color,
            no_color=not self.color,
            width=self.width,
        )

        table = Table(title="Meme Tokens by Market Cap")
        table.add_column(SortColumn.RANK.display_name, justify="right", style="dim")
        table.add_column(SortColumn.NAME.display_name, style="cyan")
        table.add_column("Symbol")
        table.add_column(SortColumn.PRICE.display_name, justify="right")
        table.add_column(SortColumn.PRICE_CHANGE.display_name, justify="right")
        table.add_column(SortColumn.MARKET_CAP.display_name, justify="right")
        table.add_column(SortColumn.VOLUME.display_name, justify="right")

        for entry in entries:
            change = entry.price_change_percentage_24h
            change_style = "green" if change is not None and change >= 0 else "red"
            table.add_row(
                str(entry.market_cap_rank) if entry.market_cap_rank is not None else "-",
                escape(entry.name),
                escape(entry.symbol.upper()),
                format_usd(entry.current_price, decimals=2),
                f"[{change_style}]{format_change(change)}[/]",
                format_usd(entry.market_cap),
                format_usd(entry.total_volume),
            )

        if not entries:
            console.print("[yellow]No tokens returned[/]")
        else:
            console.print(table)
        return output.getvalue()
