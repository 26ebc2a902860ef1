"""Shared console output for listkeeper commands."""

from collections.abc import Iterable, Mapping
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()


def error(msg: str) -> None:
    """Print an error message in red. ``msg`` is treated as plain text."""
    console.print(f"[red]{escape(msg)}[/red]")


def success(msg: str) -> None:
    console.print(f"[green]{escape(msg)}[/green]")


def field_errors(errors: Iterable[Mapping[str, Any]]) -> None:
    """Print pydantic-style errors as ``dotted.location: message`` lines."""
    for err in errors:
        loc = ".".join(str(part) for part in err["loc"])
        console.print(f"  [yellow]{escape(loc)}[/yellow]: {escape(str(err['msg']))}")


def create_table(title: str, columns: list[tuple[str, str]]) -> Table:
    """Create a table with one styled column per ``(name, style)`` pair."""
    table = Table(title=title)
    for name, style in columns:
        table.add_column(name, style=style)
    return table
