"""Shared console helpers for the Dynamo project generator.

All user-facing output goes through a single Rich ``Console`` so that the
command line, the scaffold writer and the tests agree on where text ends up.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# Status lines
# ---------------------------------------------------------------------------


def print_success(message: str, *, out: Console | None = None) -> None:
    """Print a green success message."""
    (out or console).print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str, *, out: Console | None = None) -> None:
    """Print a red error message."""
    (out or console).print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_warning(message: str, *, out: Console | None = None) -> None:
    """Print a yellow warning message."""
    (out or console).print(f"[bold yellow]{escape(message)}[/bold yellow]")


def print_action(action: str, path: str | Path, *, out: Console | None = None) -> None:
    """Print a Mix-style ``* creating path`` line.

    ``creating`` is rendered green, anything else (``skipping``) yellow.
    """
    color = "green" if action == "creating" else "yellow"
    (out or console).print(f"[{color}]* {action}[/{color}] {escape(str(path))}", highlight=False)


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------


def print_summary_table(
    data: dict[str, str],
    title: str = "Summary",
    *,
    out: Console | None = None,
) -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
        out: Console to print on.  Defaults to the module console.
    """
    target = out or console
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, escape(str(value)))

    target.print(table)
    target.print()
