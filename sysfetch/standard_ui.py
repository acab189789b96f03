"""
standard_ui.py

Console output for the sysfetch CLI, built on Rich:
  - log_info / log_error for user-facing status lines (stderr).
  - print_fields and print_table for the fetch summary itself (stdout).
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_THEME = Theme(
    {
        "ui.info": "cyan",
        "ui.error": "red bold",
        "ui.key": "bold blue",
        "ui.value": "white",
    }
)

console = Console(theme=_THEME, highlight=False)
err_console = Console(theme=_THEME, highlight=False, stderr=True)

VERBOSE = False


def set_verbose(verbose: bool) -> None:
    """Set global verbosity. If False, log_info is suppressed."""
    global VERBOSE
    VERBOSE = bool(verbose)


def log_info(message: str) -> None:
    if VERBOSE:
        err_console.print(f"[ui.info]ℹ  {message}[/]")


def log_error(message: str) -> None:
    err_console.print(f"[ui.error]❌ {message}[/]")


def print_fields(fields: Iterable[Tuple[str, str]]) -> None:
    """Neofetch-style `Key: value` lines."""
    for key, value in fields:
        console.print(Text.assemble((key, "ui.key"), ": ", (value, "ui.value")), soft_wrap=True)


def print_table(columns: List[str], rows: List[Iterable]) -> None:
    table = Table(show_header=True, header_style="bold magenta")
    for c in columns:
        table.add_column(str(c))
    for r in rows:
        table.add_row(*[str(x) for x in r])
    console.print(table)
