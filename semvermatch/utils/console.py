"""
Rich console output for the semvermatch CLI.

Everything the commands show to the user goes through this module;
diagnostics go through :mod:`semvermatch.utils.logger` instead. Status
lines are printed with markup disabled because requirement text such as
``[bold]`` must appear literally.
"""

from __future__ import annotations

import os
import sys
import threading
from typing import Any, Callable, Dict, List, Mapping, Optional

from rich.table import Table
from rich.theme import Theme
from rich.console import Console

SEMVERMATCH_THEME = Theme(
    {
        "success": "bold green",
        "error": "bold red",
        "warning": "bold yellow",
        "info": "bold cyan",
        "dim": "dim",
        "highlight": "bold magenta",
    }
)

# Rich markup color per comparison result
ORDERING_COLORS: Dict[str, str] = {"lt": "yellow", "eq": "green", "gt": "cyan"}

Row = Mapping[str, Any]

_console: Optional[Console] = None
_console_lock = threading.Lock()


def _should_use_color() -> bool:
    """Return True if stdout is a terminal and colors are not disabled."""
    if os.environ.get("NO_COLOR") or os.environ.get("CI"):
        return False
    try:
        return sys.stdout.isatty()
    except (AttributeError, OSError):
        return False


def _get_console() -> Console:
    """Return the shared Console, creating it on first use."""
    global _console

    if _console is None:
        with _console_lock:
            if _console is None:
                color = _should_use_color()
                _console = Console(
                    theme=SEMVERMATCH_THEME,
                    no_color=not color,
                    highlight=color,
                )
    return _console


def reconfigure_console() -> None:
    """Drop the shared Console so the next print picks up a new environment.

    The CLI calls this after applying ``--no-color``, and again whenever the
    standard streams are swapped, as they are under ``CliRunner``.
    """
    global _console
    with _console_lock:
        _console = None


# ---------------------------------------------------------------------------
# Status lines
# ---------------------------------------------------------------------------


def _print_status(style: str, prefix: str, message: str) -> None:
    _get_console().print(f"{prefix} {message}", style=style, markup=False)


def print_success(message: str, *, prefix: str = "[OK]") -> None:
    """Print a success message."""
    _print_status("success", prefix, message)


def print_error(message: str, *, prefix: str = "[ERROR]") -> None:
    """Print an error message."""
    _print_status("error", prefix, message)


def print_warning(message: str, *, prefix: str = "[WARNING]") -> None:
    """Print a warning message."""
    _print_status("warning", prefix, message)


def print_line(message: str) -> None:
    """Print one line of plain, machine-readable output."""
    _get_console().print(message, markup=False, highlight=False)


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------


def print_table(
    rows: List[Row],
    *,
    headers: Optional[List[str]] = None,
    title: Optional[str] = None,
    column_styles: Optional[Dict[str, Dict[str, Any]]] = None,
    row_styler: Optional[Callable[[Row], Optional[str]]] = None,
) -> None:
    """Render ``rows`` as a Rich table. Nothing is printed for no rows.

    Args:
        rows: One mapping per row; cell values are converted with ``str``
            and may contain Rich markup.
        headers: Column order. Defaults to the keys of the first row.
        title: Optional table title.
        column_styles: ``Table.add_column`` keyword arguments per header,
            e.g. ``{"Version": {"style": "bold cyan", "no_wrap": True}}``.
        row_styler: Callback returning a style for a row, or ``None``.
    """
    if not rows:
        return

    columns = headers if headers is not None else list(rows[0])
    styles = column_styles or {}

    table = Table(title=title, header_style="bold")
    for header in columns:
        table.add_column(header, **styles.get(header, {}))

    for row in rows:
        table.add_row(
            *(str(row.get(header, "")) for header in columns),
            style=row_styler(row) if row_styler else None,
        )

    _get_console().print(table)


def colorize_ordering(ordering: str) -> str:
    """Wrap ``"lt"``, ``"eq"`` or ``"gt"`` in Rich color markup.

    Unknown labels are returned unchanged.
    """
    color = ORDERING_COLORS.get(ordering.lower())
    return f"[{color}]{ordering}[/{color}]" if color else ordering
