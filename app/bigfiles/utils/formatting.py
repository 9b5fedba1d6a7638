"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bigfiles.core.config import MIB
from bigfiles.core.theme import get_theme

if TYPE_CHECKING:
    from bigfiles.scanning.models import FileRecord


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def format_mib(size_bytes: int) -> str:
    """Format a byte count as MiB with two decimals.

    Args:
        size_bytes: Size in bytes.

    Returns:
        String such as "150.00 MiB".
    """
    return f"{size_bytes / MIB:.2f} MiB"


def create_record_table(title: str = "Large Files", *, numbered: bool = False) -> Table:
    """Create a pre-configured table for displaying file records.

    Args:
        title: Table title.
        numbered: Add a leading "#" column used for selection prompts.

    Returns:
        Rich Table configured for record display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],  # Zebra striping for readability
    )
    if numbered:
        table.add_column("#", style="muted", justify="right")
    table.add_column("Path", style="text", overflow="fold")
    table.add_column("Size", style="size", justify="right", no_wrap=True)
    table.add_column("Volume", style="muted", no_wrap=True)
    return table


def format_record_row(
    record: FileRecord, *, system_volume: str | None = None
) -> tuple[str, str, str]:
    """Format a record as a (path, size, volume) table row.

    Args:
        record: The record to format.
        system_volume: Volume to highlight as gated, if any.

    Returns:
        Tuple of Rich markup strings.
    """
    volume = escape(record.volume)
    if system_volume is not None and record.volume == system_volume:
        volume = f"[system_volume]{volume}[/]"
    return (escape(record.path), format_mib(record.size_bytes), volume)


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(message)}[/]")
