"""Volumes command implementation.

Lists the mounted volumes a full scan would walk.
"""

from pathlib import PurePath

import typer
from rich.markup import escape
from rich.table import Table

from bigfiles.cli.types import load_settings
from bigfiles.scanning.volumes import list_volumes
from bigfiles.utils.formatting import console, format_mib, print_warning

app = typer.Typer(
    help="List mounted volumes.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def show_volumes(ctx: typer.Context) -> None:
    """List mounted volumes and mark the system volume."""
    if ctx.invoked_subcommand is not None:
        return

    config = load_settings()
    system_volume = PurePath(config.effective_system_volume)

    volumes = list_volumes()
    if not volumes:
        print_warning("No mounted volumes reported by the operating system.")
        return

    table = Table(
        title="Mounted Volumes",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Mount Point", no_wrap=True)
    table.add_column("Device", style="muted")
    table.add_column("Type", style="muted")
    table.add_column("Size", style="size", justify="right")
    table.add_column("Free", style="info", justify="right")
    table.add_column("System", justify="center")

    for volume in volumes:
        is_system = PurePath(volume.mountpoint) == system_volume
        mountpoint = escape(volume.mountpoint)
        table.add_row(
            f"[system_volume]{mountpoint}[/]" if is_system else mountpoint,
            escape(volume.device),
            volume.fstype,
            format_mib(volume.total_bytes) if volume.total_bytes is not None else "-",
            format_mib(volume.free_bytes) if volume.free_bytes is not None else "-",
            "[system_volume]yes[/]" if is_system else "",
        )

    console.print(table)
