"""Scan command implementation.

Finds files at or above the size threshold and lists them, without
deleting anything.
"""

from pathlib import Path
from typing import Annotated

import typer

from bigfiles.cli.display import (
    create_records_table,
    print_records_json,
    print_scan_summary,
    run_scan,
)
from bigfiles.cli.types import OutputFormat, load_settings, resolve_scan_root
from bigfiles.scanning.coordinator import ScanCoordinator
from bigfiles.scanning.filters import SizeFilter
from bigfiles.scanning.models import InvalidRootError
from bigfiles.utils.formatting import console, print_error, print_success

app = typer.Typer(
    help="Find large files.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def scan(
    ctx: typer.Context,
    path: Annotated[
        Path | None,
        typer.Option("--path", "-p", help="Scan a single directory tree."),
    ] = None,
    volume: Annotated[
        str | None,
        typer.Option("--volume", "-d", help="Scan a single volume by mount point."),
    ] = None,
    min_size: Annotated[
        int | None,
        typer.Option("--min-size", "-m", min=1, help="Minimum file size in MiB."),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-l", min=1, help="Limit number of results."),
    ] = None,
) -> None:
    """Scan for files at or above the size threshold."""
    if ctx.invoked_subcommand is not None:
        return

    config = load_settings(min_size)
    mode = resolve_scan_root(path, volume)
    coordinator = ScanCoordinator(SizeFilter(config.threshold_bytes))
    gated_volume = config.effective_system_volume if config.confirm_system_volume else None

    try:
        records, summary = run_scan(
            coordinator,
            mode,
            stream=output_format == OutputFormat.TABLE,
        )
    except InvalidRootError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    # Largest first
    records.sort(key=lambda r: r.size_bytes, reverse=True)
    display_records = records[:limit] if limit else records

    if output_format == OutputFormat.JSON:
        print_records_json(display_records)
        return

    if not records:
        print_success(f"No files of {config.threshold_mib} MiB or more found.")
        return

    console.print(
        create_records_table(
            display_records,
            title=f"Large Files (>= {config.threshold_mib} MiB)",
            system_volume=gated_volume,
        )
    )
    print_scan_summary(summary, config.threshold_mib)
    if limit and len(display_records) < len(records):
        console.print(
            f"[dim](showing {len(display_records)} of {len(records)}, limited to {limit})[/dim]"
        )
