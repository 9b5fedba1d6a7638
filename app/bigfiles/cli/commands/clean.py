"""Clean command implementation.

Scans for large files, lets the user pick which ones to delete, and
deletes them. Files on the system volume need an extra per-file
confirmation, answered interactively or by the --on-system policy.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer

from bigfiles.cli.display import (
    create_outcomes_table,
    create_records_table,
    print_deletion_summary,
    print_scan_summary,
    run_deletion,
    run_scan,
)
from bigfiles.cli.selection import parse_selection
from bigfiles.cli.types import SystemPolicy, load_settings, resolve_scan_root
from bigfiles.deletion.pipeline import DeletionPipeline
from bigfiles.deletion.policy import PolicyGate
from bigfiles.scanning.coordinator import ScanCoordinator
from bigfiles.scanning.filters import SizeFilter
from bigfiles.scanning.models import FileRecord, InvalidRootError
from bigfiles.scanning.volumes import list_roots
from bigfiles.utils.formatting import (
    console,
    format_mib,
    print_error,
    print_info,
    print_success,
)

app = typer.Typer(
    help="Find large files and delete a selection of them.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def clean(
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
    select: Annotated[
        str | None,
        typer.Option(
            "--select",
            "-s",
            help="Rows to delete, e.g. '1,3-5' or 'all' (prompted if omitted).",
        ),
    ] = None,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip the overall confirmation prompt."),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be deleted."),
    ] = False,
    system_volume: Annotated[
        str | None,
        typer.Option("--system-volume", help="Volume whose files need confirmation."),
    ] = None,
    on_system: Annotated[
        SystemPolicy,
        typer.Option(
            "--on-system",
            help="Answer for files on the system volume: ask, allow, or deny.",
            case_sensitive=False,
        ),
    ] = SystemPolicy.ASK,
) -> None:
    """Scan for large files and delete the selected ones."""
    if ctx.invoked_subcommand is not None:
        return

    config = load_settings(min_size, system_volume)
    mode = resolve_scan_root(path, volume)
    coordinator = ScanCoordinator(SizeFilter(config.threshold_bytes))
    gated_volume = config.effective_system_volume if config.confirm_system_volume else None

    try:
        records, summary = run_scan(coordinator, mode)
    except InvalidRootError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not records:
        print_success(f"No files of {config.threshold_mib} MiB or more found.")
        return

    records.sort(key=lambda r: r.size_bytes, reverse=True)
    console.print(
        create_records_table(
            records,
            title=f"Large Files (>= {config.threshold_mib} MiB)",
            numbered=True,
            system_volume=gated_volume,
        )
    )
    print_scan_summary(summary, config.threshold_mib)

    selected = _select_records(records, select)

    if dry_run:
        console.print(create_records_table(selected, title="Planned Deletions (dry-run)"))
        print_info(f"Dry-run: {len(selected)} file(s) would be deleted.")
        return

    if not yes:
        total = format_mib(sum(r.size_bytes for r in selected))
        confirmed = typer.confirm(
            f"\nDelete {len(selected)} file(s) ({total})?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    gate = PolicyGate(gated_volume, volumes=list_roots())
    pipeline = DeletionPipeline(gate, fallback_timeout=config.fallback_timeout_seconds)
    outcomes, deletion_summary = run_deletion(
        pipeline,
        selected,
        _confirm_callback(on_system, gated_volume),
    )

    console.print(create_outcomes_table(outcomes))
    print_deletion_summary(deletion_summary)

    if deletion_summary.failed:
        raise typer.Exit(code=1)


# === Private helper functions ===


def _select_records(records: list[FileRecord], select: str | None) -> list[FileRecord]:
    """Resolve the user's selection to records, prompting if needed."""
    if select is None:
        select = typer.prompt("Select files to delete (e.g. 1,3-5 or 'all')")

    try:
        indexes = parse_selection(select, len(records))
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    return [records[i] for i in indexes]


def _confirm_callback(policy: SystemPolicy, gated_volume: str | None) -> Callable[[str], bool]:
    """Build the confirmation callback for files on the system volume."""
    if policy == SystemPolicy.ALLOW:
        return lambda _path: True
    if policy == SystemPolicy.DENY:
        return lambda _path: False

    def ask(path: str) -> bool:
        return typer.confirm(
            f"Allow deletion on system volume {gated_volume} for {path}?",
            default=False,
        )

    return ask
