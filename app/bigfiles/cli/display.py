"""Shared Rich display functions for scan records and deletion outcomes.

Provides the progress-driven consumers of scan and deletion sessions,
plus reusable table builders and summary printers used by the scan and
clean commands.
"""

import json
from collections.abc import Callable, Sequence

from rich.markup import escape
from rich.progress import BarColumn, Progress, TaskProgressColumn, TextColumn
from rich.table import Table

from bigfiles.deletion.models import DeletionOutcome, DeletionStatus, DeletionSummary
from bigfiles.deletion.pipeline import DeletionPipeline
from bigfiles.scanning.coordinator import ScanCoordinator
from bigfiles.scanning.models import FileRecord, ScanRoot, ScanSummary
from bigfiles.utils.formatting import (
    console,
    create_record_table,
    format_mib,
    format_record_row,
    print_info,
    print_success,
    print_warning,
)

_STATUS_LABELS: dict[DeletionStatus, str] = {
    DeletionStatus.DELETED: "[success]Deleted:[/]",
    DeletionStatus.SKIPPED: "[warning]Skipped:[/]",
    DeletionStatus.FAILED: "[error]Failed:[/]",
}


def _create_progress(description: str) -> tuple[Progress, int]:
    """Create a transient percentage bar that has not been started yet."""
    progress = Progress(
        TextColumn("[info]{task.description}[/]"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
        transient=True,
    )
    task_id = progress.add_task(description, total=100)
    return progress, task_id


def run_scan(
    coordinator: ScanCoordinator,
    mode: ScanRoot,
    *,
    stream: bool = True,
) -> tuple[list[FileRecord], ScanSummary]:
    """Run a scan under a progress bar, printing records as they are found.

    The scan is started before the bar is shown, so an invalid root is
    raised to the caller without any progress output.

    Args:
        coordinator: Coordinator that resolves and walks the roots.
        mode: Which roots to scan.
        stream: Print a line for every record as it is discovered.

    Returns:
        All discovered records, in discovery order, and the scan summary.

    Raises:
        InvalidRootError: If the requested root is not a directory.
    """
    progress, task_id = _create_progress("Scanning")
    session = coordinator.scan(
        mode,
        on_progress=lambda p: progress.update(task_id, completed=p.percent),
    )

    records: list[FileRecord] = []
    with progress:
        for record in session:
            records.append(record)
            if stream:
                progress.console.print(
                    f"[muted]Found:[/] [size]{format_mib(record.size_bytes):>14}[/]  "
                    f"{escape(record.path)}"
                )

    return records, session.summary


def run_deletion(
    pipeline: DeletionPipeline,
    records: Sequence[FileRecord],
    confirm: Callable[[str], bool],
) -> tuple[list[DeletionOutcome], DeletionSummary]:
    """Run a deletion under a progress bar, printing outcomes as they arrive.

    The bar is paused while the confirm callback runs so interactive
    prompts stay readable.

    Args:
        pipeline: Pipeline performing the deletions.
        records: Records to delete, in order.
        confirm: Confirmation callback for gated paths.

    Returns:
        All outcomes in input order and the aggregate summary.
    """
    progress, task_id = _create_progress("Deleting")

    def paused_confirm(path: str) -> bool:
        progress.stop()
        try:
            return confirm(path)
        finally:
            progress.start()

    session = pipeline.delete(
        records,
        paused_confirm,
        on_progress=lambda p: progress.update(task_id, completed=p.percent),
    )

    outcomes: list[DeletionOutcome] = []
    with progress:
        for outcome in session:
            outcomes.append(outcome)
            progress.console.print(format_outcome_line(outcome))

    return outcomes, session.summary


def format_outcome_line(outcome: DeletionOutcome) -> str:
    """Format one outcome as a log line, e.g. "Deleted: /data/big.iso"."""
    line = f"{_STATUS_LABELS[outcome.status]} {escape(outcome.path)}"
    if outcome.detail:
        line += f" [muted]- {escape(outcome.detail)}[/]"
    return line


def create_records_table(
    records: Sequence[FileRecord],
    *,
    title: str = "Large Files",
    numbered: bool = False,
    system_volume: str | None = None,
) -> Table:
    """Create a Rich table listing records.

    Args:
        records: Records to list, in display order.
        title: Table title.
        numbered: Add 1-based row numbers for selection.
        system_volume: Volume to highlight as requiring confirmation.

    Returns:
        Rich Table with one row per record.
    """
    table = create_record_table(title, numbered=numbered)
    for index, record in enumerate(records, start=1):
        row = format_record_row(record, system_volume=system_volume)
        if numbered:
            table.add_row(str(index), *row)
        else:
            table.add_row(*row)
    return table


def print_records_json(records: Sequence[FileRecord]) -> None:
    """Display records as JSON."""
    data = [
        {
            "path": r.path,
            "size_bytes": r.size_bytes,
            "size_mib": round(r.size_mib, 2),
            "volume": r.volume,
        }
        for r in records
    ]
    console.print_json(json.dumps(data))


def print_scan_summary(summary: ScanSummary, threshold_mib: int) -> None:
    """Print the one-line scan summary."""
    console.print(
        f"\n[dim]Scan complete: {summary.records} file(s) of at least {threshold_mib} MiB "
        f"({format_mib(summary.total_bytes)} total) across {summary.roots} root(s)[/dim]"
    )


def create_outcomes_table(outcomes: Sequence[DeletionOutcome]) -> Table:
    """Create a Rich table of deletion outcomes."""
    table = Table(
        title="Deletion Results",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", style="text", overflow="fold")
    table.add_column("Status", width=8)
    table.add_column("Details", style="muted")

    for outcome in outcomes:
        status_style = {
            DeletionStatus.DELETED: "success",
            DeletionStatus.SKIPPED: "warning",
            DeletionStatus.FAILED: "error",
        }[outcome.status]
        table.add_row(
            escape(outcome.path),
            f"[{status_style}]{outcome.status.value}[/]",
            escape(outcome.detail or ""),
        )

    return table


def print_deletion_summary(summary: DeletionSummary) -> None:
    """Print aggregate deleted/skipped/failed counts."""
    counts = f"{summary.deleted} deleted, {summary.skipped} skipped, {summary.failed} failed"
    if summary.failed:
        print_warning(counts)
    elif summary.skipped:
        print_info(counts)
    else:
        print_success(f"All {summary.deleted} file(s) deleted.")
