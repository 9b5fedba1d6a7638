"""Unit tests for shared display helpers."""

from bigfiles.cli.display import (
    create_outcomes_table,
    create_records_table,
    format_outcome_line,
)
from bigfiles.deletion.models import DeletionOutcome, DeletionStatus
from bigfiles.scanning.models import FileRecord


class TestFormatOutcomeLine:
    """Tests for format_outcome_line function."""

    def test_deleted(self) -> None:
        """Deleted outcomes carry the Deleted label."""
        line = format_outcome_line(DeletionOutcome("/data/a.bin", DeletionStatus.DELETED))

        assert line == "[success]Deleted:[/] /data/a.bin"

    def test_failed_with_detail(self) -> None:
        """Details are appended after the path."""
        line = format_outcome_line(
            DeletionOutcome("/data/a.bin", DeletionStatus.FAILED, "Permission denied")
        )

        assert line.startswith("[error]Failed:[/] /data/a.bin")
        assert line.endswith("- Permission denied[/]")

    def test_skipped(self) -> None:
        """Skipped outcomes carry the Skipped label."""
        line = format_outcome_line(
            DeletionOutcome("/a.bin", DeletionStatus.SKIPPED, "user declined")
        )

        assert line.startswith("[warning]Skipped:[/]")


class TestTables:
    """Tests for table builders."""

    def test_records_table_rows(self) -> None:
        """One row is added per record."""
        records = [
            FileRecord("/a.bin", 100, "/"),
            FileRecord("/b.bin", 200, "/"),
        ]

        table = create_records_table(records, numbered=True)

        assert table.row_count == 2
        assert table.columns[0].header == "#"

    def test_outcomes_table(self) -> None:
        """The outcomes table lists every outcome."""
        outcomes = [
            DeletionOutcome("/a.bin", DeletionStatus.DELETED),
            DeletionOutcome("/b.bin", DeletionStatus.FAILED, "Permission denied"),
        ]

        table = create_outcomes_table(outcomes)

        assert table.title == "Deletion Results"
        assert table.row_count == 2
