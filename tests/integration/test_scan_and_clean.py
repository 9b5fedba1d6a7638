"""Integration tests for the scan-then-delete workflow.

These tests run a real scan over a temporary tree, feed the records to
the deletion pipeline, and check the filesystem afterwards.
"""

from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

import pytest
from bigfiles.cli.main import app
from bigfiles.deletion import DeletionPipeline, DeletionStatus, PolicyGate
from bigfiles.scanning import ScanCoordinator, SizeFilter, Subtree
from typer.testing import CliRunner

runner = CliRunner()

MIB = 1024 * 1024

MakeFile = Callable[[Path, int], Path]


@pytest.fixture
def workspace(tmp_path: Path, make_file: MakeFile) -> Path:
    """A tree mixing large and small files across nested folders."""
    root = tmp_path / "workspace"
    make_file(root / "videos" / "holiday.mkv", 150 * MIB)
    make_file(root / "videos" / "clip.mp4", 50 * MIB)
    make_file(root / "isos" / "distro.iso", 200 * MIB)
    make_file(root / "notes.txt", 1024)
    (root / "isos" / "latest.iso").symlink_to(root / "isos" / "distro.iso")
    return root


class TestScanThenDelete:
    """End-to-end tests using the library API."""

    def test_scan_and_delete_selection(self, workspace: Path) -> None:
        """Only the selected large file is removed."""
        coordinator = ScanCoordinator(SizeFilter(100 * MIB), list_roots=lambda: ["/"])
        session = coordinator.scan(Subtree(str(workspace)))
        records = sorted(session, key=lambda r: r.size_bytes, reverse=True)

        assert [Path(r.path).name for r in records] == ["distro.iso", "holiday.mkv"]
        assert session.summary.total_bytes == 350 * MIB

        gate = PolicyGate(str(workspace / "isos"), volumes=["/"])
        deletion = DeletionPipeline(gate).delete(records, lambda _path: False)
        outcomes = list(deletion)

        assert [o.status for o in outcomes] == [DeletionStatus.SKIPPED, DeletionStatus.DELETED]
        assert (workspace / "isos" / "distro.iso").exists()
        assert not (workspace / "videos" / "holiday.mkv").exists()
        assert (workspace / "videos" / "clip.mp4").exists()

    def test_rescan_after_delete(self, workspace: Path) -> None:
        """A second scan no longer reports deleted files."""
        coordinator = ScanCoordinator(SizeFilter(100 * MIB), list_roots=lambda: ["/"])
        records = list(coordinator.scan(Subtree(str(workspace))))

        list(DeletionPipeline(PolicyGate(None)).delete(records, lambda _path: True))

        assert list(coordinator.scan(Subtree(str(workspace)))) == []
        assert (workspace / "isos" / "latest.iso").is_symlink()


class TestCliWorkflow:
    """End-to-end tests through the command line."""

    @pytest.mark.usefixtures("wide_console")
    def test_clean_workflow(self, workspace: Path) -> None:
        """Scan, select one row, confirm, and delete through the CLI."""
        with patch("bigfiles.cli.commands.clean.list_roots", return_value=["/"]):
            result = runner.invoke(
                app,
                ["clean", "--path", str(workspace), "--on-system", "allow"],
                input="2\ny\n",
            )

        assert result.exit_code == 0
        assert "Found:" in result.output
        assert "200.00 MiB" in result.output
        assert "150.00 MiB" in result.output
        assert "Delete 1 file(s) (150.00 MiB)?" in result.output
        assert "All 1 file(s) deleted." in result.output
        assert not (workspace / "videos" / "holiday.mkv").exists()
        assert (workspace / "isos" / "distro.iso").exists()
