"""Unit tests for scan domain models."""

import pytest
from bigfiles.scanning.models import (
    FileRecord,
    InvalidRootError,
    ScanProgress,
    SingleVolume,
    Subtree,
)


class TestFileRecord:
    """Tests for FileRecord."""

    def test_size_mib(self) -> None:
        """size_mib converts bytes to MiB."""
        record = FileRecord(path="/data/a.iso", size_bytes=157286400, volume="/")
        assert record.size_mib == 150.0

    def test_empty_path_rejected(self) -> None:
        """Records must carry a path."""
        with pytest.raises(ValueError, match="Path cannot be empty"):
            FileRecord(path="", size_bytes=1, volume="/")

    def test_negative_size_rejected(self) -> None:
        """Records cannot have a negative size."""
        with pytest.raises(ValueError, match="cannot be negative"):
            FileRecord(path="/a", size_bytes=-1, volume="/")

    def test_frozen(self) -> None:
        """FileRecord is immutable."""
        record = FileRecord(path="/a", size_bytes=1, volume="/")
        with pytest.raises(AttributeError):
            record.size_bytes = 2  # type: ignore[misc]

    def test_equality_by_value(self) -> None:
        """Records with the same fields compare equal."""
        assert FileRecord("/a", 1, "/") == FileRecord("/a", 1, "/")


class TestScanProgress:
    """Tests for ScanProgress."""

    @pytest.mark.parametrize(
        ("completed", "total", "expected"),
        [(0, 3, 0), (1, 3, 33), (2, 3, 66), (3, 3, 100), (0, 1, 0), (1, 1, 100)],
    )
    def test_percent(self, completed: int, total: int, expected: int) -> None:
        """Percent is floored and reaches 100 only when all roots are done."""
        assert ScanProgress(completed, total).percent == expected

    def test_empty_scan_is_complete(self) -> None:
        """A scan without roots reports 100 percent."""
        progress = ScanProgress(0, 0)
        assert progress.percent == 100
        assert progress.done is True

    def test_done(self) -> None:
        """done is only true once every root finished."""
        assert ScanProgress(1, 2).done is False
        assert ScanProgress(2, 2).done is True


class TestScanRoots:
    """Tests for scan root values."""

    def test_modes_compare_by_value(self) -> None:
        """Scan modes are plain values."""
        assert Subtree("/tmp") == Subtree("/tmp")
        assert SingleVolume("/") != SingleVolume("/home")

    def test_invalid_root_error_message(self) -> None:
        """InvalidRootError carries the path and the reason."""
        error = InvalidRootError("/nope", "path does not exist")
        assert error.path == "/nope"
        assert error.reason == "path does not exist"
        assert "/nope" in str(error)
