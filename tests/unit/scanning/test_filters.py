"""Unit tests for SizeFilter."""

import pytest
from bigfiles.scanning.filters import DEFAULT_THRESHOLD_BYTES, SizeFilter


class TestSizeFilter:
    """Tests for the size threshold predicate."""

    def test_default_threshold_is_100_mib(self) -> None:
        """Default threshold is 100 MiB in bytes."""
        assert DEFAULT_THRESHOLD_BYTES == 104857600
        assert SizeFilter().threshold_bytes == 104857600

    def test_includes_exact_threshold(self) -> None:
        """A file exactly at the threshold is included."""
        size_filter = SizeFilter(1000)
        assert size_filter.includes(1000) is True

    def test_excludes_below_threshold(self) -> None:
        """A file one byte below the threshold is excluded."""
        size_filter = SizeFilter(1000)
        assert size_filter.includes(999) is False

    def test_includes_above_threshold(self) -> None:
        """Files above the threshold are included."""
        assert SizeFilter(1000).includes(10**12) is True

    def test_zero_threshold_includes_empty_files(self) -> None:
        """A zero threshold accepts every file, including empty ones."""
        assert SizeFilter(0).includes(0) is True

    def test_negative_threshold_rejected(self) -> None:
        """Negative thresholds are rejected at construction."""
        with pytest.raises(ValueError, match="cannot be negative"):
            SizeFilter(-1)

    def test_immutable(self) -> None:
        """The threshold cannot be changed after construction."""
        size_filter = SizeFilter(1000)
        with pytest.raises(AttributeError):
            size_filter.threshold_bytes = 5  # type: ignore[misc]
