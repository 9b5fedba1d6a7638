"""Unit tests for deletion domain models."""

import pytest
from bigfiles.deletion.models import (
    DeletionOutcome,
    DeletionProgress,
    DeletionStatus,
    DeletionSummary,
)


class TestDeletionStatus:
    """Tests for DeletionStatus enum."""

    def test_values(self) -> None:
        """Statuses serialize to lowercase strings."""
        assert DeletionStatus.DELETED.value == "deleted"
        assert DeletionStatus.SKIPPED.value == "skipped"
        assert DeletionStatus.FAILED.value == "failed"

    def test_is_str(self) -> None:
        """Statuses compare equal to their string values."""
        assert DeletionStatus.FAILED == "failed"


class TestDeletionOutcome:
    """Tests for DeletionOutcome dataclass."""

    def test_deleted_property(self) -> None:
        """Only DELETED outcomes report deleted=True."""
        assert DeletionOutcome("/a", DeletionStatus.DELETED).deleted
        assert not DeletionOutcome("/a", DeletionStatus.SKIPPED, "user declined").deleted
        assert not DeletionOutcome("/a", DeletionStatus.FAILED, "Permission denied").deleted

    def test_detail_defaults_to_none(self) -> None:
        """Plain successes carry no detail."""
        assert DeletionOutcome("/a", DeletionStatus.DELETED).detail is None


class TestDeletionProgress:
    """Tests for DeletionProgress."""

    @pytest.mark.parametrize(
        ("completed", "total", "expected"),
        [(0, 2, 0), (1, 2, 50), (2, 2, 100), (1, 3, 33), (0, 0, 100)],
    )
    def test_percent(self, completed: int, total: int, expected: int) -> None:
        """Percent is floored and an empty request counts as complete."""
        assert DeletionProgress(completed, total).percent == expected

    def test_done(self) -> None:
        """done is True only once every item has an outcome."""
        assert not DeletionProgress(1, 2).done
        assert DeletionProgress(2, 2).done


class TestDeletionSummary:
    """Tests for DeletionSummary aggregation."""

    def test_from_outcomes(self) -> None:
        """Outcomes are counted per status."""
        outcomes = [
            DeletionOutcome("/a", DeletionStatus.DELETED),
            DeletionOutcome("/b", DeletionStatus.DELETED),
            DeletionOutcome("/c", DeletionStatus.SKIPPED, "user declined"),
            DeletionOutcome("/d", DeletionStatus.FAILED, "Permission denied"),
        ]

        summary = DeletionSummary.from_outcomes(outcomes)

        assert summary == DeletionSummary(deleted=2, skipped=1, failed=1)
        assert summary.total == 4

    def test_empty(self) -> None:
        """No outcomes yields an all-zero summary."""
        assert DeletionSummary.from_outcomes([]) == DeletionSummary()
        assert DeletionSummary().total == 0
