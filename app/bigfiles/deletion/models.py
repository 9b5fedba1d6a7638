"""Deletion domain models.

Defines the per-item outcome of a deletion run together with its
progress and aggregate summary.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from bigfiles.core.progress import percent


class DeletionStatus(str, Enum):
    """Terminal state of one deletion attempt.

    Attributes:
        DELETED: The file no longer exists.
        SKIPPED: The file was left alone because confirmation was declined.
        FAILED: Both removal strategies failed or raised an error.
    """

    DELETED = "deleted"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class DeletionOutcome:
    """Result of processing one selected record.

    Attributes:
        path: Absolute path that was operated on.
        status: Terminal state of the attempt.
        detail: Error message or skip reason, None on plain success.
    """

    path: str
    status: DeletionStatus
    detail: str | None = None

    @property
    def deleted(self) -> bool:
        """Whether the file was removed."""
        return self.status == DeletionStatus.DELETED


@dataclass(frozen=True, slots=True)
class DeletionProgress:
    """Item-granularity deletion progress.

    Attributes:
        completed_items: Items whose outcome has been finalized.
        total_items: Items in the deletion request.
    """

    completed_items: int
    total_items: int

    @property
    def percent(self) -> int:
        """Progress as an integer percentage (0-100)."""
        return percent(self.completed_items, self.total_items)

    @property
    def done(self) -> bool:
        """Whether every item has an outcome."""
        return self.completed_items >= self.total_items


@dataclass(frozen=True, slots=True)
class DeletionSummary:
    """Aggregate counts of a finished deletion run."""

    deleted: int = 0
    skipped: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        """Number of outcomes counted."""
        return self.deleted + self.skipped + self.failed

    @classmethod
    def from_outcomes(cls, outcomes: Iterable[DeletionOutcome]) -> "DeletionSummary":
        """Count outcomes by status."""
        counts = dict.fromkeys(DeletionStatus, 0)
        for outcome in outcomes:
            counts[outcome.status] += 1
        return cls(
            deleted=counts[DeletionStatus.DELETED],
            skipped=counts[DeletionStatus.SKIPPED],
            failed=counts[DeletionStatus.FAILED],
        )
