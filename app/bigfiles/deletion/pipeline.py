"""Sequential deletion of selected records.

Each record is processed in input order:

1. Paths on the gated volume are confirmed through the caller's
   ``confirm`` callback; a refusal yields a SKIPPED outcome and the
   file is not touched.
2. The file is unlinked directly. Success is verified by checking
   that the path is gone.
3. If that fails, the platform's native delete command is run and the
   path is checked again. Gone means DELETED, still there means FAILED.

Errors never escape the pipeline: each one becomes a FAILED outcome
and processing moves on to the next record. Deletions already made
are never rolled back.
"""

import logging
import os
import subprocess
import sys
from collections.abc import Callable, Iterator, Sequence
from pathlib import Path

from bigfiles.deletion.models import (
    DeletionOutcome,
    DeletionProgress,
    DeletionStatus,
    DeletionSummary,
)
from bigfiles.deletion.policy import PolicyGate
from bigfiles.scanning.models import FileRecord
from bigfiles.utils.shell import CommandResult, run_command

logger = logging.getLogger(__name__)

ConfirmCallback = Callable[[str], bool]
FallbackDeleter = Callable[[str], CommandResult]
ProgressCallback = Callable[[DeletionProgress], None]

DECLINED_DETAIL = "user declined"


def native_delete_command(path: str) -> list[str]:
    """Build the platform's native force-delete command for one file.

    Args:
        path: File to delete.

    Returns:
        Argument list suitable for run_command.
    """
    if sys.platform == "win32":
        return ["cmd", "/c", "del", "/f", "/q", path]
    return ["rm", "-f", "--", path]


def _exists(path: str) -> bool:
    """Check whether path is still present, without following links.

    Unlike os.path.lexists, an unreadable parent counts as "present" so
    a permission problem is never mistaken for a successful deletion.
    """
    try:
        os.lstat(path)
    except FileNotFoundError:
        return False
    except (OSError, ValueError):
        return True
    return True


class DeletionSession:
    """One running deletion: a lazy stream of outcomes plus live progress.

    Iterate the session to drive the deletions; one outcome is yielded per
    input record, in input order. ``progress`` is replaced by a new
    snapshot after every outcome.
    """

    def __init__(
        self,
        pipeline: "DeletionPipeline",
        items: Sequence[FileRecord],
        confirm: ConfirmCallback,
        *,
        on_progress: ProgressCallback | None = None,
    ) -> None:
        self.items: tuple[FileRecord, ...] = tuple(items)
        self.progress = DeletionProgress(completed_items=0, total_items=len(self.items))
        self._pipeline = pipeline
        self._confirm = confirm
        self._on_progress = on_progress
        self._summary: DeletionSummary | None = None
        self._outcomes = self._run()

    def __iter__(self) -> Iterator[DeletionOutcome]:
        return self

    def __next__(self) -> DeletionOutcome:
        return next(self._outcomes)

    @property
    def finished(self) -> bool:
        """Whether every item has been processed."""
        return self._summary is not None

    @property
    def summary(self) -> DeletionSummary:
        """Aggregate counts of the finished run.

        Raises:
            RuntimeError: If the outcome stream has not been exhausted yet.
        """
        if self._summary is None:
            msg = "Deletion has not finished; exhaust the session first"
            raise RuntimeError(msg)
        return self._summary

    def _run(self) -> Iterator[DeletionOutcome]:
        outcomes: list[DeletionOutcome] = []
        for record in self.items:
            outcome = self._pipeline.process(record, self._confirm)
            outcomes.append(outcome)
            self.progress = DeletionProgress(
                completed_items=self.progress.completed_items + 1,
                total_items=self.progress.total_items,
            )
            if self._on_progress is not None:
                self._on_progress(self.progress)
            yield outcome

        self._summary = DeletionSummary.from_outcomes(outcomes)
        logger.info(
            "Deletion complete: %d deleted, %d skipped, %d failed",
            self._summary.deleted,
            self._summary.skipped,
            self._summary.failed,
        )


class DeletionPipeline:
    """Deletes selected records with a confirmation gate and a fallback.

    Args:
        gate: Policy deciding which paths need confirmation.
        fallback: Secondary deleter run when direct removal fails. Defaults
            to the platform's native delete command.
        fallback_timeout: Seconds to wait for the native delete command.
    """

    def __init__(
        self,
        gate: PolicyGate,
        *,
        fallback: FallbackDeleter | None = None,
        fallback_timeout: float = 60.0,
    ) -> None:
        self._gate = gate
        self._fallback = fallback or self._native_delete
        self._fallback_timeout = fallback_timeout

    def delete(
        self,
        items: Sequence[FileRecord],
        confirm: ConfirmCallback,
        *,
        on_progress: ProgressCallback | None = None,
    ) -> DeletionSession:
        """Start deleting items.

        Nothing is deleted until the returned session is iterated. The
        confirm callback is invoked synchronously, blocking the run until
        it answers.

        Args:
            items: Records to delete, in the order they should be processed.
            confirm: Asked for every path on the gated volume; False skips it.
            on_progress: Called with a new DeletionProgress after each item.

        Returns:
            DeletionSession streaming one outcome per item.
        """
        return DeletionSession(self, items, confirm, on_progress=on_progress)

    def process(self, record: FileRecord, confirm: ConfirmCallback) -> DeletionOutcome:
        """Delete a single record and report the outcome.

        Args:
            record: Record to delete.
            confirm: Confirmation callback for gated paths.

        Returns:
            DeletionOutcome for this record.
        """
        path = record.path

        if self._gate.requires_confirmation(path) and not confirm(path):
            logger.info("Skipped %s: %s", path, DECLINED_DETAIL)
            return DeletionOutcome(path=path, status=DeletionStatus.SKIPPED, detail=DECLINED_DETAIL)

        try:
            primary_error = self._remove(path)
            if primary_error is None:
                logger.info("Deleted %s", path)
                return DeletionOutcome(path=path, status=DeletionStatus.DELETED)

            logger.debug("Direct removal of %s failed (%s), trying fallback", path, primary_error)
            result = self._fallback(path)
        except (OSError, subprocess.SubprocessError, ValueError) as e:
            return self._settle(path, str(e) or type(e).__name__)

        if result.success:
            detail = f"{primary_error}; file still present after fallback"
        else:
            reason = result.stderr.strip() or f"exit status {result.returncode}"
            detail = f"{primary_error}; fallback failed: {reason}"
        return self._settle(path, detail)

    def _settle(self, path: str, detail: str) -> DeletionOutcome:
        """Decide the outcome once every attempt has been made."""
        if not _exists(path):
            logger.info("Deleted %s (fallback)", path)
            return DeletionOutcome(path=path, status=DeletionStatus.DELETED)

        logger.warning("Failed to delete %s: %s", path, detail)
        return DeletionOutcome(path=path, status=DeletionStatus.FAILED, detail=detail)

    @staticmethod
    def _remove(path: str) -> str | None:
        """Unlink path directly.

        Returns:
            None if the file is gone afterwards, otherwise the reason it is not.
        """
        try:
            Path(path).unlink()
        except FileNotFoundError:
            return None
        except OSError as e:
            return e.strerror or str(e)
        if _exists(path):
            return "file still present after removal"
        return None

    def _native_delete(self, path: str) -> CommandResult:
        """Run the platform's native delete command on path."""
        return run_command(native_delete_command(path), timeout=self._fallback_timeout)
