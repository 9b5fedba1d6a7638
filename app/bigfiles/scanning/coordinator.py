"""Scan orchestration across one or more roots.

ScanCoordinator resolves a ScanRoot into concrete root paths, then
returns a ScanSession: an iterator that walks each root in turn and
yields FileRecords as soon as they are found. Progress is counted per
root, so the percentage only moves when a whole root has been walked.
"""

import logging
import os
from collections.abc import Callable, Iterator, Sequence

from bigfiles.scanning.filters import SizeFilter
from bigfiles.scanning.models import (
    AllVolumes,
    FileRecord,
    InvalidRootError,
    ScanProgress,
    ScanRoot,
    ScanSummary,
    SingleVolume,
    Subtree,
)
from bigfiles.scanning.volumes import list_roots as default_list_roots
from bigfiles.scanning.walker import TreeWalker

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[ScanProgress], None]


class ScanSession:
    """One running scan: a lazy stream of records plus live progress.

    Iterate the session to drive the scan. ``progress`` is replaced by a
    new snapshot each time a root finishes; ``summary`` becomes available
    once the stream is exhausted.

    Args:
        roots: Resolved root paths, walked in order.
        walker: Walker used for every root.
        on_progress: Called with each new progress snapshot.
    """

    def __init__(
        self,
        roots: Sequence[str],
        walker: TreeWalker,
        *,
        on_progress: ProgressCallback | None = None,
    ) -> None:
        self.roots: tuple[str, ...] = tuple(roots)
        self.progress = ScanProgress(completed_roots=0, total_roots=len(self.roots))
        self._walker = walker
        self._on_progress = on_progress
        self._summary: ScanSummary | None = None
        self._records = self._run()

    def __iter__(self) -> Iterator[FileRecord]:
        return self

    def __next__(self) -> FileRecord:
        return next(self._records)

    @property
    def finished(self) -> bool:
        """Whether every root has been walked and the stream is exhausted."""
        return self._summary is not None

    @property
    def summary(self) -> ScanSummary:
        """Summary of the finished scan.

        Raises:
            RuntimeError: If the record stream has not been exhausted yet.
        """
        if self._summary is None:
            msg = "Scan has not finished; exhaust the session first"
            raise RuntimeError(msg)
        return self._summary

    def _run(self) -> Iterator[FileRecord]:
        emitted = 0
        total_bytes = 0

        for root in self.roots:
            logger.debug("Walking %s", root)
            for record in self._walker.walk(root):
                emitted += 1
                total_bytes += record.size_bytes
                yield record

            self.progress = ScanProgress(
                completed_roots=self.progress.completed_roots + 1,
                total_roots=self.progress.total_roots,
            )
            logger.debug(
                "Finished %s (%d/%d roots)",
                root,
                self.progress.completed_roots,
                self.progress.total_roots,
            )
            if self._on_progress is not None:
                self._on_progress(self.progress)

        self._summary = ScanSummary(records=emitted, total_bytes=total_bytes, roots=len(self.roots))
        logger.info("Scan complete: %d files found", emitted)


class ScanCoordinator:
    """Resolves scan roots and starts scan sessions.

    Args:
        size_filter: Threshold applied to every file.
        list_roots: Snapshot function returning mounted volume mount points.
    """

    def __init__(
        self,
        size_filter: SizeFilter | None = None,
        *,
        list_roots: Callable[[], Sequence[str]] = default_list_roots,
    ) -> None:
        self._filter = size_filter or SizeFilter()
        self._list_roots = list_roots

    def resolve(self, mode: ScanRoot) -> list[str]:
        """Resolve a scan mode into concrete root paths.

        Args:
            mode: Which roots to scan.

        Returns:
            Root paths in walk order.

        Raises:
            InvalidRootError: If a single requested root does not exist
                or is not a directory.
        """
        if isinstance(mode, AllVolumes):
            return list(self._list_roots())
        if isinstance(mode, SingleVolume):
            return [self._check_directory(mode.identifier)]
        if isinstance(mode, Subtree):
            return [self._check_directory(mode.path)]

        msg = f"Unsupported scan mode: {mode!r}"
        raise TypeError(msg)

    def scan(self, mode: ScanRoot, *, on_progress: ProgressCallback | None = None) -> ScanSession:
        """Start a scan.

        Roots are resolved immediately, so an invalid root fails here,
        before any traversal begins. Traversal itself only happens while
        the returned session is iterated.

        Args:
            mode: Which roots to scan.
            on_progress: Called with a new ScanProgress after each root.

        Returns:
            ScanSession streaming the discovered records.

        Raises:
            InvalidRootError: If a requested root does not exist or is not
                a directory.
        """
        roots = self.resolve(mode)
        # Volume list is a snapshot taken at scan start
        volumes = self._list_roots() if not isinstance(mode, AllVolumes) else roots
        # Volume scans stay on the volume; nested mounts are separate volumes
        walker = TreeWalker(
            self._filter,
            volumes=volumes,
            one_filesystem=isinstance(mode, (AllVolumes, SingleVolume)),
        )
        logger.debug("Scanning %d root(s): %s", len(roots), ", ".join(roots))
        return ScanSession(roots, walker, on_progress=on_progress)

    @staticmethod
    def _check_directory(path: str) -> str:
        """Validate a requested root and return its absolute form."""
        absolute = os.path.abspath(os.path.expanduser(path))
        if not os.path.exists(absolute):
            raise InvalidRootError(path, "path does not exist")
        if not os.path.isdir(absolute):
            raise InvalidRootError(path, "not a directory")
        return absolute
