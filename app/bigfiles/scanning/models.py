"""Scan domain models.

Defines the scan root selection, the immutable record emitted for each
large file, and the progress/summary values exposed by a scan session.
"""

from dataclasses import dataclass

from bigfiles.core.config import MIB
from bigfiles.core.progress import percent


@dataclass(frozen=True, slots=True)
class AllVolumes:
    """Scan every currently mounted volume."""


@dataclass(frozen=True, slots=True)
class SingleVolume:
    """Scan one mounted volume.

    Attributes:
        identifier: Mount point of the volume (e.g. "/mnt/data" or "D:\\").
    """

    identifier: str


@dataclass(frozen=True, slots=True)
class Subtree:
    """Scan one directory and everything below it.

    Attributes:
        path: Directory to scan.
    """

    path: str


ScanRoot = AllVolumes | SingleVolume | Subtree


class InvalidRootError(Exception):
    """Raised when a requested scan root does not exist or is not a directory."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Invalid scan root {path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass(frozen=True, slots=True)
class FileRecord:
    """A discovered file at or above the size threshold.

    Attributes:
        path: Absolute path of the file.
        size_bytes: File size in bytes.
        volume: Mount point of the volume holding the file.
    """

    path: str
    size_bytes: int
    volume: str

    def __post_init__(self) -> None:
        """Validate record data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)
        if self.size_bytes < 0:
            msg = f"Size cannot be negative, got {self.size_bytes}"
            raise ValueError(msg)

    @property
    def size_mib(self) -> float:
        """Size in MiB."""
        return self.size_bytes / MIB


@dataclass(frozen=True, slots=True)
class ScanProgress:
    """Root-granularity scan progress.

    Attributes:
        completed_roots: Roots whose traversal has finished.
        total_roots: Roots resolved for this scan.
    """

    completed_roots: int
    total_roots: int

    @property
    def percent(self) -> int:
        """Progress as an integer percentage (0-100)."""
        return percent(self.completed_roots, self.total_roots)

    @property
    def done(self) -> bool:
        """Whether every root has been walked."""
        return self.completed_roots >= self.total_roots


@dataclass(frozen=True, slots=True)
class ScanSummary:
    """Terminal summary of a finished scan.

    Attributes:
        records: Number of records emitted.
        total_bytes: Combined size of all emitted records.
        roots: Number of roots walked.
    """

    records: int
    total_bytes: int
    roots: int
