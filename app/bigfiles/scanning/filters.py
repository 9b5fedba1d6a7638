"""Size threshold predicate applied to every regular file."""

from dataclasses import dataclass

from bigfiles.core.config import DEFAULT_THRESHOLD_MIB, MIB

DEFAULT_THRESHOLD_BYTES = DEFAULT_THRESHOLD_MIB * MIB


@dataclass(frozen=True, slots=True)
class SizeFilter:
    """Decides whether a file is large enough to report.

    Attributes:
        threshold_bytes: Inclusive lower bound in bytes (default 100 MiB).
    """

    threshold_bytes: int = DEFAULT_THRESHOLD_BYTES

    def __post_init__(self) -> None:
        if self.threshold_bytes < 0:
            msg = f"Threshold cannot be negative, got {self.threshold_bytes}"
            raise ValueError(msg)

    def includes(self, size_bytes: int) -> bool:
        """Return True when size_bytes is at or above the threshold."""
        return size_bytes >= self.threshold_bytes
