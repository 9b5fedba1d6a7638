"""Large file discovery.

This module provides the size filter, the best-effort tree walker,
volume enumeration, and the coordinator that streams records across
one or more scan roots.
"""

from bigfiles.scanning.coordinator import ScanCoordinator, ScanSession
from bigfiles.scanning.filters import DEFAULT_THRESHOLD_BYTES, SizeFilter
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
from bigfiles.scanning.volumes import Volume, list_roots, list_volumes, volume_of
from bigfiles.scanning.walker import TreeWalker

__all__ = [
    "DEFAULT_THRESHOLD_BYTES",
    "AllVolumes",
    "FileRecord",
    "InvalidRootError",
    "ScanCoordinator",
    "ScanProgress",
    "ScanRoot",
    "ScanSession",
    "ScanSummary",
    "SingleVolume",
    "SizeFilter",
    "Subtree",
    "TreeWalker",
    "Volume",
    "list_roots",
    "list_volumes",
    "volume_of",
]
