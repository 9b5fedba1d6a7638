"""Best-effort directory tree traversal.

The walker visits every regular file below a root and emits a
FileRecord for each one the SizeFilter accepts. Traversal is
best-effort: an entry that cannot be listed or stat'ed (permission
denied, vanished file, broken link, unplugged device) is logged at
DEBUG level and skipped, and the walk carries on with the rest of the
tree. Callers never see per-entry errors.

Symbolic links are never followed, neither to directories nor to
files, so cyclic or repeated links cannot make a walk run forever or
report the same file twice.
"""

import logging
import os
from collections.abc import Iterable, Iterator

from bigfiles.scanning.filters import SizeFilter
from bigfiles.scanning.models import FileRecord
from bigfiles.scanning.volumes import volume_of

logger = logging.getLogger(__name__)


class TreeWalker:
    """Depth-first walker yielding large files as they are found.

    Args:
        size_filter: Predicate deciding which files are reported.
        volumes: Known volume mount points used to attribute records.
        one_filesystem: Do not descend into directories on another device
            than the root (nested mounts are skipped).
    """

    def __init__(
        self,
        size_filter: SizeFilter,
        *,
        volumes: Iterable[str] = (),
        one_filesystem: bool = False,
    ) -> None:
        self._filter = size_filter
        self._volumes = tuple(volumes)
        self._one_filesystem = one_filesystem

    @property
    def size_filter(self) -> SizeFilter:
        """The filter applied to every regular file."""
        return self._filter

    def walk(self, root: str) -> Iterator[FileRecord]:
        """Traverse root and yield a record for every qualifying file.

        Each call starts a fresh traversal. The generator can be abandoned
        at any point; no state is kept between calls.

        Args:
            root: Directory to traverse.

        Yields:
            FileRecord for each regular file accepted by the size filter.
        """
        root = os.path.abspath(root)
        root_device = self._device_of(root) if self._one_filesystem else None

        pending = [root]
        while pending:
            directory = pending.pop()
            subdirs: list[str] = []

            try:
                with os.scandir(directory) as it:
                    entries = list(it)
            except OSError as e:
                logger.debug("Cannot list %s: %s", directory, e)
                continue

            for entry in entries:
                try:
                    if entry.is_dir(follow_symlinks=False):
                        subdirs.append(entry.path)
                        continue
                    if not entry.is_file(follow_symlinks=False):
                        # Symlinks, sockets, FIFOs and devices
                        continue
                    size = entry.stat(follow_symlinks=False).st_size
                except OSError as e:
                    logger.debug("Cannot read %s: %s", entry.path, e)
                    continue

                if self._filter.includes(size):
                    yield FileRecord(
                        path=entry.path,
                        size_bytes=size,
                        volume=volume_of(entry.path, self._volumes),
                    )

            if root_device is not None:
                subdirs = [d for d in subdirs if self._device_of(d) == root_device]

            # Reversed so siblings are visited in listing order
            pending.extend(reversed(subdirs))

    @staticmethod
    def _device_of(path: str) -> int | None:
        """Return the device id of path without following links."""
        try:
            return os.lstat(path).st_dev
        except OSError as e:
            logger.debug("Cannot stat %s: %s", path, e)
            return None
