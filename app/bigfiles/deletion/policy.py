"""Volume policy deciding which deletions need explicit confirmation.

Files on the system volume (the one hosting the operating system) are
gated: the deletion pipeline asks the consumer before touching them.
The gate only decides *whether* to ask; collecting the answer is the
caller's job.
"""

from collections.abc import Iterable
from pathlib import PurePath

from bigfiles.scanning.volumes import volume_of


class PolicyGate:
    """Gate deletions on the system volume behind a confirmation.

    Args:
        system_volume: Mount point of the gated volume (e.g. "/" or "C:\\").
            None disables the gate entirely.
        volumes: Known volume mount points used to resolve a path's volume.
    """

    def __init__(self, system_volume: str | None, *, volumes: Iterable[str] = ()) -> None:
        self._system_volume = system_volume
        self._volumes = tuple(volumes)
        if system_volume is not None and system_volume not in self._volumes:
            self._volumes = (*self._volumes, system_volume)

    @property
    def system_volume(self) -> str | None:
        """The gated volume, or None when the gate is disabled."""
        return self._system_volume

    def volume_of(self, path: str) -> str:
        """Resolve the volume of path against the known volumes."""
        return volume_of(path, self._volumes)

    def requires_confirmation(self, path: str) -> bool:
        """Check whether deleting path needs explicit confirmation.

        Args:
            path: Absolute path of the deletion target.

        Returns:
            True if path lives on the system volume.
        """
        if self._system_volume is None:
            return False
        return PurePath(self.volume_of(path)) == PurePath(self._system_volume)
