"""Mounted volume enumeration and path-to-volume resolution.

Volumes are identified by their mount point ("/", "/home", "D:\\").
A path belongs to the volume whose mount point is its longest prefix.
"""

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass, replace
from pathlib import PurePath

import psutil

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Volume:
    """A mounted volume as reported by the operating system.

    Attributes:
        mountpoint: Mount point used as the volume identifier.
        device: Backing device name.
        fstype: Filesystem type.
        total_bytes: Capacity in bytes (None if unavailable).
        free_bytes: Free space in bytes (None if unavailable).
    """

    mountpoint: str
    device: str
    fstype: str
    total_bytes: int | None = None
    free_bytes: int | None = None


def _partitions() -> list[Volume]:
    """Return physical partitions, deduplicated by mount point."""
    try:
        partitions = psutil.disk_partitions(all=False)
    except (OSError, RuntimeError) as e:
        logger.warning("Cannot enumerate mounted volumes: %s", e)
        return []

    seen: set[str] = set()
    unique: list[Volume] = []
    for part in partitions:
        if not part.mountpoint or part.mountpoint in seen:
            continue
        seen.add(part.mountpoint)
        unique.append(Volume(mountpoint=part.mountpoint, device=part.device, fstype=part.fstype))
    return unique


def list_roots() -> list[str]:
    """Snapshot the mount points of all currently mounted volumes.

    Falls back to the filesystem root when enumeration yields nothing.

    Returns:
        Mount points in enumeration order.
    """
    roots = [part.mountpoint for part in _partitions()]
    if not roots:
        fallback = os.path.abspath(os.sep)
        logger.debug("No volumes reported, falling back to %s", fallback)
        roots.append(fallback)
    return roots


def list_volumes() -> list[Volume]:
    """Describe all currently mounted volumes, including usage figures.

    Returns:
        Volume descriptions in enumeration order.
    """
    volumes: list[Volume] = []
    for volume in _partitions():
        try:
            usage = psutil.disk_usage(volume.mountpoint)
        except OSError as e:
            logger.debug("Cannot read usage of %s: %s", volume.mountpoint, e)
            volumes.append(volume)
            continue
        volumes.append(replace(volume, total_bytes=usage.total, free_bytes=usage.free))
    return volumes


def volume_of(path: str, volumes: Iterable[str]) -> str:
    """Resolve the volume a path lives on.

    Args:
        path: Absolute path to resolve.
        volumes: Known volume mount points.

    Returns:
        The longest mount point that contains path, or the path's anchor
        (e.g. "/" or "C:\\") when no known volume matches.
    """
    candidate = PurePath(path)
    best: str | None = None
    best_depth = -1
    for volume in volumes:
        mount = PurePath(volume)
        if candidate != mount and mount not in candidate.parents:
            continue
        depth = len(mount.parts)
        if depth > best_depth:
            best, best_depth = volume, depth

    if best is not None:
        return best
    return candidate.anchor
