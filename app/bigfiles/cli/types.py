"""Shared types and helpers for CLI commands.

This module provides the option enums and the scan-root and settings
resolution used by both the scan and clean commands.
"""

from enum import Enum
from pathlib import Path

import typer

from bigfiles.core.config import BigfilesConfig, ConfigError, get_config
from bigfiles.scanning.models import AllVolumes, ScanRoot, SingleVolume, Subtree
from bigfiles.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options for scan results."""

    TABLE = "table"
    JSON = "json"


class SystemPolicy(str, Enum):
    """How to answer confirmations for files on the system volume."""

    ASK = "ask"
    ALLOW = "allow"
    DENY = "deny"


def resolve_scan_root(path: Path | None, volume: str | None) -> ScanRoot:
    """Build the scan root from the --path and --volume options.

    Args:
        path: Directory to scan (folder scan).
        volume: Volume mount point to scan (drive scan).

    Returns:
        Subtree, SingleVolume, or AllVolumes when neither is given.

    Raises:
        typer.Exit: If both a path and a volume are given.
    """
    if path is not None and volume is not None:
        print_error("Give either --path or --volume, not both.")
        raise typer.Exit(code=1)
    if path is not None:
        return Subtree(str(path))
    if volume is not None:
        return SingleVolume(volume)
    return AllVolumes()


def load_settings(
    min_size: int | None = None,
    system_volume: str | None = None,
) -> BigfilesConfig:
    """Load the user configuration and apply command-line overrides.

    Args:
        min_size: Threshold override in MiB.
        system_volume: Gated volume override.

    Returns:
        Effective configuration for this run.

    Raises:
        typer.Exit: If the config file is invalid.
    """
    try:
        config = get_config()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    overrides: dict[str, object] = {}
    if min_size is not None:
        overrides["threshold_mib"] = min_size
    if system_volume is not None:
        overrides["system_volume"] = system_volume
    if overrides:
        config = config.model_copy(update=overrides)
    return config
