"""User configuration for scans and deletions.

Configuration is stored in ~/.config/bigfiles/config.toml. Every key is
optional; a missing file means "use the defaults". Command-line options
override the loaded values for a single run.

Example::

    threshold_mib = 250
    system_volume = "/"
    confirm_system_volume = true
    fallback_timeout_seconds = 30
"""

import logging
import os
import sys
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from bigfiles.core.paths import get_config_path

logger = logging.getLogger(__name__)

MIB = 1024 * 1024

DEFAULT_THRESHOLD_MIB = 100
DEFAULT_FALLBACK_TIMEOUT = 60


def default_system_volume() -> str:
    """Return the volume hosting the operating system on this platform.

    Returns:
        ``%SystemDrive%\\`` on Windows, ``/`` everywhere else.
    """
    if sys.platform == "win32":
        drive = os.environ.get("SystemDrive", "C:")
        return drive.rstrip("\\") + "\\"
    return "/"


class BigfilesConfig(BaseModel):
    """Settings shared by the scan and clean commands.

    Attributes:
        threshold_mib: Minimum size (in MiB) for a file to be reported.
        system_volume: Mount point whose files need explicit confirmation
            before deletion. None selects the platform default.
        confirm_system_volume: Ask before deleting files on the system volume.
        fallback_timeout_seconds: Time limit for the native delete command.
    """

    model_config = ConfigDict(extra="forbid")

    threshold_mib: Annotated[
        int,
        Field(ge=1, description="Minimum file size in MiB"),
    ] = DEFAULT_THRESHOLD_MIB
    system_volume: Annotated[
        str | None,
        Field(description="Volume that requires confirmation (None = platform default)"),
    ] = None
    confirm_system_volume: Annotated[
        bool,
        Field(description="Ask before deleting on the system volume"),
    ] = True
    fallback_timeout_seconds: Annotated[
        int,
        Field(ge=1, le=3600, description="Native delete timeout in seconds (1-3600)"),
    ] = DEFAULT_FALLBACK_TIMEOUT

    @property
    def threshold_bytes(self) -> int:
        """Size threshold converted to bytes."""
        return self.threshold_mib * MIB

    @property
    def effective_system_volume(self) -> str:
        """Configured system volume, or the platform default."""
        if self.system_volume:
            return self.system_volume
        return default_system_volume()


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> BigfilesConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated BigfilesConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return BigfilesConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def get_config(path: Path | None = None) -> BigfilesConfig:
    """Load configuration, falling back to defaults when no file exists.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Loaded configuration, or defaults if the file is missing.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        logger.debug("No config file found, using defaults")
        return BigfilesConfig()


def save_config(config: BigfilesConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The BigfilesConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    data = _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def _config_to_dict(config: BigfilesConfig) -> dict[str, object]:
    """Convert BigfilesConfig to a dictionary for TOML serialization.

    The threshold is always written so a fresh config file documents it;
    other keys only appear when they differ from the defaults.

    Args:
        config: The BigfilesConfig to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    result: dict[str, object] = {"threshold_mib": config.threshold_mib}

    if config.system_volume is not None:
        result["system_volume"] = config.system_volume

    if not config.confirm_system_volume:
        result["confirm_system_volume"] = False

    if config.fallback_timeout_seconds != DEFAULT_FALLBACK_TIMEOUT:
        result["fallback_timeout_seconds"] = config.fallback_timeout_seconds

    return result
