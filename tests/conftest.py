"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

MIB = 1024 * 1024


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory for every test."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def make_file() -> Callable[[Path, int], Path]:
    """Factory creating sparse files of an exact size.

    Sparse files report the requested st_size without using disk space,
    so tests can create "200 MiB" files cheaply.
    """

    def _make(path: Path, size: int) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            f.truncate(size)
        return path

    return _make


@pytest.fixture
def wide_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Widen the shared consoles so long temporary paths are not wrapped."""
    from bigfiles.utils.formatting import console, err_console

    monkeypatch.setattr(console, "width", 400)
    monkeypatch.setattr(err_console, "width", 400)
