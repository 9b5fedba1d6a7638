"""Unit tests for the main CLI application."""

import logging

from bigfiles import __version__
from bigfiles.cli.main import app, configure_logging
from typer.testing import CliRunner

runner = CliRunner()


class TestMainApp:
    """Tests for global options."""

    def test_version(self) -> None:
        """--version prints the version and exits."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"bigfiles version {__version__}" in result.stdout

    def test_help_lists_commands(self) -> None:
        """--help lists every command."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for command in ("scan", "clean", "volumes", "config"):
            assert command in result.stdout

    def test_verbose_enables_debug(self) -> None:
        """-v switches bigfiles logging to DEBUG."""
        runner.invoke(app, ["-v", "config", "path"])

        assert logging.getLogger("bigfiles").level == logging.DEBUG


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_default_level(self) -> None:
        """Only warnings and above are shown by default."""
        configure_logging()

        assert logging.getLogger("bigfiles").level == logging.WARNING

    def test_quiet(self) -> None:
        """--quiet shows errors only."""
        configure_logging(quiet=True)

        assert logging.getLogger("bigfiles").level == logging.ERROR

    def test_single_handler(self) -> None:
        """Repeated configuration does not stack handlers."""
        configure_logging()
        configure_logging()

        logger = logging.getLogger("bigfiles")
        assert len(logger.handlers) == 1
        assert logger.propagate is False
