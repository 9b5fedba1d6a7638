"""CLI commands for bigfiles.

This package contains all subcommand implementations.
"""

from bigfiles.cli.commands import clean, config, scan, volumes

__all__ = ["clean", "config", "scan", "volumes"]
