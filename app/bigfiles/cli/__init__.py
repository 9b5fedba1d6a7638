"""CLI package for bigfiles.

This package contains the Typer application and all subcommands.
"""

from bigfiles.cli.main import app

__all__ = ["app"]
