"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from bigfiles import __version__
from bigfiles.cli.commands import clean, config, scan, volumes
from bigfiles.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="bigfiles",
    help="Find large files and delete the ones you no longer need.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"bigfiles version {__version__}")
        raise typer.Exit()


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> None:
    """Route bigfiles log records to the stderr console.

    Args:
        verbose: Show debug messages, including skipped unreadable entries.
        quiet: Only show errors.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logger = logging.getLogger("bigfiles")
    logger.setLevel(level)
    # Avoid duplicate handlers when invoked repeatedly (tests, reentry)
    logger.handlers.clear()
    logger.addHandler(RichHandler(console=err_console, show_path=False, markup=False))
    logger.propagate = False


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """bigfiles - find large files and delete the ones you no longer need.

    Scan all mounted volumes, a single volume, or a folder for files above
    a size threshold, then pick which of them to delete.
    """
    configure_logging(verbose=verbose, quiet=quiet)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


# Register commands
app.add_typer(scan.app, name="scan")
app.add_typer(clean.app, name="clean")
app.add_typer(volumes.app, name="volumes")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
