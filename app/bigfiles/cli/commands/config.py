"""Config command implementation.

Shows, creates, and locates the bigfiles configuration file.
"""

from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from bigfiles.cli.types import load_settings
from bigfiles.core.config import BigfilesConfig, ConfigError, save_config
from bigfiles.core.paths import get_config_path
from bigfiles.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or create the configuration file.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the effective configuration."""
    config = load_settings()
    config_path = get_config_path()

    table = Table(
        title="Configuration",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Setting", no_wrap=True)
    table.add_column("Value", style="info")

    table.add_row("threshold_mib", str(config.threshold_mib))
    table.add_row("system_volume", escape(config.effective_system_volume))
    table.add_row("confirm_system_volume", str(config.confirm_system_volume).lower())
    table.add_row("fallback_timeout_seconds", str(config.fallback_timeout_seconds))

    console.print(table)
    if config_path.exists():
        console.print(f"[dim]Loaded from {escape(str(config_path))}[/dim]")
    else:
        console.print(f"[dim]Defaults (no file at {escape(str(config_path))})[/dim]")


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing configuration file."),
    ] = False,
) -> None:
    """Write a configuration file with default settings."""
    config_path = get_config_path()
    if config_path.exists() and not force:
        print_info(f"Configuration already exists: {config_path} (use --force to overwrite)")
        raise typer.Exit(code=0)

    try:
        saved = save_config(BigfilesConfig(), config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Configuration written to {saved}")


@app.command()
def path() -> None:
    """Print the configuration file path."""
    typer.echo(str(get_config_path()))
