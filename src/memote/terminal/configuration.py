# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from memote import configuration
from memote.repository.configuration import CONFIGURATION_REPO
from memote.terminal.custom_typer import AliasedTyperGroup
from memote.terminal.validate import validate_log_level, validate_preview_length

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row(
        "log_level", config.get("log_level", configuration.DEFAULT_LOG_LEVEL)
    )
    table.add_row(
        "preview_length",
        str(config.get("preview_length", configuration.DEFAULT_PREVIEW_LENGTH)),
    )

    console.print(table)


@app.command("set, s")
def set_config(
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="Directory that holds the note storage"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="Go back to the default data directory"),
    ] = False,
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--hide-header", help="Print the memote header"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            callback=validate_log_level,
            help="DEBUG, INFO, WARNING, ERROR or CRITICAL",
        ),
    ] = None,
    preview_length: Annotated[
        Optional[int],
        typer.Option(
            "--preview-length",
            callback=validate_preview_length,
            help="characters of content shown per note in lists",
        ),
    ] = None,
) -> None:
    """Change configuration settings. Data path changes apply from the next run."""
    if data_path is not None and remove_data_path:
        typer.echo("Error: use either --data-path or --remove-data-path", err=True)
        raise typer.Exit(1)

    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        show_header=show_header,
        log_level=log_level,
        preview_length=preview_length,
    )
    CONFIGURATION_REPO.flush()

    view()
