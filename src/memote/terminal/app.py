# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from memote import configuration
from memote.repository.note import NoteRepository
from memote.repository.storage import FileKeyValueStorage
from memote.terminal import configuration as configuration_commands
from memote.terminal import note
from memote.terminal.custom_typer import OrderedAliasedTyperGroup
from memote.terminal.search import search
from memote.terminal.view import list_notes
from memote.terminal.welcome import welcome
from memote.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="memote - Your personal note diary in the CLI",
    no_args_is_help=True,
)
app.command(name="welcome, w")(welcome)
app.command(name="list, ls")(list_notes)
app.command(name="search, s")(search)
app.add_typer(note.app, name="note, n", help="Create, edit and delete notes")
app.add_typer(configuration_commands.app, name="config, c", help="Settings")


@app.callback()
def main_callback(
    ctx: typer.Context,
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
) -> None:
    """
    memote - Your personal note diary in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)

    # A store handed in by the caller (e.g. tests) takes precedence
    if ctx.obj is None:
        ctx.obj = NoteRepository(FileKeyValueStorage(configuration.DATA_STORAGE_PATH))


def run() -> None:
    app()
