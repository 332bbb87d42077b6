# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from memote.query.filter import search_notes
from memote.terminal.custom_typer import get_note_repository
from memote.view.note import notes_report


def search(
    ctx: typer.Context,
    query: Annotated[str, typer.Argument(help="Search query string")],
) -> None:
    """Notes from any day whose title or content contains the query."""
    repository = get_note_repository(ctx)
    notes = search_notes(repository.get_all_notes(), query)
    notes_report(f"search: {query}", notes)
