# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from memote.query.filter import count_notes_by_day, filter_notes
from memote.terminal.custom_typer import get_note_repository
from memote.terminal.parse import parse_date
from memote.time import week_dates
from memote.view.header import header
from memote.view.note import day_report_title, notes_report, week_strip


def list_notes(
    ctx: typer.Context,
    date: Annotated[
        Optional[str],
        typer.Option(
            "--date",
            "-d",
            help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ] = None,
    search: Annotated[
        str,
        typer.Option("--search", "-s", help="match title or content text"),
    ] = "",
    no_week: Annotated[
        bool, typer.Option("--no-week", help="Hide the week strip")
    ] = False,
) -> None:
    """Notes created on a day, optionally narrowed by a search query."""
    repository = get_note_repository(ctx)
    reference_date = parse_date(date)

    notes = repository.get_all_notes()

    title = day_report_title(reference_date, search)
    header(title)
    if not no_week:
        week_strip(reference_date, count_notes_by_day(notes, week_dates(reference_date)))

    notes_report(title, filter_notes(notes, reference_date, search), show_header=False)
