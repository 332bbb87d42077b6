# SPDX-License-Identifier: MIT

import datetime

from memote.model.note import Note
from memote.query.util import strip_markup
from memote.time import local_day_bounds_ms


def filter_notes(
    notes: list[Note], reference_date: datetime.date, search_text: str
) -> list[Note]:
    """
    Notes created on the local calendar day of ``reference_date`` whose title
    or markup-stripped content contains ``search_text``, case-insensitively.

    Input order is preserved. An empty ``search_text`` matches every note.
    """
    start_of_day, end_of_day = local_day_bounds_ms(reference_date)
    return [
        note
        for note in notes
        if start_of_day <= note["date_created"] <= end_of_day
        and matches_text(note, search_text)
    ]


def search_notes(notes: list[Note], search_text: str) -> list[Note]:
    return [note for note in notes if matches_text(note, search_text)]


def matches_text(note: Note, search_text: str) -> bool:
    lower_search = search_text.lower()
    if lower_search in note["title"].lower():
        return True
    return lower_search in strip_markup(note["content"]).lower()


def count_notes_by_day(
    notes: list[Note], days: list[datetime.date]
) -> dict[datetime.date, int]:
    counts: dict[datetime.date, int] = {}
    for day in days:
        counts[day] = len(filter_notes(notes, day, ""))
    return counts
