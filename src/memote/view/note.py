# SPDX-License-Identifier: MIT

import datetime
from typing import Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from memote.model.note import Note
from memote.query.util import strip_markup
from memote.time import (
    date_to_display_str,
    ms_to_display_local_datetime_str,
    ms_to_display_local_datetime_str_optional,
)
from memote.view.header import header
from memote.view.state import get_preview_length
from memote.view.util import format_tags, plain_text_preview, tag_style

NO_NOTES_MESSAGE = "No notes found for the selected date or search query."


def tag_labels(tags: list[str]) -> Text:
    labels = Text()
    for index, tag in enumerate(tags):
        if index > 0:
            labels.append(" ")
        labels.append(f" {tag} ", style=tag_style(tag))
    return labels


def week_strip(
    reference_date: datetime.date, counts: dict[datetime.date, int]
) -> None:
    """One column per day of the week; the reference day is highlighted."""
    week_table = Table(box=box.ROUNDED, show_header=False)
    day_cells = []
    for day in counts:
        week_table.add_column(justify="center")
        label = f"{day.strftime('%a')}\n{day.day}\n{counts[day] or ''}"
        style = "bold black on cyan" if day == reference_date else ""
        day_cells.append(Text(label, style=style))
    week_table.add_row(*day_cells)

    console = Console()
    console.print(week_table)


def notes_report(
    report_name: str,
    notes: list[Note],
    preview_length: Optional[int] = None,
    show_header: bool = True,
) -> None:
    """Note cards: short id, title, last edited, plain-text preview and tags."""
    if show_header:
        header(report_name)

    console = Console()
    if len(notes) == 0:
        console.print(f" {NO_NOTES_MESSAGE}")
        return

    if preview_length is None:
        preview_length = get_preview_length()

    notes_table = Table(box=box.SIMPLE)
    notes_table.add_column("id", no_wrap=True)
    notes_table.add_column("title", style="bold")
    notes_table.add_column("edited", no_wrap=True)
    notes_table.add_column("preview")
    notes_table.add_column("tags")

    for note in notes:
        preview = plain_text_preview(note["content"], preview_length)
        notes_table.add_row(
            note["id"][:8],
            Text(note["title"]),
            ms_to_display_local_datetime_str(note["last_edited"]),
            Text(preview),
            tag_labels(note["tags"]),
        )

    console.print(notes_table)


def single_note_report(note: Note) -> None:
    header("note")

    note_table = Table(box=box.SIMPLE)
    note_table.add_column("property")
    note_table.add_column("value")

    note_table.add_row("id", note["id"])
    note_table.add_row("title", Text(note["title"]))
    note_table.add_row("tags", format_tags(note["tags"]))
    note_table.add_row(
        "reminder",
        ms_to_display_local_datetime_str_optional(note["reminder"]) or "",
    )
    note_table.add_row("created", ms_to_display_local_datetime_str(note["date_created"]))
    note_table.add_row(
        "last edited", ms_to_display_local_datetime_str(note["last_edited"])
    )

    console = Console()
    console.print(note_table)

    text = strip_markup(note["content"])
    if text.strip() != "":
        console.print(Panel(Text(text), title="Content", border_style="blue"))


def day_report_title(reference_date: datetime.date, search_text: str) -> str:
    title = date_to_display_str(reference_date)
    if search_text != "":
        title += f" matching '{search_text}'"
    return title


def welcome_banner() -> None:
    console = Console()
    console.print(
        Panel(
            "Effortlessly capture and organize your thoughts, tasks, and ideas. "
            "Tag notes, set reminders and find them again by day or by search.\n\n"
            "Start with [bold]memote note add --title 'My first note'[/bold], "
            "then browse with [bold]memote list[/bold].",
            title="[dark_orange]Memote[/dark_orange] - Your Personal Note Diary",
            border_style="cyan",
            padding=(1, 2),
        )
    )
