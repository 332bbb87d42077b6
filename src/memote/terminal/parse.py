# SPDX-License-Identifier: MIT

import datetime
import os
import re
import subprocess
import tempfile
from typing import Optional

import pendulum
import typer

from memote.model.note import NoteId
from memote.repository.note import NoteRepository
from memote.time import datetime_from_str_utc, today_local


def parse_datetime(datetime_param: Optional[str | int]) -> Optional[pendulum.DateTime]:
    if datetime_param is None:
        return None

    datetime = str(datetime_param).strip()

    # Match YYYY-MM-DD format (with optional time component)
    if re.match(r"\d{4}-\d{2}-\d{2}", datetime):
        try:
            return datetime_from_str_utc(datetime)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid datetime: {e}")

    # Match (H)H:mm format (time only, use today's date)
    time_match = re.match(r"^(\d{1,2}):(\d{2})$", datetime)
    if time_match:
        hour = int(time_match.group(1))
        minute = int(time_match.group(2))

        if hour < 0 or hour > 23:
            raise typer.BadParameter(f"Hour must be between 0 and 23, got {hour}")
        if minute < 0 or minute > 59:
            raise typer.BadParameter(f"Minute must be between 0 and 59, got {minute}")

        pendulum_date_time = pendulum.today("local").set(
            hour=hour, minute=minute, second=0, microsecond=0
        )
        return pendulum_date_time.in_tz("UTC")

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", datetime):
        days_offset = int(datetime)
        pendulum_date_time = pendulum.today("local").add(days=days_offset)
        return pendulum_date_time.in_tz("UTC")

    if datetime == "now" or datetime == "n":
        return pendulum.now("UTC")
    if datetime == "today" or datetime == "t":
        return pendulum.today("local").in_tz("UTC")
    if datetime == "yesterday" or datetime == "y":
        return pendulum.yesterday("local").in_tz("UTC")
    if datetime == "tomorrow" or datetime == "o":
        return pendulum.tomorrow("local").in_tz("UTC")
    raise typer.BadParameter("Incorrect datetime format")


def parse_date(date_param: Optional[str]) -> datetime.date:
    """
    Parse a reference day. Accepts the same inputs as ``parse_datetime`` and
    keeps only the local calendar day. ``None`` means today.
    """
    if date_param is None:
        return today_local()

    parsed = parse_datetime(date_param)
    if parsed is None:
        return today_local()
    return parsed.in_tz("local").date()


def resolve_note_id(repository: NoteRepository, id_param: str) -> NoteId:
    """
    Resolve a full note id or a unique prefix of one.

    Raises:
        typer.BadParameter: If the prefix matches more than one note
        typer.Exit: If no note matches
    """
    id_prefix = id_param.strip().lower()
    if id_prefix == "":
        raise typer.BadParameter("Note id cannot be empty")

    matches = [
        note["id"]
        for note in repository.get_all_notes()
        if note["id"].lower().startswith(id_prefix)
    ]
    if len(matches) == 0:
        typer.echo(f"Error: note not found: {id_param}", err=True)
        raise typer.Exit(1)

    exact_matches = [id for id in matches if id.lower() == id_prefix]
    if len(exact_matches) > 0:
        return exact_matches[0]
    if len(matches) > 1:
        raise typer.BadParameter(
            f"Note id '{id_param}' is ambiguous, it matches {len(matches)} notes"
        )
    return matches[0]


def open_editor_for_text(initial_text: Optional[str] = None) -> Optional[str]:
    """
    Open the user's preferred editor to edit note content.
    Returns the edited text with trailing newlines removed, or None if empty.
    """
    editor = os.environ.get("EDITOR", "nano")

    with tempfile.NamedTemporaryFile(mode="w+", suffix=".html") as tf:
        if initial_text is not None:
            tf.write(initial_text)
            tf.flush()

        subprocess.run([editor, tf.name], check=True)
        tf.seek(0)
        text = tf.read()
        if not text.strip():
            return None
        # Remove trailing newlines but preserve internal empty lines
        return text.rstrip("\n")
