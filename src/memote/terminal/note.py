# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from memote.model.note import NotePatch
from memote.repository.note import NoteRepository
from memote.service.tag import add_tag, normalize_tags, remove_tag, toggle_tag
from memote.terminal.completion import complete_tag
from memote.terminal.custom_typer import AliasedTyperGroup, get_note_repository
from memote.terminal.parse import (
    open_editor_for_text,
    parse_datetime,
    resolve_note_id,
)
from memote.terminal.validate import validate_tags, validate_title
from memote.time import datetime_to_ms_optional
from memote.view.note import single_note_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a")
def add(
    ctx: typer.Context,
    title: Annotated[
        str,
        typer.Option("--title", "-t", callback=validate_title, prompt=True),
    ],
    content: Annotated[
        Optional[str],
        typer.Option("--content", "-c", help="note body as markup, e.g. <p>text</p>"),
    ] = None,
    edit: Annotated[
        bool, typer.Option("--edit", "-e", help="Open editor to write the content")
    ] = False,
    reminder: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--reminder",
            "-r",
            parser=parse_datetime,
            help="valid inputs: YYYY-MM-DD [HH:mm], HH:mm, now, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ] = None,
    tags: Annotated[
        Optional[list[str]],
        typer.Option(
            "--tag",
            "-g",
            help="accepts multiple tag options",
            autocompletion=complete_tag,
            callback=validate_tags,
        ),
    ] = None,
) -> None:
    """Create a note."""
    repository = get_note_repository(ctx)

    note_content = content if content is not None else ""
    if edit:
        edited = open_editor_for_text(content)
        if edited is None:
            typer.echo("Note creation cancelled (no content provided)")
            return
        note_content = edited

    id = repository.create_note(
        title,
        note_content,
        datetime_to_ms_optional(reminder),
        tags if tags is not None else [],
    )

    __show_note(repository, id)


@app.command("modify, m", no_args_is_help=True)
def modify(
    ctx: typer.Context,
    id: str,
    title: Annotated[
        Optional[str],
        typer.Option("--title", "-t", callback=validate_title),
    ] = None,
    content: Annotated[Optional[str], typer.Option("--content", "-c")] = None,
    edit_content: Annotated[
        bool, typer.Option("--edit-content", "-e", help="Open editor to modify content")
    ] = False,
    reminder: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--reminder",
            "-r",
            parser=parse_datetime,
            help="valid inputs: YYYY-MM-DD [HH:mm], HH:mm, now, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ] = None,
    remove_reminder: Annotated[
        bool, typer.Option("--remove-reminder", "-rr")
    ] = False,
    toggle_tags: Annotated[
        Optional[list[str]],
        typer.Option(
            "--toggle-tag",
            "-g",
            help="accepts multiple tag options",
            autocompletion=complete_tag,
            callback=validate_tags,
        ),
    ] = None,
    add_tags: Annotated[
        Optional[list[str]],
        typer.Option(
            "--add-tag",
            "-at",
            help="accepts multiple tag options",
            autocompletion=complete_tag,
            callback=validate_tags,
        ),
    ] = None,
    remove_tag_list: Annotated[
        Optional[list[str]],
        typer.Option(
            "--remove-tag",
            "-rmt",
            help="accepts multiple tag options",
            autocompletion=complete_tag,
        ),
    ] = None,
    remove_tags: Annotated[bool, typer.Option("--remove-tags", "-rtgs")] = False,
) -> None:
    """Edit a note. Only the given fields change."""
    repository = get_note_repository(ctx)
    real_id = resolve_note_id(repository, id)
    note = repository.get_note(real_id)
    if note is None:
        typer.echo(f"Error: note not found: {id}", err=True)
        raise typer.Exit(1)

    if reminder is not None and remove_reminder:
        raise typer.BadParameter("Use either --reminder or --remove-reminder")

    patch: NotePatch = {}
    if title is not None:
        patch["title"] = title

    if content is not None:
        patch["content"] = content
    if edit_content:
        edited = open_editor_for_text(patch.get("content", note["content"]))
        if edited is None:
            typer.echo("Content editing cancelled")
        else:
            patch["content"] = edited

    if reminder is not None:
        patch["reminder"] = datetime_to_ms_optional(reminder)
    if remove_reminder:
        patch["reminder"] = None

    # Tag modifications apply in order: clear, add, remove, toggle
    if remove_tags or add_tags or remove_tag_list or toggle_tags:
        updated_tags = [] if remove_tags else normalize_tags(note["tags"])
        for tag in add_tags or []:
            updated_tags = add_tag(updated_tags, tag)
        for tag in remove_tag_list or []:
            updated_tags = remove_tag(updated_tags, tag)
        for tag in toggle_tags or []:
            updated_tags = toggle_tag(updated_tags, tag)
        patch["tags"] = updated_tags

    repository.update_note(real_id, patch)

    __show_note(repository, real_id)


@app.command("delete, d", no_args_is_help=True)
def delete(
    ctx: typer.Context,
    id: str,
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Delete without asking")
    ] = False,
) -> None:
    """Permanently delete a note."""
    repository = get_note_repository(ctx)
    real_id = resolve_note_id(repository, id)

    if not yes:
        confirm = typer.confirm("Permanently delete this note?")
        if not confirm:
            typer.echo("Delete cancelled")
            raise typer.Exit(0)

    repository.delete_note(real_id)
    typer.echo(f"Deleted note {real_id}")


@app.command("show, sh", no_args_is_help=True)
def show(ctx: typer.Context, id: str) -> None:
    repository = get_note_repository(ctx)
    real_id = resolve_note_id(repository, id)
    __show_note(repository, real_id)


def __show_note(repository: NoteRepository, id: str) -> None:
    note = repository.get_note(id)
    if note is None:
        typer.echo(f"Error: note not found: {id}", err=True)
        raise typer.Exit(1)
    single_note_report(note)
