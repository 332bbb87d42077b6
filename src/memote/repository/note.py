# SPDX-License-Identifier: MIT

import builtins
import json
import logging
import math
from copy import deepcopy
from typing import Any, Callable, Optional

from memote.configuration import NOTES_STORAGE_KEY
from memote.model.note import (
    PATCHABLE_FIELDS,
    Note,
    NoteId,
    NotePatch,
    generate_note_id,
)
from memote.repository.storage import KeyValueStorage
from memote.service.tag import normalize_tags
from memote.time import EpochMillis, now_ms

logger = logging.getLogger(__name__)


class NoteRepository:
    """
    Owns the note collection for a session.

    Every mutation is applied in memory and then the whole collection is
    written back under ``storage_key``. A failed write is logged and the
    in-memory change is kept.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        storage_key: str = NOTES_STORAGE_KEY,
        clock: Callable[[], EpochMillis] = now_ms,
        id_generator: Callable[[], NoteId] = generate_note_id,
    ) -> None:
        self.storage = storage
        self.storage_key = storage_key
        self.clock = clock
        self.id_generator = id_generator
        self._notes: Optional[list[Note]] = None

    @property
    def notes(self) -> builtins.list[Note]:
        if self._notes is None:
            self._notes = self.__load_data()
        return self._notes

    def __load_data(self) -> builtins.list[Note]:
        try:
            stored = self.storage.get_item(self.storage_key)
        except (OSError, ValueError):
            logger.warning(
                "Stored notes under '%s' could not be read, starting empty",
                self.storage_key,
                exc_info=True,
            )
            return []

        if stored is None:
            return []

        try:
            raw_notes = json.loads(stored)
        except ValueError:
            logger.warning(
                "Stored notes under '%s' could not be parsed, starting empty",
                self.storage_key,
                exc_info=True,
            )
            return []

        if not isinstance(raw_notes, list):
            logger.warning(
                "Stored notes under '%s' are not a list, starting empty",
                self.storage_key,
            )
            return []

        notes: list[Note] = []
        seen_ids: set[NoteId] = set()
        for index, raw_note in enumerate(raw_notes):
            note = self.__convert_note_for_deserialization(raw_note)
            if note is None:
                logger.warning("Skipping malformed stored note at index %d", index)
                continue
            if note["id"] in seen_ids:
                logger.warning("Skipping stored note with duplicate id %s", note["id"])
                continue
            seen_ids.add(note["id"])
            notes.append(note)
        return notes

    def __save_data(self, notes: builtins.list[Note]) -> None:
        try:
            serializable_notes = [
                self.__convert_note_for_serialization(note) for note in notes
            ]
            self.storage.set_item(self.storage_key, json.dumps(serializable_notes))
        except (OSError, TypeError, ValueError):
            logger.exception(
                "Failed to save notes under '%s', changes are kept in memory only",
                self.storage_key,
            )

    def __convert_note_for_serialization(self, note: Note) -> dict[str, Any]:
        return {
            "id": note["id"],
            "title": note["title"],
            "content": note["content"],
            "dateCreated": note["date_created"],
            "lastEdited": note["last_edited"],
            "reminder": note["reminder"],
            "tags": list(note["tags"]),
        }

    def __convert_note_for_deserialization(self, note: Any) -> Optional[Note]:
        if not isinstance(note, dict):
            return None

        id = note.get("id")
        title = note.get("title")
        content = note.get("content")
        date_created = _to_millis(note.get("dateCreated"))
        last_edited = _to_millis(note.get("lastEdited"))
        reminder = note.get("reminder")
        tags = note.get("tags")

        if not isinstance(id, str) or not isinstance(title, str):
            return None
        if not isinstance(content, str):
            return None
        if date_created is None or last_edited is None:
            return None
        if reminder is not None:
            reminder = _to_millis(reminder)
            if reminder is None:
                return None
        if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
            return None

        return {
            "id": id,
            "title": title,
            "content": content,
            "date_created": date_created,
            "last_edited": max(last_edited, date_created),
            "reminder": reminder,
            "tags": normalize_tags(tags),
        }

    def create_note(
        self,
        title: str,
        content: str,
        reminder: Optional[EpochMillis],
        tags: builtins.list[str],
    ) -> NoteId:
        now = self.clock()
        note: Note = {
            "id": self.__generate_unique_id(),
            "title": title,
            "content": content,
            "date_created": now,
            "last_edited": now,
            "reminder": reminder,
            "tags": normalize_tags(tags),
        }

        self.notes.insert(0, note)
        self.__save_data(self.notes)

        logger.debug("Created note %s", note["id"])
        return note["id"]

    def update_note(self, id: NoteId, patch: NotePatch) -> None:
        note = self.__find_note(id)
        if note is None:
            logger.debug("Update ignored, no note with id %s", id)
            return

        for field in PATCHABLE_FIELDS:
            if field not in patch:
                continue
            if field == "tags":
                note["tags"] = normalize_tags(patch["tags"])
            else:
                note[field] = deepcopy(patch[field])  # type: ignore[literal-required]

        note["last_edited"] = max(self.clock(), note["date_created"])

        self.__save_data(self.notes)
        logger.debug("Updated note %s", id)

    def delete_note(self, id: NoteId) -> None:
        note = self.__find_note(id)
        if note is None:
            logger.debug("Delete ignored, no note with id %s", id)
            return

        self.notes.remove(note)
        self.__save_data(self.notes)
        logger.debug("Deleted note %s", id)

    def get_all_notes(self) -> builtins.list[Note]:
        return deepcopy(self.notes)

    def get_note(self, id: NoteId) -> Optional[Note]:
        note = self.__find_note(id)
        if note is None:
            return None
        return deepcopy(note)

    def __find_note(self, id: NoteId) -> Optional[Note]:
        return next((note for note in self.notes if note["id"] == id), None)

    def __generate_unique_id(self) -> NoteId:
        id = self.id_generator()
        while self.__find_note(id) is not None:
            id = self.id_generator()
        return id

    # Short names used by views; signatures above spell out builtins.list
    list = get_all_notes
    create = create_note
    update = update_note
    delete = delete_note


def _to_millis(value: Any) -> Optional[EpochMillis]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return int(value)
