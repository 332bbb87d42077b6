# SPDX-License-Identifier: MIT

import uuid
from typing import Optional, TypeAlias, TypedDict

from memote.time import EpochMillis

NoteId: TypeAlias = str


class Note(TypedDict):
    id: NoteId
    title: str
    content: str
    date_created: EpochMillis
    last_edited: EpochMillis
    reminder: Optional[EpochMillis]
    tags: list[str]


class NotePatch(TypedDict, total=False):
    """
    Partial set of note fields for an update.

    An absent key leaves the field untouched, a present key overwrites it,
    so ``{"reminder": None}`` clears a reminder. ``id`` and ``date_created``
    can never be patched.
    """

    title: str
    content: str
    reminder: Optional[EpochMillis]
    tags: list[str]


PATCHABLE_FIELDS = ("title", "content", "reminder", "tags")


def generate_note_id() -> NoteId:
    return str(uuid.uuid4())
