# SPDX-License-Identifier: MIT

from typing import Iterable

from memote.model.tag import AVAILABLE_TAGS


def normalize_tags(tags: Iterable[str]) -> list[str]:
    """Copy ``tags`` dropping duplicates; first occurrence wins."""
    return list(dict.fromkeys(tags))


def has_tag(tags: Iterable[str], tag: str) -> bool:
    return tag in tags


def add_tag(tags: Iterable[str], tag: str) -> list[str]:
    return normalize_tags([*tags, tag])


def remove_tag(tags: Iterable[str], tag: str) -> list[str]:
    return [existing for existing in normalize_tags(tags) if existing != tag]


def toggle_tag(tags: Iterable[str], tag: str) -> list[str]:
    current = normalize_tags(tags)
    if tag in current:
        return remove_tag(current, tag)
    return add_tag(current, tag)


def unknown_tags(tags: Iterable[str]) -> list[str]:
    return [tag for tag in normalize_tags(tags) if tag not in AVAILABLE_TAGS]


def same_tags(left: Iterable[str], right: Iterable[str]) -> bool:
    """Tag sets compare by membership only."""
    return set(left) == set(right)
