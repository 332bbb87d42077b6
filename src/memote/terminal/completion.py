# SPDX-License-Identifier: MIT

from memote.model.tag import AVAILABLE_TAGS


def complete_tag(incomplete: str) -> list[str]:
    """Return list of available tags for shell completion."""
    return [tag for tag in AVAILABLE_TAGS if tag.lower().startswith(incomplete.lower())]
