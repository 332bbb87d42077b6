# SPDX-License-Identifier: MIT

from typing import Optional

import typer

from memote.model.tag import AVAILABLE_TAGS
from memote.service.tag import unknown_tags

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_title(title: Optional[str]) -> Optional[str]:
    if title is None:
        return None
    if title.strip() == "":
        raise typer.BadParameter("Title cannot be empty.")
    return title


def validate_tags(tags: Optional[list[str]]) -> Optional[list[str]]:
    if tags is None:
        return None
    unknown = unknown_tags(tags)
    if len(unknown) > 0:
        raise typer.BadParameter(
            f"Unknown tag(s): {', '.join(unknown)}. "
            f"Available: {', '.join(AVAILABLE_TAGS)}"
        )
    return tags


def validate_log_level(log_level: Optional[str]) -> Optional[str]:
    if log_level is None:
        return None
    normalized = log_level.upper()
    if normalized not in LOG_LEVELS:
        raise typer.BadParameter(f"Log level must be one of {', '.join(LOG_LEVELS)}")
    return normalized


def validate_preview_length(preview_length: Optional[int]) -> Optional[int]:
    if preview_length is None:
        return None
    if preview_length < 0:
        raise typer.BadParameter("Preview length cannot be negative")
    return preview_length
