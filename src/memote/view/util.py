# SPDX-License-Identifier: MIT

from typing import Optional

from memote.query.util import strip_markup


def format_tags(tags: Optional[list[str]]) -> str:
    """Format a list of tags as a comma-separated string without brackets or quotes."""
    if tags is None or len(tags) == 0:
        return ""
    return ", ".join(tags)


def plain_text_preview(content: str, length: int) -> str:
    text = strip_markup(content)
    if len(text) > length:
        return f"{text[:length]}…"
    return text


def tag_style(tag: str) -> str:
    """Rich style for a tag label, keyed by its slug (``Top Priority`` -> ``top-priority``)."""
    slug = "-".join(tag.lower().split())
    return {
        "important": "bold red",
        "should-be-done-this-week": "yellow",
        "top-priority": "bold magenta",
        "complete-now": "bold white on red",
    }.get(slug, "cyan")
