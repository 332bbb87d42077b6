"""Presentation state shared by the report functions."""

# SPDX-License-Identifier: MIT

from contextvars import ContextVar

from memote.configuration import DEFAULT_PREVIEW_LENGTH

# Default is True (show headers)
_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)

_preview_length_var: ContextVar[int] = ContextVar(
    "preview_length", default=DEFAULT_PREVIEW_LENGTH
)


def set_show_header(value: bool) -> None:
    """Set whether headers should be displayed in reports.

    Args:
        value: True to show headers, False to hide them
    """
    _show_header_var.set(value)


def get_show_header() -> bool:
    return _show_header_var.get()


def set_preview_length(value: int) -> None:
    """Set how many characters of plain text a note card preview shows."""
    _preview_length_var.set(value)


def get_preview_length() -> int:
    return _preview_length_var.get()
