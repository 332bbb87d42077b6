# SPDX-License-Identifier: MIT

from memote.view.header import header
from memote.view.note import welcome_banner


def welcome() -> None:
    """Introduction to memote."""
    header()
    welcome_banner()
