# SPDX-License-Identifier: MIT

import re
from typing import Any

_MARKUP_TAG = re.compile(r"<[^>]+>")


def strip_markup(markup: Any) -> str:
    """Remove anything within angle brackets. Non-strings yield an empty string."""
    if not isinstance(markup, str):
        return ""
    return _MARKUP_TAG.sub("", markup)
