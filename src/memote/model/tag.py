# SPDX-License-Identifier: MIT


class Tag:
    IMPORTANT = "Important"
    SHOULD_BE_DONE_THIS_WEEK = "Should Be Done This Week"
    TOP_PRIORITY = "Top Priority"
    COMPLETE_NOW = "Complete Now"


AVAILABLE_TAGS: list[str] = [
    Tag.IMPORTANT,
    Tag.SHOULD_BE_DONE_THIS_WEEK,
    Tag.TOP_PRIORITY,
    Tag.COMPLETE_NOW,
]
