"""Category label cleaning.

Category names are stored with a decorative emoji prefix ("🍔 Food").
Filters and breakdowns compare the cleaned name ("Food").
"""

from __future__ import annotations

import re
from dataclasses import dataclass

DEFAULT_CATEGORY_NAME = "Other"

# Leading emoji glyph, including variation selectors and the space after it
_EMOJI_PREFIX = re.compile(
    "^["
    "\U0001F600-\U0001F64F"
    "\U0001F300-\U0001F5FF"
    "\U0001F680-\U0001F6FF"
    "\U0001F1E0-\U0001F1FF"
    "\u2600-\u26FF"
    "\u2700-\u27BF"
    "\U0001F900-\U0001F9FF"
    "\U0001F018-\U0001F270"
    "\u238C-\u2454"
    "\u20D0-\u20FF"
    "\uFE00-\uFE0F"
    "\U000E0100-\U000E01EF"
    "]+\\s*"
)
_LEADING_SYMBOLS = re.compile(r"^[^\w\s]+\s*")
_ZERO_WIDTH = re.compile("[\u200B-\u200D\uFEFF]")


@dataclass(frozen=True)
class CleanedCategory:
    """Result of cleaning a raw category label."""

    name: str
    raw_name: str
    emoji: str | None = None


def clean_category_name(raw_name: str | None) -> CleanedCategory:
    """Strip the leading emoji and stray symbols from a category label.

    Cleaning an already clean name returns it unchanged; an empty result
    falls back to "Other".
    """
    trimmed = (raw_name or "").strip()

    cleaned = trimmed
    emoji = None
    match = _EMOJI_PREFIX.match(trimmed)
    if match:
        emoji = match.group(0).strip() or None
        cleaned = trimmed[match.end():].strip()

    cleaned = _LEADING_SYMBOLS.sub("", cleaned).strip()
    cleaned = _ZERO_WIDTH.sub("", cleaned).strip()

    return CleanedCategory(
        name=cleaned or DEFAULT_CATEGORY_NAME,
        raw_name=trimmed,
        emoji=emoji,
    )
