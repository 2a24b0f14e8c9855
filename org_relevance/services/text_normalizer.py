"""Text normalization service for entity and topic names.

Handles:
- Case folding
- Punctuation and symbol removal
- Whitespace normalization
- Half-up rounding shared by the scoring steps
"""

import math
import re
from typing import Final

NON_WORD_PATTERN: Final[re.Pattern[str]] = re.compile(r"[^\w\s]|_")
"""Anything that is not a letter, digit or whitespace."""

WHITESPACE_PATTERN: Final[re.Pattern[str]] = re.compile(r"\s+")


def normalize_entity_name(name: str) -> str:
    """Canonicalize an entity/topic name for comparison.

    Args:
        name: Free-text entity or topic name

    Returns:
        Lower-cased name without punctuation and with collapsed whitespace

    Example:
        >>> normalize_entity_name("  Sen. Jane   Doe (D-TN)! ")
        'sen jane doe dtn'
    """
    text = name.lower()
    text = NON_WORD_PATTERN.sub("", text)
    text = WHITESPACE_PATTERN.sub(" ", text)
    return text.strip()


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 going up.

    Python's round() uses banker's rounding (22.5 -> 22); point values are
    specified as half-up (22.5 -> 23).

    Example:
        >>> round_half_up(22.5)
        23
        >>> round_half_up(47.9)
        48
    """
    return math.floor(value + 0.5)
