"""
Phrase translator – turns an hour/minute pair into a colloquial time phrase
such as "It is 25 to 10".

The preposition comes from an ordered table of minute ranges. Past the half
hour the spoken hour already names the coming hour and the minutes are
counted back from it.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

from ..models.phrase_range import DEFAULT_PHRASE_TABLE, PhraseRange

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "It is"


def lookup_preposition(table: Sequence[PhraseRange], minute: int) -> Optional[str]:
    """First phrase whose range contains ``minute``, or None."""
    for entry in table:
        if entry.contains(minute):
            return entry.phrase
    return None


def spoken_hour(hours: int, minutes: int) -> int:
    """
    Hour named in the phrase, 1..12.

    Five minutes are taken off before rounding so that the hour switches at
    half past; halves round up (8:35 -> 9).
    """
    hour = math.floor((hours % 12) + (minutes - 5) / 60 + 0.5)
    return hour if hour > 0 else 12


def spoken_minutes(minutes: int) -> int:
    """Minutes after the hour up to the half, minutes before the next hour after it."""
    return minutes if minutes <= 30 else 60 - minutes


def phrase_for(
    hours: int,
    minutes: int,
    *,
    table: Sequence[PhraseRange] = DEFAULT_PHRASE_TABLE,
    prefix: str = DEFAULT_PREFIX,
) -> str:
    """
    Builds the spoken phrase for a time of day.

    Args:
        hours (int): 0-23 (or 0-12).
        minutes (int): 0-59.
        table (Sequence[PhraseRange]): Ordered minute ranges.
        prefix (str): Leading words, e.g. "It is".

    Returns:
        str: e.g. "It is 5 past 3", "It is half past 9", "It is 12 o'clock".
    """
    hour = spoken_hour(hours, minutes)
    offset = spoken_minutes(minutes)
    preposition = lookup_preposition(table, minutes)
    if preposition is not None:
        return f"{prefix} {offset} {preposition} {hour}"

    # Not covered by the table
    if minutes % 60 == 0:
        return f"{prefix} {hour} o'clock"
    if minutes == 30:
        return f"{prefix} half past {hour}"
    logger.warning("No phrase range covers minute %s, speaking digits", minutes)
    return f"{prefix} {hours % 12 or 12}:{minutes:02d}"
