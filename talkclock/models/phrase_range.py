"""
Minute ranges and the preposition spoken for them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class PhraseRange:
    """Inclusive range of minute-hand positions mapped to a preposition."""
    min: int
    max: int
    phrase: str

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max


# Ordered; the first matching range wins. Minutes 0 and 30 are not covered.
DEFAULT_PHRASE_TABLE: Tuple[PhraseRange, ...] = (
    PhraseRange(1, 29, "past"),
    PhraseRange(31, 59, "to"),
)
