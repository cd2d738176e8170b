# talkclock/models/hand.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List

from ..logic.scale import SIXTY, TWELVE, Scale
from .clock_configuration import ClockConfiguration


class HandKind(str, Enum):
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"


@dataclass
class Hand:
    """
    One rotating hand. ``value`` is kept in the hand's own unit (hours or
    minutes/seconds); ``length`` is negative so the unrotated hand points up
    from the pivot, ``balance`` is the tail drawn below the pivot.
    """
    kind: HandKind
    scale: Scale
    length: float
    balance: float = 0.0
    width: float = 1.0
    value: float = 0.0

    @property
    def angle(self) -> float:
        return self.scale.angle_of(self.value)

    @property
    def tag(self) -> str:
        return f"{self.kind.value}-hand"


def create_hands(config: ClockConfiguration) -> List[Hand]:
    """Hour, minute and second hand, in drawing order."""
    return [
        Hand(HandKind.HOUR, TWELVE, -config.hour_hand_length, width=5.0),
        Hand(HandKind.MINUTE, SIXTY, -config.minute_hand_length, width=3.0),
        Hand(HandKind.SECOND, SIXTY, -config.second_hand_length, balance=config.second_hand_balance, width=1.5),
    ]
