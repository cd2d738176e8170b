from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TimeSample:
    """Hours, minutes and seconds read from the clock at one instant."""
    hours: int
    minutes: int
    seconds: int

    @classmethod
    def from_datetime(cls, moment: datetime) -> "TimeSample":
        return cls(hours=moment.hour, minutes=moment.minute, seconds=moment.second)
