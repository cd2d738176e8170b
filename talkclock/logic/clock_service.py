"""
ClockService – reads wall-clock time for the hands and the spoken phrase.
Separated from the views so the time source can be replaced in tests.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

from ..models.time_sample import TimeSample


class ClockService:
    """Produces a fresh TimeSample on every read."""

    def __init__(self, now: Optional[Callable[[], datetime]] = None) -> None:
        self._now = now or datetime.now

    def now(self) -> datetime:
        return self._now()

    def sample(self) -> TimeSample:
        return TimeSample.from_datetime(self.now())
