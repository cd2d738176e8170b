"""
RotationTransitions
-------------------
Frame scheduler for animated rotations, driven by Tk-style ``after`` timers.

Each item has at most one transition in flight. A new request for the same
item supersedes the running one and starts from the angle currently shown,
so the item always comes to rest on the most recently requested angle.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Protocol

from .easing import Easing
from .geometry import shortest_target

logger = logging.getLogger(__name__)


class Scheduler(Protocol):
    """The subset of ``tk.Misc`` used for timers."""

    def after(self, ms: int, func: Callable[[], None]) -> str: ...

    def after_cancel(self, id: str) -> None: ...


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


@dataclass
class _Transition:
    start: float
    end: float
    started_at: float
    duration_ms: float
    easing: Easing

    def angle_at(self, now: float) -> tuple[float, bool]:
        t = (now - self.started_at) / self.duration_ms
        if t >= 1.0:
            return self.end, True
        return self.start + (self.end - self.start) * self.easing(max(0.0, t)), False


class RotationTransitions:
    """
    Interpolates item rotations frame by frame.

    Args:
        scheduler (Scheduler): Provides ``after``/``after_cancel``.
        apply (Callable[[int, float], None]): Writes a rotation to the item.
        frame_interval_ms (int): Delay between frames.
        clock (Callable[[], float]): Current time in milliseconds.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        apply: Callable[[int, float], None],
        *,
        frame_interval_ms: int = 16,
        clock: Callable[[], float] = _monotonic_ms,
    ) -> None:
        self._scheduler = scheduler
        self._apply = apply
        self._frame_ms = max(1, int(frame_interval_ms))
        self._clock = clock
        self._active: Dict[int, _Transition] = {}
        self._after_id: Optional[str] = None

    @property
    def active(self) -> bool:
        return bool(self._active)

    def start(self, item: int, current: float, target: float, *, duration_ms: float, easing: Easing) -> None:
        """Animates ``item`` from ``current`` to ``target`` degrees, replacing any running transition."""
        end = shortest_target(current, target)
        if duration_ms <= 0:
            self._active.pop(item, None)
            self._apply(item, end % 360.0)
            return
        self._active[item] = _Transition(current, end, self._clock(), float(duration_ms), easing)
        if self._after_id is None:
            self._after_id = self._scheduler.after(self._frame_ms, self._on_frame)

    def cancel_all(self) -> None:
        self._active.clear()
        if self._after_id is not None:
            try:
                self._scheduler.after_cancel(self._after_id)
            except Exception:
                logger.debug("Frame timer already gone", exc_info=True)
            self._after_id = None

    def _on_frame(self) -> None:
        self._after_id = None
        now = self._clock()
        for item, transition in list(self._active.items()):
            angle, done = transition.angle_at(now)
            if done:
                del self._active[item]
                angle %= 360.0
            self._apply(item, angle)
        if self._active:
            self._after_id = self._scheduler.after(self._frame_ms, self._on_frame)
