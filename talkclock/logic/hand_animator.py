"""
HandAnimator
------------
Owns the hour, minute and second hands and the recurring one-second timer.

Every tick reads the clock once, computes the new hand values and asks the
surface to animate each hand to its new angle with an elastic curve. The
surface keeps only the latest request per hand.

Lifecycle: ``start()`` on mount (one immediate update, then periodic ticks),
``stop()`` on unmount (cancels the timer and in-flight transitions and
destroys the surface). Ticks after ``stop()`` do nothing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from ..models.clock_configuration import ClockConfiguration
from ..models.face_geometry import Cover
from ..models.hand import Hand, HandKind, create_hands
from ..models.talkclock_settings import TalkclockSettings
from ..models.time_sample import TimeSample
from .clock_service import ClockService
from .easing import Easing, elastic_out
from .face_builder import paint_cover
from .render_surface import RenderSurface
from .transitions import Scheduler

logger = logging.getLogger(__name__)


class AnimatorState(str, Enum):
    IDLE = "idle"
    TRANSITIONING = "transitioning"


@dataclass(frozen=True)
class HandTargets:
    hour_value: float
    minute_value: float
    second_value: float

    def value_for(self, kind: HandKind) -> float:
        if kind is HandKind.HOUR:
            return self.hour_value
        if kind is HandKind.MINUTE:
            return self.minute_value
        return self.second_value


def compute_targets(sample: TimeSample) -> HandTargets:
    """The hour hand creeps with the minutes instead of jumping on the hour."""
    return HandTargets(
        hour_value=(sample.hours % 12) + sample.minutes / 60,
        minute_value=float(sample.minutes),
        second_value=float(sample.seconds),
    )


class HandAnimator:
    """
    Drives the hands of one clock face.

    Args:
        surface (RenderSurface): Where the hands are drawn.
        scheduler (Scheduler): Provides ``after``/``after_cancel`` for the tick timer.
        hands (list[Hand]): Hour, minute and second hand.
        clock (ClockService, optional): Time source; defaults to the system clock.
        interval_ms (int): Tick period.
        transition_ms (int): Transition duration, below ``interval_ms``.
        easing (Easing, optional): Transition curve; elastic by default.
        cover (Cover, optional): Centre disk, painted above the hands when they are drawn.
    """

    def __init__(
        self,
        surface: RenderSurface,
        scheduler: Scheduler,
        hands: List[Hand],
        *,
        clock: Optional[ClockService] = None,
        interval_ms: int = 1000,
        transition_ms: int = 250,
        easing: Optional[Easing] = None,
        cover: Optional[Cover] = None,
    ) -> None:
        self._surface = surface
        self._scheduler = scheduler
        self._hands = hands
        self._clock = clock or ClockService()
        self._interval_ms = interval_ms
        self._transition_ms = min(transition_ms, interval_ms - 1)
        self._easing = easing or elastic_out(1.0, 0.5)
        self._cover = cover

        self._items: Dict[HandKind, int] = {}
        self._after_id: Optional[str] = None
        self._running = False

    @classmethod
    def from_settings(
        cls,
        surface: RenderSurface,
        scheduler: Scheduler,
        config: ClockConfiguration,
        settings: TalkclockSettings,
        *,
        clock: Optional[ClockService] = None,
        cover: Optional[Cover] = None,
    ) -> "HandAnimator":
        return cls(
            surface,
            scheduler,
            create_hands(config),
            clock=clock,
            interval_ms=settings.update_interval_ms,
            transition_ms=settings.effective_transition_ms(),
            easing=elastic_out(settings.elastic_amplitude, settings.elastic_period),
            cover=cover,
        )

    # --- Public API ---------------------------------------------------------

    @property
    def hands(self) -> List[Hand]:
        return list(self._hands)

    @property
    def running(self) -> bool:
        return self._running

    @property
    def state(self) -> AnimatorState:
        if self._surface.alive and self._surface.is_animating():
            return AnimatorState.TRANSITIONING
        return AnimatorState.IDLE

    def item_for(self, kind: HandKind) -> Optional[int]:
        return self._items.get(kind)

    def attach(self) -> bool:
        """
        Draws the hands at their current values, then the cover. Safe to call
        repeatedly.

        Returns:
            bool: True when the hands were drawn by this call.
        """
        if self._items or not self._surface.alive:
            return False
        for hand in self._hands:
            self._items[hand.kind] = self._surface.add_line(
                0, hand.balance, 0, hand.length, rotation=hand.angle, width=hand.width, tags=(hand.tag,)
            )
        if self._cover is not None:
            paint_cover(self._surface, self._cover)
        return True

    def start(self) -> None:
        if self._running:
            return
        self.attach()
        self._running = True
        # Place the hands right away instead of showing midnight until the first tick
        self.update(animate=False)
        self._schedule()
        logger.debug("Hand animator started (interval=%sms)", self._interval_ms)

    def stop(self) -> None:
        """Cancels the timer and tears the surface down. Idempotent."""
        self._running = False
        if self._after_id is not None:
            try:
                self._scheduler.after_cancel(self._after_id)
            except Exception:
                logger.debug("Tick timer already gone", exc_info=True)
            self._after_id = None
        if self._surface.alive:
            self._surface.cancel_animations()
            self._surface.destroy()
        self._items.clear()
        logger.debug("Hand animator stopped")

    def update(self, *, animate: bool = True) -> Optional[HandTargets]:
        """
        Reads the clock and moves the hands.

        Returns:
            HandTargets, or None when the update was dropped because the
            animator is stopped or the surface is gone.
        """
        if not self._running or not self._surface.alive:
            logger.debug("Update dropped, surface unavailable")
            return None
        if self.attach():
            # Surface came up late: hands were just drawn at 12, place them
            animate = False
        targets = compute_targets(self._clock.sample())
        for hand in self._hands:
            hand.value = targets.value_for(hand.kind)
            item = self._items[hand.kind]
            if animate:
                self._surface.animate_rotation(
                    item, hand.angle, duration_ms=self._transition_ms, easing=self._easing
                )
            else:
                self._surface.set_rotation(item, hand.angle)
        return targets

    # --- Tick loop ----------------------------------------------------------

    def _schedule(self) -> None:
        self._after_id = self._scheduler.after(self._interval_ms, self._on_tick)

    def _on_tick(self) -> None:
        self._after_id = None
        if not self._running:
            return
        self.update()
        self._schedule()
