"""
Data model for the geometric constants of the clock face.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

from ..exceptions.errors import ClockConfigurationError


@dataclass(frozen=True)
class ClockConfiguration:
    """
    Immutable geometry of the clock face, in pixels relative to the face centre.

    Attributes:
        radius (float): Face radius.
        margin (float): Space around the face; the surface is
            ``(radius + margin) * 2`` square.
        hour_hand_length (float): Length of the hour hand.
        minute_hand_length (float): Length of the minute hand.
        second_hand_length (float): Length of the second hand.
        second_hand_balance (float): Tail drawn behind the pivot of the second hand.
        second_tick_start (float): Radius at which second ticks start.
        second_tick_length (float): Inward length of second ticks.
        second_tick_width (float): Stroke width of second ticks.
        hour_tick_start (float): Radius at which hour ticks start.
        hour_tick_length (float): Inward length of hour ticks.
        hour_tick_width (float): Stroke width of hour ticks.
        second_label_radius (float): Radius of the 5..60 labels.
        second_label_y_offset (float): Vertical nudge of the 5..60 labels.
        hour_label_radius (float): Radius of the 3/6/9/12 labels.
        hour_label_y_offset (float): Vertical nudge of the 3/6/9/12 labels.
        cover_radius (float): Radius of the disk hiding the hand pivots.
    """
    radius: float = 200.0
    margin: float = 50.0
    hour_hand_length: float = 400.0 / 3
    minute_hand_length: float = 200.0
    second_hand_length: float = 188.0
    second_hand_balance: float = 30.0
    second_tick_start: float = 200.0
    second_tick_length: float = 10.0
    second_tick_width: float = 3.0
    hour_tick_start: float = 200.0
    hour_tick_length: float = 18.0
    hour_tick_width: float = 8.0
    second_label_radius: float = 168.0
    second_label_y_offset: float = 5.0
    hour_label_radius: float = 216.0
    hour_label_y_offset: float = 7.0
    cover_radius: float = 10.0

    def __post_init__(self) -> None:
        for f in fields(self):
            if getattr(self, f.name) <= 0:
                raise ClockConfigurationError(f"{f.name} must be positive, got {getattr(self, f.name)!r}")
        if not self.hour_hand_length < self.minute_hand_length:
            raise ClockConfigurationError("hour hand must be shorter than the minute hand")
        if not self.second_hand_length < self.minute_hand_length:
            raise ClockConfigurationError("second hand must be shorter than the minute hand")

    @classmethod
    def from_radius(cls, radius: float = 200.0, margin: float = 50.0) -> "ClockConfiguration":
        """
        Derives every length from the face radius, using the classic proportions.

        Args:
            radius (float): Face radius in pixels.
            margin (float): Margin around the face in pixels.

        Returns:
            ClockConfiguration: A validated configuration.
        """
        return cls(
            radius=radius,
            margin=margin,
            hour_hand_length=2 * radius / 3,
            minute_hand_length=radius,
            second_hand_length=radius - 12,
            second_hand_balance=30.0,
            second_tick_start=radius,
            second_tick_length=10.0,
            second_tick_width=3.0,
            hour_tick_start=radius,
            hour_tick_length=18.0,
            hour_tick_width=8.0,
            second_label_radius=radius - 32,
            second_label_y_offset=5.0,
            hour_label_radius=radius + 16,
            hour_label_y_offset=7.0,
            cover_radius=radius / 20,
        )

    @property
    def size(self) -> float:
        """Edge length of the square drawing surface."""
        return (self.radius + self.margin) * 2
