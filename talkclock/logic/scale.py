"""
Linear scales mapping clock units to rotation angles.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Scale:
    """Maps ``0..domain_max`` linearly onto ``0..range_max`` degrees."""
    domain_max: float
    range_max: float = 360.0

    def angle_of(self, value: float) -> float:
        # Out-of-range values extrapolate; callers pass wrapped time components.
        return value / self.domain_max * self.range_max

    def __call__(self, value: float) -> float:
        return self.angle_of(value)


TWELVE = Scale(12)
SIXTY = Scale(60)


def angle_of(scale: Scale, value: float) -> float:
    return scale.angle_of(value)
