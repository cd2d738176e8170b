"""
Static geometry of the clock face: ticks, labels and the centre cover.

All coordinates are relative to the face centre with y growing downwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Tick:
    """Radial line from ``(0, start)`` to ``(0, end)`` rotated by ``rotation`` degrees."""
    kind: str
    index: int
    start: float
    end: float
    rotation: float
    width: float


@dataclass(frozen=True)
class Label:
    kind: str
    text: str
    x: float
    y: float


@dataclass(frozen=True)
class Cover:
    radius: float


@dataclass(frozen=True)
class FaceGeometry:
    second_ticks: Tuple[Tick, ...]
    second_labels: Tuple[Label, ...]
    hour_ticks: Tuple[Tick, ...]
    hour_labels: Tuple[Label, ...]
    cover: Cover
