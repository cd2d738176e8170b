"""
Face builder – computes the static clock face once from a ClockConfiguration
and paints it onto a RenderSurface.
"""

from __future__ import annotations

from typing import List, Tuple

from ..models.clock_configuration import ClockConfiguration
from ..models.face_geometry import Cover, FaceGeometry, Label, Tick
from .geometry import polar_to_cartesian
from .render_surface import RenderSurface
from .scale import SIXTY, TWELVE, Scale


def _ticks(kind: str, count: int, scale: Scale, start: float, length: float, width: float) -> Tuple[Tick, ...]:
    # Ticks run from the rim towards the centre
    return tuple(
        Tick(kind=kind, index=i, start=start, end=start - length, rotation=scale(i), width=width)
        for i in range(count)
    )


def _labels(kind: str, values: range, scale: Scale, radius: float, y_offset: float) -> Tuple[Label, ...]:
    labels: List[Label] = []
    for v in values:
        x, y = polar_to_cartesian(radius, scale(v), y_offset)
        labels.append(Label(kind=kind, text=str(v), x=x, y=y))
    return tuple(labels)


def build_face(config: ClockConfiguration) -> FaceGeometry:
    """
    Builds the tick marks, numeric labels and centre cover.

    Returns:
        FaceGeometry: 60 second ticks, labels 5..60, 12 hour ticks,
        labels 3/6/9/12 and the cover disk.
    """
    return FaceGeometry(
        second_ticks=_ticks(
            "second-tick", 60, SIXTY, config.second_tick_start, config.second_tick_length, config.second_tick_width
        ),
        second_labels=_labels(
            "second-label", range(5, 61, 5), SIXTY, config.second_label_radius, config.second_label_y_offset
        ),
        hour_ticks=_ticks(
            "hour-tick", 12, TWELVE, config.hour_tick_start, config.hour_tick_length, config.hour_tick_width
        ),
        hour_labels=_labels(
            "hour-label", range(3, 13, 3), TWELVE, config.hour_label_radius, config.hour_label_y_offset
        ),
        cover=Cover(radius=config.cover_radius),
    )


def paint_face(surface: RenderSurface, face: FaceGeometry) -> None:
    """Draws ticks and labels. The cover is painted by the hand animator, above the hands."""
    for tick in face.second_ticks + face.hour_ticks:
        surface.add_line(0, tick.start, 0, tick.end, rotation=tick.rotation, width=tick.width, tags=(tick.kind,))
    for label in face.second_labels + face.hour_labels:
        surface.add_text(label.x, label.y, label.text, tags=(label.kind,))


def paint_cover(surface: RenderSurface, cover: Cover) -> int:
    return surface.add_circle(0, 0, cover.radius, tags=("hands-cover",))
