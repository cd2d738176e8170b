"""
TkCanvasSurface – RenderSurface on a tk.Canvas.

Rotations are applied by rewriting line coordinates around the face centre.
Animated rotations run on the canvas' own ``after`` loop. Once the canvas is
destroyed every call becomes a no-op.
"""

from __future__ import annotations

import logging
import tkinter as tk
from typing import Dict, Sequence, Tuple

from ..logic.easing import Easing
from ..logic.geometry import rotate_point
from ..logic.render_surface import RenderSurface
from ..logic.transitions import RotationTransitions

logger = logging.getLogger(__name__)


class TkCanvasSurface(RenderSurface):
    """Owns a square canvas and draws with its origin at the centre."""

    def __init__(self, parent: tk.Misc, size: float, *, frame_interval_ms: int = 16, background: str = "white") -> None:
        super().__init__(size)
        edge = int(round(size))
        self.canvas = tk.Canvas(parent, width=edge, height=edge, background=background, highlightthickness=0)
        self._base: Dict[int, Tuple[float, float, float, float]] = {}
        self._rotation: Dict[int, float] = {}
        self._destroyed = False
        self._transitions = RotationTransitions(self.canvas, self.set_rotation, frame_interval_ms=frame_interval_ms)

    @property
    def alive(self) -> bool:
        if self._destroyed:
            return False
        try:
            return bool(self.canvas.winfo_exists())
        except tk.TclError:
            self._destroyed = True
            return False

    def _center(self) -> float:
        return self.size / 2

    def _line_coords(self, item: int) -> Tuple[float, float, float, float]:
        x1, y1, x2, y2 = self._base[item]
        deg = self._rotation.get(item, 0.0)
        c = self._center()
        ax, ay = rotate_point(x1, y1, deg)
        bx, by = rotate_point(x2, y2, deg)
        return c + ax, c + ay, c + bx, c + by

    # --- Primitives ---------------------------------------------------------

    def add_line(self, x1, y1, x2, y2, *, rotation=0.0, width=1.0, fill="black", tags: Sequence[str] = ()) -> int:
        item = self.canvas.create_line(0, 0, 0, 0, width=width, fill=fill, tags=tuple(tags))
        self._base[item] = (x1, y1, x2, y2)
        self._rotation[item] = rotation
        self.canvas.coords(item, *self._line_coords(item))
        return item

    def add_circle(self, cx, cy, r, *, fill="black", tags: Sequence[str] = ()) -> int:
        c = self._center()
        return self.canvas.create_oval(
            c + cx - r, c + cy - r, c + cx + r, c + cy + r, fill=fill, outline=fill, tags=tuple(tags)
        )

    def add_text(self, x, y, text, *, fill="black", tags: Sequence[str] = ()) -> int:
        c = self._center()
        # anchored at the middle of the baseline, like an SVG text-anchor="middle"
        return self.canvas.create_text(c + x, c + y, text=text, fill=fill, anchor="s", tags=tuple(tags))

    def set_rotation(self, item: int, degrees: float) -> None:
        if not self.alive:
            return
        self._rotation[item] = degrees
        try:
            self.canvas.coords(item, *self._line_coords(item))
        except tk.TclError:
            logger.debug("Canvas gone while rotating item %s", item)
            self._destroyed = True

    def rotation_of(self, item: int) -> float:
        return self._rotation.get(item, 0.0)

    # --- Animation ----------------------------------------------------------

    def animate_rotation(self, item: int, degrees: float, *, duration_ms: float, easing: Easing) -> None:
        if not self.alive:
            return
        self._transitions.start(item, self.rotation_of(item), degrees, duration_ms=duration_ms, easing=easing)

    def is_animating(self) -> bool:
        return self._transitions.active

    def cancel_animations(self) -> None:
        self._transitions.cancel_all()

    def destroy(self) -> None:
        self._transitions.cancel_all()
        if not self._destroyed:
            self._destroyed = True
            try:
                self.canvas.destroy()
            except tk.TclError:
                logger.debug("Canvas already destroyed")
        self._base.clear()
        self._rotation.clear()
