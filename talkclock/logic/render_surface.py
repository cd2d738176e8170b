"""
RenderSurface – the drawing capability consumed by the face builder and the
hand animator. Coordinates are relative to the face centre.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from .easing import Easing


class RenderSurface(ABC):
    """Square drawing surface of edge ``size`` with the origin at its centre."""

    def __init__(self, size: float) -> None:
        self._size = size

    @property
    def size(self) -> float:
        return self._size

    @property
    @abstractmethod
    def alive(self) -> bool:
        """False once the surface has been destroyed or is not attached."""

    @abstractmethod
    def add_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        *,
        rotation: float = 0.0,
        width: float = 1.0,
        fill: str = "black",
        tags: Sequence[str] = (),
    ) -> int: ...

    @abstractmethod
    def add_circle(self, cx: float, cy: float, r: float, *, fill: str = "black", tags: Sequence[str] = ()) -> int: ...

    @abstractmethod
    def add_text(self, x: float, y: float, text: str, *, fill: str = "black", tags: Sequence[str] = ()) -> int: ...

    @abstractmethod
    def set_rotation(self, item: int, degrees: float) -> None: ...

    @abstractmethod
    def rotation_of(self, item: int) -> float: ...

    def animate_rotation(self, item: int, degrees: float, *, duration_ms: float, easing: Easing) -> None:
        """Surfaces without a frame loop jump straight to the target."""
        self.set_rotation(item, degrees)

    def is_animating(self) -> bool:
        return False

    def cancel_animations(self) -> None:
        pass

    @abstractmethod
    def destroy(self) -> None: ...
