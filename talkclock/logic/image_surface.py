"""
ImageSurface – headless RenderSurface backed by Pillow.

Records the drawn primitives and rasterises them on demand, so the face can
be exported as a PNG without a display.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Sequence, Tuple, Union

from PIL import Image, ImageDraw, ImageFont

from .geometry import rotate_point
from .render_surface import RenderSurface

logger = logging.getLogger(__name__)


@dataclass
class _Item:
    kind: str
    coords: Tuple[float, ...]
    fill: str
    width: float = 1.0
    text: str = ""
    rotation: float = 0.0
    tags: Tuple[str, ...] = field(default_factory=tuple)


class ImageSurface(RenderSurface):
    """RenderSurface drawing onto a Pillow image."""

    def __init__(self, size: float, *, background: str = "white") -> None:
        super().__init__(size)
        self._background = background
        self._items: Dict[int, _Item] = {}
        self._next_id = 1
        self._destroyed = False

    @property
    def alive(self) -> bool:
        return not self._destroyed

    # --- Primitives ---------------------------------------------------------

    def _add(self, item: _Item) -> int:
        item_id = self._next_id
        self._next_id += 1
        self._items[item_id] = item
        return item_id

    def add_line(self, x1, y1, x2, y2, *, rotation=0.0, width=1.0, fill="black", tags: Sequence[str] = ()) -> int:
        return self._add(_Item("line", (x1, y1, x2, y2), fill, width=width, rotation=rotation, tags=tuple(tags)))

    def add_circle(self, cx, cy, r, *, fill="black", tags: Sequence[str] = ()) -> int:
        return self._add(_Item("circle", (cx, cy, r), fill, tags=tuple(tags)))

    def add_text(self, x, y, text, *, fill="black", tags: Sequence[str] = ()) -> int:
        return self._add(_Item("text", (x, y), fill, text=text, tags=tuple(tags)))

    def set_rotation(self, item: int, degrees: float) -> None:
        self._items[item].rotation = degrees

    def rotation_of(self, item: int) -> float:
        return self._items[item].rotation

    def destroy(self) -> None:
        self._items.clear()
        self._destroyed = True

    # --- Rasterising --------------------------------------------------------

    def to_image(self) -> Image.Image:
        edge = int(round(self.size))
        c = self.size / 2
        img = Image.new("RGB", (edge, edge), self._background)
        draw = ImageDraw.Draw(img)
        font = ImageFont.load_default()

        for item in self._items.values():
            if item.kind == "line":
                x1, y1, x2, y2 = item.coords
                ax, ay = rotate_point(x1, y1, item.rotation)
                bx, by = rotate_point(x2, y2, item.rotation)
                draw.line([(c + ax, c + ay), (c + bx, c + by)], fill=item.fill, width=max(1, int(round(item.width))))
            elif item.kind == "circle":
                cx, cy, r = item.coords
                draw.ellipse([c + cx - r, c + cy - r, c + cx + r, c + cy + r], fill=item.fill)
            elif item.kind == "text":
                x, y = item.coords
                left, _top, right, bottom = draw.textbbox((0, 0), item.text, font=font)
                # (x, y) is the middle of the baseline
                draw.text((c + x - (right - left) / 2, c + y - bottom), item.text, fill=item.fill, font=font)
        return img

    def save(self, path: Union[str, Path]) -> Path:
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        self.to_image().save(target)
        logger.info("Clock face written to %s", target)
        return target
