"""
Launcher for the talking clock.

    python main.py                 # open a window with the clock
    python main.py --snapshot a.png  # render the current face to a PNG and exit
"""

from __future__ import annotations

import argparse
import logging
import sys

from talkclock import create_feature_view, get_feature_name
from talkclock.exceptions.errors import TalkclockError
from talkclock.logic.clock_service import ClockService
from talkclock.logic.face_builder import build_face, paint_face
from talkclock.logic.hand_animator import HandAnimator
from talkclock.logic.image_surface import ImageSurface
from talkclock.logic.talkclock_settings_repository import TalkclockSettingsRepository
from talkclock.models.clock_configuration import ClockConfiguration
from talkclock.models.talkclock_settings import TalkclockSettings

logger = logging.getLogger("talkclock")


class _NoTimer:
    """Scheduler for one-shot rendering; the recurring tick is never needed."""

    def after(self, ms, func):
        return "snapshot"

    def after_cancel(self, id):
        pass


def render_snapshot(settings: TalkclockSettings, path: str) -> None:
    config = ClockConfiguration.from_radius(settings.radius, settings.margin)
    surface = ImageSurface(config.size)
    face = build_face(config)
    paint_face(surface, face)
    animator = HandAnimator.from_settings(
        surface, _NoTimer(), config, settings, clock=ClockService(), cover=face.cover
    )
    animator.start()
    surface.save(path)


def run_window(settings: TalkclockSettings) -> None:
    import tkinter as tk

    root = tk.Tk()
    root.title(get_feature_name())
    view = create_feature_view(root, settings=settings)
    view.pack(fill="both", expand=True)
    root.mainloop()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Analog clock that tells the time out loud.")
    parser.add_argument("--config", help="Path to config.ini (default: TALKCLOCK_CONFIG_PATH or ./config/config.ini)")
    parser.add_argument("--snapshot", metavar="PNG", help="Write the current clock face to an image and exit")
    parser.add_argument("--radius", type=float, help="Override the face radius")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        settings = TalkclockSettingsRepository(args.config).load()
        if args.radius is not None:
            settings.radius = args.radius
        if args.snapshot:
            render_snapshot(settings, args.snapshot)
        else:
            run_window(settings)
    except TalkclockError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
