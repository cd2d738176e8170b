"""
Talkclock feature package initializer.

Provides factory functions that a main window / feature loader can call to
create the talking clock view without hard-coding internals.

The views are imported lazily so the logic can be used without tkinter.
"""

from typing import Optional

__version__ = "1.0.0"


def get_feature_name() -> str:
    """
    Human readable feature name (used e.g. for navigation labels).

    Returns:
        str: The feature name.
    """
    return "Talking Clock"


def create_feature_view(parent, settings: Optional[object] = None, speech: Optional[object] = None):
    """
    Factory for the main clock view.

    Args:
        parent (tk.Misc): Tk container to mount the widget onto.
        settings (TalkclockSettings, optional): Overrides config.ini.
        speech (SpeechBridge, optional): Shared speech capability.

    Returns:
        ClockWidget: A fully wired clock widget.
    """
    from .gui.clock_widget import ClockWidget

    return ClockWidget(parent, settings=settings, speech=speech)
