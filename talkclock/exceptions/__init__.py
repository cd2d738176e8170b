"""Exceptions for the talkclock feature."""

from talkclock.exceptions.errors import (
    ClockConfigurationError,
    SpeechUnavailableError,
    TalkclockError,
)

__all__ = [
    "TalkclockError",
    "ClockConfigurationError",
    "SpeechUnavailableError",
]
