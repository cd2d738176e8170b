"""Talkclock feature exceptions."""
from __future__ import annotations


class TalkclockError(Exception):
    """Base exception for the talkclock feature."""


class ClockConfigurationError(TalkclockError, ValueError):
    """Raised when clock geometry or settings violate their invariants."""


class SpeechUnavailableError(TalkclockError):
    """Raised when no text-to-speech engine can be created."""
