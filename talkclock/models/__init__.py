"""Data models of the talkclock feature."""

from talkclock.models.clock_configuration import ClockConfiguration
from talkclock.models.face_geometry import Cover, FaceGeometry, Label, Tick
from talkclock.models.phrase_range import DEFAULT_PHRASE_TABLE, PhraseRange
from talkclock.models.talkclock_settings import TalkclockSettings
from talkclock.models.time_sample import TimeSample
from talkclock.models.voice import VoiceHandle

__all__ = [
    "ClockConfiguration",
    "Cover",
    "FaceGeometry",
    "Label",
    "Tick",
    "DEFAULT_PHRASE_TABLE",
    "PhraseRange",
    "TalkclockSettings",
    "TimeSample",
    "VoiceHandle",
]
