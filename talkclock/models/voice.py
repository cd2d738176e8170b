from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class VoiceHandle:
    """
    A text-to-speech voice as offered to the user.

    Attributes:
        id (str): Engine specific identifier, passed back to the engine.
        name (str): Display name shown in the voice selector.
        language (str): Language tag such as "en-US"; empty when unknown.
    """
    id: str
    name: str
    language: str = ""
