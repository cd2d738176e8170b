"""
The "speak the current time" action.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..models.phrase_range import DEFAULT_PHRASE_TABLE, PhraseRange
from ..models.voice import VoiceHandle
from .clock_service import ClockService
from .phrase_translator import DEFAULT_PREFIX, phrase_for
from .speech_bridge import SpeechBridge

logger = logging.getLogger(__name__)


def announce_time(
    speech: SpeechBridge,
    voice: Optional[VoiceHandle] = None,
    *,
    clock: Optional[ClockService] = None,
    prefix: str = DEFAULT_PREFIX,
    table: Sequence[PhraseRange] = DEFAULT_PHRASE_TABLE,
) -> str:
    """Reads the clock once, speaks the phrase with ``voice`` and returns it."""
    sample = (clock or ClockService()).sample()
    phrase = phrase_for(sample.hours, sample.minutes, table=table, prefix=prefix)
    logger.info("Speaking %r (voice=%s)", phrase, voice.name if voice else "default")
    speech.speak(phrase, voice)
    return phrase
