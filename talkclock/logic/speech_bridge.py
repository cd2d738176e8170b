"""
SpeechBridge
------------
Thin wrapper around a pyttsx3 engine.

- Voices are enumerated lazily; a missing engine yields no voices instead of
  raising, and ``refresh()`` retries later.
- ``speak()`` is fire-and-forget: utterances are queued to a worker thread,
  which runs the blocking ``runAndWait()`` loop.
"""

from __future__ import annotations

import logging
import queue
import threading
from typing import Any, Callable, List, Optional, Tuple

import pyttsx3

from ..exceptions.errors import SpeechUnavailableError
from ..models.voice import VoiceHandle

logger = logging.getLogger(__name__)

DEFAULT_TEXT = "Say something"

_Utterance = Tuple[str, Optional[str]]


def language_tag(raw: Any) -> str:
    """
    Normalises the language entry reported by a driver.

    espeak reports bytes with a leading length byte (b"\\x05en-us"), other
    drivers report plain strings such as "en_US".
    """
    if isinstance(raw, (bytes, bytearray)):
        raw = bytes(raw).decode("utf-8", errors="ignore")
    text = "".join(ch for ch in str(raw or "") if ch.isprintable()).strip()
    parts = text.replace("_", "-").split("-")
    if len(parts) >= 2 and len(parts[1]) == 2:
        parts[1] = parts[1].upper()
    return "-".join(p for p in parts if p)


def to_voice_handle(voice: Any) -> VoiceHandle:
    languages = list(getattr(voice, "languages", None) or [])
    return VoiceHandle(
        id=str(voice.id),
        name=str(getattr(voice, "name", None) or voice.id),
        language=language_tag(languages[0]) if languages else "",
    )


class SpeechBridge:
    """
    Speech capability used by the clock widget.

    Args:
        engine_factory (Callable[[], Any]): Creates the engine; ``pyttsx3.init``.
        rate (int, optional): Words per minute.
        volume (float, optional): 0.0-1.0.
    """

    def __init__(
        self,
        engine_factory: Callable[[], Any] = pyttsx3.init,
        *,
        rate: Optional[int] = None,
        volume: Optional[float] = None,
    ) -> None:
        self._engine_factory = engine_factory
        self._rate = rate
        self._volume = volume
        self._engine: Any = None
        self._default_voice_id: Optional[str] = None
        self._voices: List[VoiceHandle] = []
        self._pending: List[Callable[[List[VoiceHandle]], None]] = []
        self._queue: "queue.Queue[Optional[_Utterance]]" = queue.Queue()
        self._worker: Optional[threading.Thread] = None
        self._lock = threading.Lock()

    # --- Engine -------------------------------------------------------------

    def _get_engine(self) -> Any:
        if self._engine is None:
            try:
                engine = self._engine_factory()
            except Exception as exc:  # driver missing, no audio backend, ...
                raise SpeechUnavailableError(str(exc)) from exc
            if self._rate is not None:
                engine.setProperty("rate", self._rate)
            if self._volume is not None:
                engine.setProperty("volume", self._volume)
            self._default_voice_id = engine.getProperty("voice")
            self._engine = engine
        return self._engine

    @property
    def available(self) -> bool:
        return self._engine is not None

    # --- Voices -------------------------------------------------------------

    def voices(self) -> List[VoiceHandle]:
        if not self._voices:
            self.refresh()
        return list(self._voices)

    def refresh(self) -> List[VoiceHandle]:
        """Asks the engine for voices again and notifies waiting callbacks."""
        try:
            engine = self._get_engine()
            self._voices = [to_voice_handle(v) for v in (engine.getProperty("voices") or [])]
        except SpeechUnavailableError as exc:
            logger.warning("Speech engine unavailable: %s", exc)
            self._voices = []
        if self._voices and self._pending:
            pending, self._pending = self._pending, []
            for callback in pending:
                try:
                    callback(list(self._voices))
                except Exception:
                    logger.exception("Voices callback %r failed", callback)
        return list(self._voices)

    def when_voices_available(self, callback: Callable[[List[VoiceHandle]], None]) -> None:
        """Calls back now if voices are known, otherwise after a later successful ``refresh()``."""
        if self._voices:
            callback(list(self._voices))
        else:
            self._pending.append(callback)

    def remove_voices_callback(self, callback: Callable[[List[VoiceHandle]], None]) -> None:
        """Forgets a callback registered with ``when_voices_available``; unknown ones are ignored."""
        self._pending = [cb for cb in self._pending if cb != callback]

    def find_voice(self, name: str) -> Optional[VoiceHandle]:
        return next((v for v in self._voices if v.name == name), None)

    # --- Speaking -----------------------------------------------------------

    def speak(self, text: Optional[str] = DEFAULT_TEXT, voice: Optional[VoiceHandle] = None) -> None:
        """Queues ``text``; ``voice=None`` uses the engine's default voice."""
        try:
            self._get_engine()
        except SpeechUnavailableError as exc:
            logger.warning("Dropping utterance, speech engine unavailable: %s", exc)
            return
        self._queue.put((text or DEFAULT_TEXT, voice.id if voice else None))
        self._ensure_worker()

    def shutdown(self, timeout: Optional[float] = None) -> None:
        """Lets the worker finish queued utterances, then joins it."""
        with self._lock:
            worker = self._worker
            if worker is None:
                return
            self._queue.put(None)
        worker.join(timeout)
        with self._lock:
            if self._worker is worker and not worker.is_alive():
                self._worker = None
            elif worker.is_alive():
                logger.warning("Speech worker still busy after %ss", timeout)

    def _ensure_worker(self) -> None:
        with self._lock:
            if self._worker is None or not self._worker.is_alive():
                self._worker = threading.Thread(target=self._run, name="talkclock-speech", daemon=True)
                self._worker.start()

    def _run(self) -> None:
        while True:
            item = self._queue.get()
            if item is None:
                break
            text, voice_id = item
            try:
                self._engine.setProperty("voice", voice_id or self._default_voice_id)
                self._engine.say(text)
                self._engine.runAndWait()
            except Exception:
                logger.exception("Speech playback failed")
        with self._lock:
            if self._worker is threading.current_thread():
                self._worker = None
        # utterances queued behind the stop marker get a fresh worker
        if not self._queue.empty():
            self._ensure_worker()
