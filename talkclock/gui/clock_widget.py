"""
ClockWidget (Tkinter)
---------------------
Analog clock face with a voice selector and a "Speak" button.

UX notes:
- The hands move once per second with an elastic transition.
- The voice list fills in as soon as the speech engine reports voices.
- "Speak" reads the current time aloud with the selected voice, or the
  engine's default voice when none is selected.
"""

from __future__ import annotations

import logging
import tkinter as tk
from tkinter import ttk
from typing import List, Optional

from ..logic.clock_service import ClockService
from ..logic.face_builder import build_face, paint_face
from ..logic.hand_animator import HandAnimator
from ..logic.speech_bridge import SpeechBridge
from ..logic.talkclock_settings_repository import TalkclockSettingsRepository
from ..logic.time_announcer import announce_time
from ..models.clock_configuration import ClockConfiguration
from ..models.talkclock_settings import TalkclockSettings
from ..models.voice import VoiceHandle
from .canvas_surface import TkCanvasSurface

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en-US"


class ClockWidget(ttk.Frame):
    """
    Talking clock view. Mount this into any container (e.g., a tab or a panel).

    The hands are driven by a HandAnimator on Tk's ``after`` loop; destroying
    the widget stops the animator and removes the canvas.
    """

    def __init__(
        self,
        parent: tk.Misc,
        *,
        settings: Optional[TalkclockSettings] = None,
        speech: Optional[SpeechBridge] = None,
        clock: Optional[ClockService] = None,
    ) -> None:
        """
        Args:
            parent (tk.Misc): Tk parent container.
            settings (TalkclockSettings, optional): Defaults to config.ini / built-in defaults.
            speech (SpeechBridge, optional): Speech capability; a pyttsx3 bridge by default.
            clock (ClockService, optional): Time source; the system clock by default.
        """
        super().__init__(parent)
        self._settings = settings or TalkclockSettingsRepository().load()
        self._speech = speech or SpeechBridge(
            rate=self._settings.speech_rate, volume=self._settings.speech_volume
        )
        self._clock = clock or ClockService()

        # Selected voice; None speaks with the engine default
        self._active_voice: Optional[VoiceHandle] = None
        self._voices: List[VoiceHandle] = []
        self._voice_poll_id: Optional[str] = None

        self._config = ClockConfiguration.from_radius(self._settings.radius, self._settings.margin)
        self._build_ui()

        face = build_face(self._config)
        paint_face(self.surface, face)
        self.animator = HandAnimator.from_settings(
            self.surface, self, self._config, self._settings, clock=self._clock, cover=face.cover
        )
        self.animator.start()

        self._speech.when_voices_available(self._on_voices)
        if not self._voices:
            self._poll_voices()

    # --- Public API ---------------------------------------------------------

    @property
    def active_voice(self) -> Optional[VoiceHandle]:
        return self._active_voice

    def select_voice(self, name: str) -> Optional[VoiceHandle]:
        """Makes the voice called ``name`` active; unknown names are ignored."""
        voice = self._speech.find_voice(name)
        if voice is None:
            return None
        self._active_voice = voice
        self.language_var.set(f"Language: {voice.language or '?'}")
        return voice

    def speak_time(self) -> str:
        return announce_time(
            self._speech, self._active_voice, clock=self._clock, prefix=self._settings.phrase_prefix
        )

    def destroy(self) -> None:
        if self._voice_poll_id is not None:
            try:
                self.after_cancel(self._voice_poll_id)
            except tk.TclError:
                pass
            self._voice_poll_id = None
        self._speech.remove_voices_callback(self._on_voices)
        self.animator.stop()
        super().destroy()

    # --- UI -----------------------------------------------------------------

    def _build_ui(self) -> None:
        self.columnconfigure(0, weight=1)

        self.surface = TkCanvasSurface(self, self._config.size, frame_interval_ms=self._settings.frame_interval_ms)
        self.surface.canvas.grid(row=0, column=0, padx=12, pady=(12, 6))

        self.voice_var = tk.StringVar(value="")
        self.voice_combo = ttk.Combobox(self, textvariable=self.voice_var, state="readonly", values=[])
        self.voice_combo.grid(row=1, column=0, sticky="ew", padx=12, pady=4)
        self.voice_combo.bind("<<ComboboxSelected>>", lambda _e: self.select_voice(self.voice_var.get()))

        self.language_var = tk.StringVar(value=f"Language: {DEFAULT_LANGUAGE}")
        ttk.Label(self, textvariable=self.language_var, anchor="center").grid(
            row=2, column=0, sticky="ew", padx=12, pady=4
        )

        self.speak_btn = ttk.Button(self, text="Speak", command=self.speak_time)
        self.speak_btn.grid(row=3, column=0, pady=(4, 12))

    # --- Voices -------------------------------------------------------------

    def _on_voices(self, voices: List[VoiceHandle]) -> None:
        self._voices = voices
        self.voice_combo.configure(values=[v.name for v in voices])
        logger.debug("%d voices available", len(voices))

    def _poll_voices(self) -> None:
        self._voice_poll_id = None
        if self._speech.refresh():
            return
        self._voice_poll_id = self.after(self._settings.voice_retry_ms, self._poll_voices)
