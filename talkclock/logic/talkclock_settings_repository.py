"""
TalkclockSettingsRepository
---------------------------
Reads Talkclock settings from the [Talkclock] section of config/config.ini.

Strategy:
- Locate config/config.ini (explicit path, env var, upward traversal).
- A missing file or section yields defaults.
- Invalid values raise ClockConfigurationError at startup.
"""

from __future__ import annotations

import configparser
import logging
import os
from pathlib import Path
from typing import Optional, Union

from ..exceptions.errors import ClockConfigurationError
from ..models.talkclock_settings import TalkclockSettings

logger = logging.getLogger(__name__)

ENV_CONFIG_PATH = "TALKCLOCK_CONFIG_PATH"


class TalkclockSettingsRepository:
    """
    Loads TalkclockSettings from the [Talkclock] section.
    """

    SECTION = "Talkclock"

    def __init__(self, config_path: Optional[Union[str, Path]] = None) -> None:
        self.config_path = Path(config_path) if config_path else self._find_config_ini()
        self._config = configparser.ConfigParser()
        self._read()

    # --- Public API ---------------------------------------------------------

    def load(self) -> TalkclockSettings:
        """
        Returns settings loaded from config.ini, or defaults if missing.
        """
        cfg = self._config
        if not cfg.has_section(self.SECTION):
            return TalkclockSettings()

        sec = cfg[self.SECTION]
        d = TalkclockSettings()
        try:
            s = TalkclockSettings(
                radius=sec.getfloat("radius", d.radius),
                margin=sec.getfloat("margin", d.margin),
                update_interval_ms=sec.getint("update_interval_ms", d.update_interval_ms),
                transition_ms=sec.getint("transition_ms", d.transition_ms),
                frame_interval_ms=sec.getint("frame_interval_ms", d.frame_interval_ms),
                elastic_amplitude=sec.getfloat("elastic_amplitude", d.elastic_amplitude),
                elastic_period=sec.getfloat("elastic_period", d.elastic_period),
                phrase_prefix=sec.get("phrase_prefix", d.phrase_prefix),
                voice_retry_ms=sec.getint("voice_retry_ms", d.voice_retry_ms),
                speech_rate=self._optional(sec, "speech_rate", int),
                speech_volume=self._optional(sec, "speech_volume", float),
            )
        except ValueError as exc:
            raise ClockConfigurationError(f"Invalid [{self.SECTION}] value in {self.config_path}: {exc}") from exc

        if min(s.update_interval_ms, s.frame_interval_ms, s.voice_retry_ms) <= 0 or s.elastic_period <= 0:
            raise ClockConfigurationError(
                "update_interval_ms, frame_interval_ms, voice_retry_ms and elastic_period must be positive"
            )
        if s.transition_ms >= s.update_interval_ms:
            logger.warning(
                "transition_ms=%s is not shorter than update_interval_ms=%s, using %s",
                s.transition_ms, s.update_interval_ms, s.effective_transition_ms(),
            )
        return s

    # --- Internal helpers ---------------------------------------------------

    def _read(self) -> None:
        read = self._config.read(self.config_path, encoding="utf-8")
        if not read:
            logger.debug("No config file at %s, using defaults", self.config_path)

    @staticmethod
    def _optional(sec: configparser.SectionProxy, key: str, cast):
        raw = sec.get(key, "").strip()
        return cast(raw) if raw else None

    @staticmethod
    def _find_config_ini() -> Path:
        """
        Tries several strategies to locate config.ini:

        Order:
            1) Env var TALKCLOCK_CONFIG_PATH (file path to config.ini)
            2) Walk upwards from the working directory until a 'config/config.ini' is found
            3) Fallback to './config/config.ini'

        Returns:
            Path: Path to config.ini (not guaranteed to exist).
        """
        env_p = os.environ.get(ENV_CONFIG_PATH)
        if env_p:
            p = Path(env_p).expanduser().resolve()
            if p.is_file():
                return p
            logger.warning("%s points to a missing file: %s", ENV_CONFIG_PATH, p)

        here = Path.cwd().resolve()
        for _ in range(6):
            maybe = here / "config" / "config.ini"
            if maybe.exists():
                return maybe
            if here.parent == here:
                break
            here = here.parent

        return Path.cwd() / "config" / "config.ini"
