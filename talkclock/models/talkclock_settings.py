"""
Data model for Talkclock settings.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class TalkclockSettings:
    """
    Encapsulates all user-configurable options for the talking clock widget.

    Attributes:
        radius (float): Face radius in pixels.
        margin (float): Margin around the face in pixels.
        update_interval_ms (int): Tick period of the hands.
        transition_ms (int): Duration of the elastic hand transition.
        frame_interval_ms (int): Frame cadence while a transition runs.
        elastic_amplitude (float): Overshoot amplitude of the easing curve (>= 1).
        elastic_period (float): Oscillation period of the easing curve.
        phrase_prefix (str): Words spoken before the time ("It is").
        voice_retry_ms (int): Poll cadence while no voices are available.
        speech_rate (int, optional): Words per minute; None keeps the engine default.
        speech_volume (float, optional): 0.0-1.0; None keeps the engine default.
    """
    radius: float = 200.0
    margin: float = 50.0
    update_interval_ms: int = 1000
    transition_ms: int = 250
    frame_interval_ms: int = 16
    elastic_amplitude: float = 1.0
    elastic_period: float = 0.5
    phrase_prefix: str = "It is"
    voice_retry_ms: int = 1000
    speech_rate: Optional[int] = None
    speech_volume: Optional[float] = None

    def effective_transition_ms(self) -> int:
        """
        Returns the transition duration, kept below the tick period so that
        transitions never pile up.
        """
        return max(0, min(self.transition_ms, self.update_interval_ms - 1))
