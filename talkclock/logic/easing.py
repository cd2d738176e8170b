"""
Elastic easing: overshoots the target and settles on it.
"""

from __future__ import annotations

import math
from typing import Callable

Easing = Callable[[float], float]

_TAU = 2 * math.pi


def _tpmt(x: float) -> float:
    # 2^(-10x), rescaled so that it is exactly 1 at x=0 and 0 at x=1
    return (math.pow(2, -10 * x) - 0.0009765625) * 1.0009775171065494


def elastic_out(amplitude: float = 1.0, period: float = 0.3) -> Easing:
    """
    Builds an elastic-out curve.

    Args:
        amplitude (float): Overshoot amplitude; values below 1 are raised to 1.
        period (float): Oscillation period as a fraction of the duration.

    Returns:
        Easing: ``f(t)`` with ``f(0) == 0`` and ``f(1) == 1``.
    """
    a = max(1.0, amplitude)
    p = period / _TAU
    s = math.asin(1 / a) * p

    def ease(t: float) -> float:
        if t <= 0.0:
            return 0.0
        if t >= 1.0:
            return 1.0
        return 1 - a * _tpmt(t) * math.sin((t + s) / p)

    return ease


def linear(t: float) -> float:
    return min(1.0, max(0.0, t))
