from __future__ import annotations

COLD = "cold"
MODERATE = "moderate"
HOT = "hot"

COLD_MAX = 30
HOT_MIN = 80


def classify_temperature(temperature: int) -> str:
    """Map a temperature to ``cold`` (<= 30), ``hot`` (>= 80) or ``moderate``."""
    if temperature <= COLD_MAX:
        return COLD
    if temperature >= HOT_MIN:
        return HOT
    return MODERATE


__all__ = ["COLD", "MODERATE", "HOT", "classify_temperature"]
