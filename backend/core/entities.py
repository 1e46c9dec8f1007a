from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class PointResponse:
    """Grid point resolved by ``/points/{lat},{lon}``.

    ``forecast`` is the absolute URL of the forecast for the grid cell. An
    empty string means the upstream has no forecast for the coordinates.
    """

    forecast: str = ""


@dataclass(frozen=True)
class ForecastPeriod:
    """Single forecast window ("Today", "Tonight", ...).

    Temperature is an integer in the upstream unit (Fahrenheit for NWS).
    """

    short_forecast: str = ""
    temperature: int = 0


@dataclass(frozen=True)
class ForecastResponse:
    periods: Tuple[ForecastPeriod, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ForecastOutput:
    """Payload returned by the ``/forecast`` endpoint."""

    forecast: str
    temperature: str


__all__ = ["PointResponse", "ForecastPeriod", "ForecastResponse", "ForecastOutput"]
