"""Decoders for the two NWS payload shapes used by the forecast flow."""
from __future__ import annotations

import json
import logging
from typing import Any, List

from .entities import ForecastPeriod, ForecastResponse, PointResponse
from .providers.base import DecodeError


logger = logging.getLogger(__name__)


def decode_point(content: bytes) -> PointResponse:
    """Decode a ``/points`` payload.

    A missing ``properties.forecast`` is not an error: it decodes to an empty
    URL and the caller decides what that means.
    """
    properties = _properties(_loads(content))
    forecast = properties.get("forecast")
    if forecast is None:
        return PointResponse()
    if not isinstance(forecast, str):
        raise DecodeError("forecast must be a string")
    return PointResponse(forecast=forecast)


def decode_forecast(content: bytes) -> ForecastResponse:
    """Decode a forecast payload into its ordered periods.

    An empty ``periods`` list decodes successfully.
    """
    properties = _properties(_loads(content))
    raw_periods = properties.get("periods")
    if raw_periods is None:
        return ForecastResponse()
    if not isinstance(raw_periods, list):
        raise DecodeError("periods must be a list")
    periods: List[ForecastPeriod] = [_period(item) for item in raw_periods]
    return ForecastResponse(periods=tuple(periods))


# helpers ------------------------------------------------------------
def _loads(content: bytes) -> Any:
    try:
        # invalid UTF-8 sequences become U+FFFD instead of failing the decode
        return json.loads(content.decode("utf-8", errors="replace"))
    except ValueError as exc:
        logger.error("Failed to decode JSON", exc_info=exc)
        raise DecodeError("invalid json") from exc


def _properties(data: Any) -> dict:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DecodeError("payload must be an object")
    properties = data.get("properties")
    if properties is None:
        return {}
    if not isinstance(properties, dict):
        raise DecodeError("properties must be an object")
    return properties


def _period(item: Any) -> ForecastPeriod:
    if not isinstance(item, dict):
        raise DecodeError("period must be an object")
    short_forecast = item.get("shortForecast")
    temperature = item.get("temperature")
    if short_forecast is None:
        short_forecast = ""
    elif not isinstance(short_forecast, str):
        raise DecodeError("shortForecast must be a string")
    if temperature is None:
        temperature = 0
    # bool is an int subclass
    elif isinstance(temperature, bool) or not isinstance(temperature, int):
        raise DecodeError("temperature must be an integer")
    return ForecastPeriod(short_forecast=short_forecast, temperature=temperature)


__all__ = ["decode_point", "decode_forecast"]
