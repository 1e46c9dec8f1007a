"""Chain the NWS point and forecast lookups into a single simplified forecast."""
from __future__ import annotations

import logging
from typing import Optional

from backend.core.classifier import classify_temperature
from backend.core.decoders import decode_forecast, decode_point
from backend.core.entities import ForecastOutput
from backend.core.providers.base import DecodeError, ForecastNotFound
from backend.core.providers.nws import NWSClient


logger = logging.getLogger(__name__)


class ForecastService:
    """Resolve coordinates to the first forecast period and its temperature category."""

    def __init__(self, client: Optional[NWSClient] = None) -> None:
        self.client = client or NWSClient()

    def close(self) -> None:
        """Release the pooled connections held by the HTTP client."""
        self.client.close()

    def __enter__(self) -> "ForecastService":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def get_forecast(self, latitude: str, longitude: str) -> ForecastOutput:
        """Return the simplified forecast for the raw coordinate strings.

        Raises a :class:`~backend.core.providers.base.ForecastError` subclass
        carrying the HTTP status on the first failing step.
        """
        point_response = self.client.fetch(self.client.points_url(latitude, longitude))
        try:
            point = decode_point(point_response.content)
        except DecodeError as exc:
            raise DecodeError("Failed to parse points response") from exc

        if not point.forecast:
            raise ForecastNotFound("Forecast URL not found")

        # the forecast URL is used as returned, it may point to another host
        forecast_response = self.client.fetch(point.forecast)
        try:
            forecast = decode_forecast(forecast_response.content)
        except DecodeError as exc:
            raise DecodeError("Failed to parse forecast response") from exc

        if not forecast.periods:
            raise ForecastNotFound("No forecast periods found")

        first = forecast.periods[0]
        output = ForecastOutput(
            forecast=first.short_forecast,
            temperature=classify_temperature(first.temperature),
        )
        logger.info("Forecast for %s,%s: %s", latitude, longitude, output.temperature)
        return output


__all__ = ["ForecastService"]
