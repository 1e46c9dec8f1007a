"""REST API views for the simplified forecast."""
from __future__ import annotations

from dataclasses import asdict
import logging
from typing import Optional

from django.conf import settings
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from backend.core.providers.base import ForecastError, RequestConfig
from backend.core.providers.nws import NWSClient
from backend.core.services.forecast_service import ForecastService


logger = logging.getLogger(__name__)


def get_forecast_service() -> ForecastService:
    """Build a service from settings.

    Each call owns a fresh HTTP session; the caller closes it with the service.
    """
    client = NWSClient(
        base_url=settings.NWS_API_BASE_URL,
        user_agent=settings.NWS_USER_AGENT,
        request_config=RequestConfig(timeout=settings.NWS_REQUEST_TIMEOUT),
    )
    return ForecastService(client=client)


def _first_param(query_params, name: str) -> str:
    # first value wins for repeated parameters
    values = query_params.getlist(name)
    return values[0] if values else ""


class ForecastView(APIView):
    """Return the first forecast period and temperature category for a lat/lon pair."""

    http_method_names = ["get"]
    # Test hook for ``ForecastView.as_view(service=...)``. An injected service is
    # shared by every request and never closed here; requests.Session is not
    # guaranteed thread-safe, so production routing leaves this unset.
    service: Optional[ForecastService] = None

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Return ``{"forecast": ..., "temperature": ...}`` for the coordinates."""
        latitude = _first_param(request.query_params, "latitude")
        longitude = _first_param(request.query_params, "longitude")
        if not latitude or not longitude:
            return Response(
                {"detail": "Missing latitude or longitude parameter"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        if self.service is not None:
            return self._respond(self.service, latitude, longitude)
        with get_forecast_service() as service:
            return self._respond(service, latitude, longitude)

    def _respond(self, service: ForecastService, latitude: str, longitude: str) -> Response:
        try:
            output = service.get_forecast(latitude, longitude)
        except ForecastError as exc:
            logger.warning("Forecast for %s,%s failed with %s: %s", latitude, longitude, exc.status_code, exc)
            return Response({"detail": str(exc)}, status=exc.status_code)
        return Response(asdict(output), status=status.HTTP_200_OK)
