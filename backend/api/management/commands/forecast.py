"""Management command to fetch a forecast using the same stack as the API."""
from __future__ import annotations

from dataclasses import asdict
import json
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from backend.api.views import get_forecast_service
from backend.core.providers.base import ForecastError


class Command(BaseCommand):
    help = "Fetch the simplified forecast for the provided coordinates"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--latitude", type=str, help="Latitude, forwarded verbatim")
        parser.add_argument("--longitude", type=str, help="Longitude, forwarded verbatim")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        latitude = options.get("latitude")
        longitude = options.get("longitude")
        if not latitude or not longitude:
            raise CommandError("--latitude and --longitude are required")

        with get_forecast_service() as service:
            try:
                output = service.get_forecast(latitude, longitude)
            except ForecastError as exc:
                raise CommandError(f"{exc} (status {exc.status_code})") from exc

        self.stdout.write(json.dumps(asdict(output)))
