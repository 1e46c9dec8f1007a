from __future__ import annotations

from unittest import mock

import pytest
import responses

from backend.core.entities import ForecastOutput
from backend.core.providers.base import DecodeError, ForecastNotFound, UpstreamError
from backend.core.providers.nws import NWSClient
from backend.core.services.forecast_service import ForecastService

from nws_payloads import (
    BASE_URL,
    FORECAST_URL,
    LATITUDE,
    LONGITUDE,
    POINTS_URL,
    forecast_payload,
    point_payload,
)


def make_service() -> ForecastService:
    return ForecastService(client=NWSClient(base_url=BASE_URL))


def test_service_chains_point_and_forecast_lookups():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, POINTS_URL, json=point_payload())
        rsps.add(responses.GET, FORECAST_URL, json=forecast_payload(("Partly Cloudy", 65)))

        output = make_service().get_forecast(LATITUDE, LONGITUDE)

        assert [call.request.url for call in rsps.calls] == [POINTS_URL, FORECAST_URL]

    assert output == ForecastOutput(forecast="Partly Cloudy", temperature="moderate")


def test_service_uses_only_the_first_period():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, POINTS_URL, json=point_payload())
        rsps.add(
            responses.GET,
            FORECAST_URL,
            json=forecast_payload(("Snow", 12), ("Heat Wave", 104), ("Sunny", 70)),
        )

        output = make_service().get_forecast(LATITUDE, LONGITUDE)

    assert output == ForecastOutput(forecast="Snow", temperature="cold")


def test_point_failure_skips_forecast_lookup():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, POINTS_URL, status=404, json={"title": "Not Found"})

        with pytest.raises(UpstreamError) as excinfo:
            make_service().get_forecast(LATITUDE, LONGITUDE)

        assert len(rsps.calls) == 1

    assert excinfo.value.status_code == 404


def test_point_decode_failure_is_generic():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, POINTS_URL, body="<html>maintenance</html>")

        with pytest.raises(DecodeError) as excinfo:
            make_service().get_forecast(LATITUDE, LONGITUDE)

    assert excinfo.value.status_code == 500
    assert str(excinfo.value) == "Failed to parse points response"


def test_missing_forecast_url_is_not_found():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, POINTS_URL, json=point_payload(forecast=None))

        with pytest.raises(ForecastNotFound) as excinfo:
            make_service().get_forecast(LATITUDE, LONGITUDE)

    assert excinfo.value.status_code == 404
    assert str(excinfo.value) == "Forecast URL not found"


def test_forecast_failure_status_is_passed_through():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, POINTS_URL, json=point_payload())
        rsps.add(responses.GET, FORECAST_URL, status=503, body="Service Unavailable")

        with pytest.raises(UpstreamError) as excinfo:
            make_service().get_forecast(LATITUDE, LONGITUDE)

    assert excinfo.value.status_code == 503


def test_forecast_decode_failure_is_generic():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, POINTS_URL, json=point_payload())
        rsps.add(responses.GET, FORECAST_URL, body="{truncated")

        with pytest.raises(DecodeError) as excinfo:
            make_service().get_forecast(LATITUDE, LONGITUDE)

    assert str(excinfo.value) == "Failed to parse forecast response"


def test_empty_periods_is_not_found():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, POINTS_URL, json=point_payload())
        rsps.add(responses.GET, FORECAST_URL, json=forecast_payload())

        with pytest.raises(ForecastNotFound) as excinfo:
            make_service().get_forecast(LATITUDE, LONGITUDE)

    assert str(excinfo.value) == "No forecast periods found"


def test_service_close_releases_client_session():
    client = mock.create_autospec(NWSClient, instance=True)

    with ForecastService(client=client):
        pass

    client.close.assert_called_once_with()
