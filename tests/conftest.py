from __future__ import annotations

import pytest

from nws_payloads import POINTS_URL, point_payload


@pytest.fixture
def nws_upstream(requests_mock):
    """Register a successful points lookup; the forecast response is left to the test."""
    requests_mock.get(POINTS_URL, json=point_payload())
    return requests_mock
