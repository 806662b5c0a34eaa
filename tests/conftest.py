# ABOUTME: Shared test fixtures for the weather page test suite.
# ABOUTME: Provides OpenWeatherMap sample payloads, mock dependency builders, and a fixed local timezone.

import time
from unittest.mock import AsyncMock

import httpx
import pytest

from weather_web.deps import WeatherDeps

GEOCODE_PAYLOAD = [
    {"name": "Austin", "lat": 30.2711, "lon": -97.7437, "country": "US", "state": "Texas"},
    {"name": "Austin", "lat": 43.6666, "lon": -92.9746, "country": "US", "state": "Minnesota"},
]

ONE_CALL_PAYLOAD = {
    "lat": 30.2711,
    "lon": -97.7437,
    "timezone": "America/Chicago",
    "current": {
        "dt": 1718900000,
        "sunrise": 1718883045,
        "sunset": 1718934309,
        "temp": 31.5,
        "humidity": 58,
        "pressure": 1012,
        "visibility": 10000,
        "wind_speed": 4.63,
        "wind_gust": 7.2,
        "weather": [{"id": 802, "main": "Clouds", "description": "scattered clouds", "icon": "03d"}],
    },
}


@pytest.fixture
def geocode_payload():
    return [dict(candidate) for candidate in GEOCODE_PAYLOAD]


@pytest.fixture
def one_call_payload():
    return {**ONE_CALL_PAYLOAD, "current": dict(ONE_CALL_PAYLOAD["current"])}


@pytest.fixture
def make_deps():
    """Build WeatherDeps whose mock client get() yields the given responses or raises the given errors in order."""

    def _make(*responses) -> WeatherDeps:
        mock = AsyncMock(spec=httpx.AsyncClient)
        mock.get.side_effect = list(responses)
        return WeatherDeps(http_client=mock, api_key="test-key")

    return _make


@pytest.fixture
def local_utc_minus_six(monkeypatch):
    """Run the test with the process local timezone fixed at UTC-6 (POSIX TZ, no tz database needed)."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "CST6")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
