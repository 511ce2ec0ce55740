# ABOUTME: Shared test fixtures for the weather session test suite.
# ABOUTME: Provides WeatherAPI.com payloads and a mock weather data port.

from unittest.mock import AsyncMock

import pytest

from weather_session.models import LocationCandidate, WeatherSnapshot


def forecast_payload(name: str = "İzmir", country: str = "Turkey", temp_c: float = 21.0) -> dict:
    """A minimal forecast.json body with two forecast days."""
    return {
        "location": {"name": name, "region": "", "country": country, "localtime": "2025-01-15 12:00"},
        "current": {
            "temp_c": temp_c,
            "condition": {"text": "Partly cloudy", "icon": "//cdn/116.png", "code": 1003},
            "wind_kph": 14.4,
            "humidity": 62,
        },
        "forecast": {
            "forecastday": [
                {
                    "date": "2025-01-15",
                    "day": {"avgtemp_c": 12.3, "condition": {"text": "Sunny", "code": 1000}},
                    "astro": {"sunrise": "08:12 AM", "sunset": "05:48 PM"},
                },
                {
                    "date": "2025-01-16",
                    "day": {"avgtemp_c": 10.1, "condition": {"text": "Light rain", "code": 1183}},
                    "astro": {"sunrise": "08:12 AM", "sunset": "05:49 PM"},
                },
            ]
        },
    }


def make_snapshot(name: str = "İzmir", **kwargs) -> WeatherSnapshot:
    return WeatherSnapshot.model_validate(forecast_payload(name, **kwargs))


@pytest.fixture
def weather_port() -> AsyncMock:
    """Weather data port whose forecast echoes the requested city and whose search finds London."""
    port = AsyncMock()
    port.fetch_forecast.side_effect = lambda city, days: make_snapshot(city)
    port.search_locations.return_value = [LocationCandidate(name="London", country="UK")]
    return port
