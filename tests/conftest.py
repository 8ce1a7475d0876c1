# ABOUTME: Shared test fixtures for the weather-now test suite.
# ABOUTME: Provides Open-Meteo sample payloads and a mock httpx client factory.

from datetime import datetime, timedelta
from unittest.mock import AsyncMock

import httpx
import pytest

CURRENT_TIME = "2025-01-15T12:00"


def _hourly_times(start: str = "2025-01-15T00:00", hours: int = 48) -> list[str]:
    first = datetime.fromisoformat(start)
    return [(first + timedelta(hours=h)).strftime("%Y-%m-%dT%H:%M") for h in range(hours)]


@pytest.fixture
def geocode_payload() -> dict:
    return {
        "results": [
            {
                "name": "Paris",
                "admin1": "Île-de-France",
                "country": "France",
                "latitude": 48.85341,
                "longitude": 2.3488,
            },
            {
                "name": "Paris",
                "admin1": "Texas",
                "country": "United States",
                "latitude": 33.66094,
                "longitude": -95.55551,
            },
        ]
    }


@pytest.fixture
def forecast_payload() -> dict:
    times = _hourly_times()
    n = len(times)
    return {
        "latitude": 48.86,
        "longitude": 2.35,
        "timezone": "Europe/Paris",
        "current_weather": {
            "temperature": 7.4,
            "windspeed": 11.5,
            "winddirection": 250,
            "weathercode": 63,
            "time": CURRENT_TIME,
            "is_day": 1,
        },
        "hourly": {
            "time": times,
            "temperature_2m": [float(h % 24) for h in range(n)],
            "apparent_temperature": [float(h % 24) - 2.5 for h in range(n)],
            "relativehumidity_2m": [80 - (h % 24) for h in range(n)],
            "pressure_msl": [1013.2] * n,
            "visibility": [24140.0] * n,
            "uv_index": [0.0] * n,
        },
        "daily": {
            "time": [f"2025-01-{day}" for day in range(15, 22)],
            "temperature_2m_max": [8.5, 9.1, 6.0, 5.5, 7.2, 10.4, 11.0],
            "temperature_2m_min": [2.5, 3.0, 0.4, -1.2, 1.1, 4.0, 5.5],
            "sunrise": [f"2025-01-{day}T08:40" for day in range(15, 22)],
            "sunset": [f"2025-01-{day}T17:15" for day in range(15, 22)],
            "weathercode": [63, 3, 0, 1, 45, 95, 7],
        },
    }


@pytest.fixture
def make_client():
    """Build a mock httpx.AsyncClient whose get() returns the given JSON bodies in order."""

    def _make(*json_bodies: dict, status_code: int = 200) -> httpx.AsyncClient:
        mock = AsyncMock(spec=httpx.AsyncClient)
        mock.get.side_effect = [
            httpx.Response(status_code=status_code, json=body, request=httpx.Request("GET", "https://test"))
            for body in json_bodies
        ]
        return mock

    return _make
