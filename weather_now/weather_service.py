# ABOUTME: Service layer for Open-Meteo geocoding and forecast calls.
# ABOUTME: Validates the responses and raises the user-facing lookup errors.

import logging

import httpx

from weather_now.exceptions import EmptyInputError, NoCurrentWeatherError, NoMatchError
from weather_now.models import ForecastResponse, Location

logger = logging.getLogger(__name__)

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"

GEOCODING_COUNT = 5

HOURLY_PARAMS = "temperature_2m,apparent_temperature,relativehumidity_2m,pressure_msl,visibility,uv_index"

DAILY_PARAMS = "temperature_2m_max,temperature_2m_min,sunrise,sunset,weathercode"


async def geocode(client: httpx.AsyncClient, query: str) -> Location:
    """Resolve free text to the first matching location.

    Raises EmptyInputError for blank input without touching the network, and
    NoMatchError when the geocoding API has no results.
    """
    name = query.strip() if query else ""
    if not name:
        raise EmptyInputError()

    resp = await client.get(
        GEOCODING_URL,
        params={"name": name, "count": GEOCODING_COUNT, "language": "en", "format": "json"},
    )
    resp.raise_for_status()
    data = resp.json()

    results = data.get("results")
    if not results:
        logger.info("No geocoding match for %r", name)
        raise NoMatchError()

    r = results[0]
    location = Location(
        name=r["name"],
        region=r.get("admin1"),
        country=r.get("country"),
        latitude=r["latitude"],
        longitude=r["longitude"],
    )
    logger.info("Resolved %r to %s (%s, %s)", name, location.display_name, location.latitude, location.longitude)
    return location


async def get_forecast(client: httpx.AsyncClient, latitude: float, longitude: float) -> ForecastResponse:
    """Fetch current conditions plus hourly and daily series for a coordinate pair."""
    resp = await client.get(
        FORECAST_URL,
        params={
            "latitude": latitude,
            "longitude": longitude,
            "current_weather": "true",
            "hourly": HOURLY_PARAMS,
            "daily": DAILY_PARAMS,
            "timezone": "auto",
        },
    )
    # Open-Meteo reports bad requests as a JSON body without current_weather
    try:
        data = resp.json()
    except ValueError:
        resp.raise_for_status()
        raise

    if not isinstance(data, dict) or not data.get("current_weather"):
        reason = data.get("reason") if isinstance(data, dict) else None
        logger.info(
            "Forecast for (%s, %s) has no current_weather (HTTP %s): %s",
            latitude,
            longitude,
            resp.status_code,
            reason,
        )
        raise NoCurrentWeatherError()

    resp.raise_for_status()
    return ForecastResponse.model_validate(data)
