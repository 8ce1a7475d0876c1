# ABOUTME: Pure transforms from raw forecast data to display fields.
# ABOUTME: Icon and theme mapping, wind compass labels, the 12-hour slice and daily cards.

import math
from datetime import date, datetime

from weather_now.models import (
    CurrentConditions,
    CurrentWeather,
    DailyForecast,
    DailySeries,
    ForecastResponse,
    HourlyForecast,
    HourlySeries,
    Location,
    WeatherView,
)

WEATHER_ICONS = {
    0: "☀️",
    1: "🌤️",
    2: "⛅",
    3: "☁️",
    45: "🌫️",
    48: "🌫️",
    51: "🌦️",
    53: "🌦️",
    55: "🌧️",
    61: "🌦️",
    63: "🌧️",
    65: "🌧️",
    71: "🌨️",
    73: "🌨️",
    75: "❄️",
    80: "🌧️",
    81: "🌧️",
    82: "🌧️",
    95: "⛈️",
    96: "⛈️",
    99: "⛈️",
}
FALLBACK_ICON = "❓"

RAINY_CODES = frozenset({61, 63, 65, 80, 81, 82})
SUNNY_CODES = frozenset({0, 1})
NIGHT_START_HOUR = 20
NIGHT_END_HOUR = 5

COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)
COMPASS_SECTOR = 360 / len(COMPASS_POINTS)
PLACEHOLDER = "-"

HOURS_AHEAD = 12


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up, like JavaScript's Math.round."""
    return math.floor(value + 0.5)


def format_whole(value: float | None) -> str:
    if value is None:
        return PLACEHOLDER
    return str(round_half_up(value))


def format_km(meters: float | None) -> str:
    return format_whole(None if meters is None else meters / 1000)


def weather_icon(code: int | None) -> str:
    return WEATHER_ICONS.get(code, FALLBACK_ICON)


def observation_hour(time: str) -> int:
    """Hour of a provider timestamp, which is already in the location's local time."""
    return datetime.fromisoformat(time).hour


def background_theme(hour: int, code: int | None) -> str:
    """Pick the page background. Night wins over any weather condition."""
    if hour >= NIGHT_START_HOUR or hour <= NIGHT_END_HOUR:
        return "night"
    if code in RAINY_CODES:
        return "rainy"
    if code in SUNNY_CODES:
        return "sunny"
    return "default"


def wind_direction_label(degrees: float | None) -> str:
    """Bucket a wind bearing into one of 16 compass points."""
    if degrees is None:
        return PLACEHOLDER
    return COMPASS_POINTS[round_half_up(degrees / COMPASS_SECTOR) % len(COMPASS_POINTS)]


def next_12_hours(current_time: str, hourly: HourlySeries) -> list[HourlyForecast]:
    """Return up to 12 hourly entries strictly after the current observation.

    The observation time is matched against the hourly timestamps by exact string
    equality; when there is no match the result is empty.
    """
    try:
        now_index = hourly.time.index(current_time)
    except ValueError:
        return []

    result = []
    for i in range(now_index + 1, min(now_index + 1 + HOURS_AHEAD, len(hourly.time))):
        t = hourly.time[i]
        result.append(
            HourlyForecast(
                time=t,
                label=datetime.fromisoformat(t).strftime("%H:%M"),
                temperature=_get_at(hourly.temperature_2m, i),
                apparent_temperature=_get_at(hourly.apparent_temperature, i),
                humidity=_get_at(hourly.relativehumidity_2m, i),
            )
        )
    return result


def daily_forecast(daily: DailySeries) -> list[DailyForecast]:
    """Turn the daily columns into one card per day."""
    result = []
    for i, d in enumerate(daily.time):
        code = _get_at(daily.weathercode, i)
        result.append(
            DailyForecast(
                date=d,
                label=date.fromisoformat(d).strftime("%a"),
                icon=weather_icon(code),
                weather_code=code,
                temperature_max=_get_at(daily.temperature_2m_max, i),
                temperature_min=_get_at(daily.temperature_2m_min, i),
            )
        )
    return result


def current_conditions(current: CurrentWeather, hourly: HourlySeries) -> CurrentConditions:
    """Merge the current_weather block with the first hourly entry.

    Apparent temperature, humidity, pressure, visibility and UV index are not part
    of current_weather, so they are read from hourly index 0.
    """
    return CurrentConditions(
        temperature=current.temperature,
        apparent_temperature=_get_at(hourly.apparent_temperature, 0),
        humidity=_get_at(hourly.relativehumidity_2m, 0),
        wind_speed=current.windspeed,
        wind_direction=current.winddirection,
        pressure=_get_at(hourly.pressure_msl, 0),
        visibility=_get_at(hourly.visibility, 0),
        uv_index=_get_at(hourly.uv_index, 0),
        weather_code=current.weathercode,
        time=current.time,
    )


def build_view(location: Location, forecast: ForecastResponse) -> WeatherView:
    current = forecast.current_weather
    return WeatherView(
        location=location,
        current=current_conditions(current, forecast.hourly),
        icon=weather_icon(current.weathercode),
        wind_label=wind_direction_label(current.winddirection),
        background=background_theme(observation_hour(current.time), current.weathercode),
        next_hours=next_12_hours(current.time, forecast.hourly),
        days=daily_forecast(forecast.daily),
    )


def _get_at(column: list, index: int):
    """Safely get value at index from a column, returning None if missing."""
    if index >= len(column):
        return None
    return column[index]
