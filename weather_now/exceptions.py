# ABOUTME: Error types raised by the weather lookup pipeline.
# ABOUTME: Each carries the user-facing message and a short code used by the web layer.


class WeatherLookupError(Exception):
    """Base class for expected, user-facing lookup failures."""

    code = "lookup_error"
    default_message = "Weather lookup failed."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class EmptyInputError(WeatherLookupError):
    """Raised before any network call when the search text is blank."""

    code = "empty_input"
    default_message = "Please enter a city name."


class NoMatchError(WeatherLookupError):
    """Raised when the geocoding service returns no results."""

    code = "no_match"
    default_message = "No matching location found."


class NoCurrentWeatherError(WeatherLookupError):
    """Raised when a forecast response has no current_weather payload."""

    code = "no_current_weather"
    default_message = "Weather data not available."
