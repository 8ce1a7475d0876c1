# ABOUTME: Pydantic BaseModels for Open-Meteo responses and the derived display objects.
# ABOUTME: Raw series stay column-oriented; view and outcome models are frozen.

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Location(BaseModel):
    """Geocoded location taken from the first geocoding result."""

    name: str
    region: str | None = None
    country: str | None = None
    latitude: float
    longitude: float

    @property
    def display_name(self) -> str:
        return ", ".join(part for part in (self.name, self.region, self.country) if part)


class CurrentWeather(BaseModel):
    """The `current_weather` block of a forecast response."""

    temperature: float
    windspeed: float | None = None
    winddirection: float | None = None
    weathercode: int | None = None
    time: str
    is_day: int | None = None


class _ParallelSeries(BaseModel):
    """Column-oriented series where every present column lines up with `time`."""

    time: list[str] = []

    @model_validator(mode="after")
    def _check_column_lengths(self):
        expected = len(self.time)
        for name in type(self).model_fields:
            if name == "time":
                continue
            column = getattr(self, name)
            if column and len(column) != expected:
                raise ValueError(f"{name} has {len(column)} entries, expected {expected} to match time")
        return self


class HourlySeries(_ParallelSeries):
    """Hourly columns requested from the forecast endpoint."""

    temperature_2m: list[float | None] = []
    apparent_temperature: list[float | None] = []
    relativehumidity_2m: list[float | None] = []
    pressure_msl: list[float | None] = []
    visibility: list[float | None] = []
    uv_index: list[float | None] = []


class DailySeries(_ParallelSeries):
    """Daily columns requested from the forecast endpoint."""

    temperature_2m_max: list[float | None] = []
    temperature_2m_min: list[float | None] = []
    sunrise: list[str | None] = []
    sunset: list[str | None] = []
    weathercode: list[int | None] = []


class ForecastResponse(BaseModel):
    """Parsed response from the Open-Meteo forecast endpoint."""

    latitude: float | None = None
    longitude: float | None = None
    timezone: str | None = None
    current_weather: CurrentWeather
    hourly: HourlySeries = Field(default_factory=HourlySeries)
    daily: DailySeries = Field(default_factory=DailySeries)


class CurrentConditions(BaseModel):
    """Current weather merged with the first hourly entry, as shown on the main card."""

    model_config = ConfigDict(frozen=True)

    temperature: float
    apparent_temperature: float | None = None
    humidity: float | None = None
    wind_speed: float | None = None
    wind_direction: float | None = None
    pressure: float | None = None
    visibility: float | None = None
    uv_index: float | None = None
    weather_code: int | None = None
    time: str


class HourlyForecast(BaseModel):
    """One card in the next-12-hours strip."""

    model_config = ConfigDict(frozen=True)

    time: str
    label: str
    temperature: float | None = None
    apparent_temperature: float | None = None
    humidity: float | None = None


class DailyForecast(BaseModel):
    """One card in the 7-day grid."""

    model_config = ConfigDict(frozen=True)

    date: str
    label: str
    icon: str
    weather_code: int | None = None
    temperature_max: float | None = None
    temperature_min: float | None = None


class WeatherView(BaseModel):
    """Everything the page needs to render one search result."""

    model_config = ConfigDict(frozen=True)

    location: Location
    current: CurrentConditions
    icon: str
    wind_label: str
    background: str
    next_hours: list[HourlyForecast] = []
    days: list[DailyForecast] = []


class SearchOutcome(BaseModel):
    """Result of one search: either a view or an error message, never both."""

    model_config = ConfigDict(frozen=True)

    query: str
    generation: int = 0
    view: WeatherView | None = None
    error: str | None = None
    code: str | None = None

    @property
    def ok(self) -> bool:
        return self.view is not None
