# ABOUTME: Contract tests for the Pydantic models used for parsing and display.
# ABOUTME: Validates defaults, the parallel-series invariant and immutability of view objects.

import pytest
from pydantic import ValidationError

from weather_now.models import (
    CurrentConditions,
    DailySeries,
    ForecastResponse,
    HourlySeries,
    Location,
    SearchOutcome,
)


class TestLocation:
    def test_display_name_joins_present_parts(self):
        """display_name includes region and country when present.

        Implementation: Constructs a Location with all fields.
        Passing implies: The header text matches "name, region, country".
        """
        loc = Location(name="Paris", region="Île-de-France", country="France", latitude=48.85, longitude=2.35)
        assert loc.display_name == "Paris, Île-de-France, France"

    def test_display_name_skips_missing_region(self):
        loc = Location(name="Monaco", country="Monaco", latitude=43.73, longitude=7.42)
        assert loc.region is None
        assert loc.display_name == "Monaco, Monaco"


class TestParallelSeries:
    def test_aligned_columns_parse(self):
        hourly = HourlySeries(
            time=["2025-01-15T00:00", "2025-01-15T01:00"],
            temperature_2m=[1.0, 2.0],
            relativehumidity_2m=[90, 88],
        )
        assert hourly.relativehumidity_2m == [90.0, 88.0]
        assert hourly.uv_index == []

    def test_mismatched_column_rejected(self):
        """A column shorter than time fails validation.

        Implementation: Supplies two timestamps but one temperature.
        Passing implies: Indices always refer to the same timestamp across columns.
        """
        with pytest.raises(ValidationError, match="temperature_2m"):
            HourlySeries(time=["2025-01-15T00:00", "2025-01-15T01:00"], temperature_2m=[1.0])

    def test_daily_series_checks_lengths(self):
        with pytest.raises(ValidationError, match="weathercode"):
            DailySeries(time=["2025-01-15"], weathercode=[1, 2])

    def test_null_entries_allowed(self):
        daily = DailySeries(time=["2025-01-15"], temperature_2m_max=[None], weathercode=[None])
        assert daily.temperature_2m_max == [None]


class TestForecastResponse:
    def test_series_default_to_empty(self):
        resp = ForecastResponse(current_weather={"temperature": 3.0, "time": "2025-01-15T12:00"})
        assert resp.hourly.time == []
        assert resp.daily.time == []

    def test_current_weather_required(self):
        with pytest.raises(ValidationError):
            ForecastResponse(latitude=0.0, longitude=0.0)


class TestViewModels:
    def test_current_conditions_are_frozen(self):
        current = CurrentConditions(temperature=5.0, time="2025-01-15T12:00")
        with pytest.raises(ValidationError):
            current.temperature = 6.0

    def test_outcome_ok_flag(self):
        failed = SearchOutcome(query="x", error="No matching location found.", code="no_match")
        assert not failed.ok
        assert failed.view is None
