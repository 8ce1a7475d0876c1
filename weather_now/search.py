# ABOUTME: Search pipeline tying geocoding, forecast fetching and the presentation transform together.
# ABOUTME: SearchSession (library API for long-lived callers; the stateless web layer uses search_once)
# ABOUTME: keeps a generation counter so stale results never replace newer ones.

import logging

import httpx

from weather_now.exceptions import WeatherLookupError
from weather_now.models import SearchOutcome, WeatherView
from weather_now.presentation import build_view
from weather_now.weather_service import geocode, get_forecast

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_CODE = "unexpected"


async def lookup_weather(client: httpx.AsyncClient, query: str) -> WeatherView:
    """Run geocode -> forecast -> transform. Errors propagate to the caller."""
    location = await geocode(client, query)
    forecast = await get_forecast(client, location.latitude, location.longitude)
    return build_view(location, forecast)


async def search_once(client: httpx.AsyncClient, query: str, generation: int = 0) -> SearchOutcome:
    """Run one search and turn any failure into an error outcome.

    Lookup errors carry their own message; anything else (network, bad JSON,
    validation) is reported with the exception's message verbatim.
    """
    try:
        view = await lookup_weather(client, query)
    except WeatherLookupError as e:
        logger.info("Search %r failed: %s", query, e)
        return SearchOutcome(query=query, generation=generation, error=e.message, code=e.code)
    except Exception as e:
        logger.exception("Unexpected failure searching for %r", query)
        # timeouts often carry an empty message
        message = str(e) or type(e).__name__
        return SearchOutcome(query=query, generation=generation, error=message, code=UNEXPECTED_ERROR_CODE)
    return SearchOutcome(query=query, generation=generation, view=view)


class SearchSession:
    """One user's sequence of searches.

    Every search takes a new generation number and clears the published result.
    When a search finishes it only becomes `current` if no newer search started
    in the meantime.
    """

    def __init__(self, client: httpx.AsyncClient):
        self._client = client
        self._generation = 0
        self.current: SearchOutcome | None = None

    @property
    def generation(self) -> int:
        return self._generation

    def is_latest(self, outcome: SearchOutcome) -> bool:
        return outcome.generation == self._generation

    async def search(self, query: str) -> SearchOutcome:
        self._generation += 1
        generation = self._generation
        self.current = None

        outcome = await search_once(self._client, query, generation)

        if self.is_latest(outcome):
            self.current = outcome
        else:
            logger.info("Discarding stale result for %r (generation %d < %d)", query, generation, self._generation)
        return outcome
