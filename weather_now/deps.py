# ABOUTME: Factory for the shared httpx.AsyncClient used by the weather service.
# ABOUTME: One client is created per app lifespan and closed on shutdown.

import httpx

from weather_now import config

USER_AGENT = "weather-now/0.1"


def create_http_client(timeout: float | None = None) -> httpx.AsyncClient:
    """Create the httpx client used for geocoding and forecast calls.

    No retry transport is installed: a failed call is reported to the user as-is.
    """
    return httpx.AsyncClient(
        timeout=config.HTTP_TIMEOUT if timeout is None else timeout,
        headers={"User-Agent": USER_AGENT},
    )
