# ABOUTME: ASGI web entry point: a search page and a JSON endpoint over the search pipeline.
# ABOUTME: Creates a Starlette app whose lifespan owns the shared httpx client.

import logging
from collections.abc import Callable
from contextlib import asynccontextmanager
from pathlib import Path

import httpx
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route
from starlette.templating import Jinja2Templates

from weather_now.config import configure_logging
from weather_now.deps import create_http_client
from weather_now.models import SearchOutcome
from weather_now.presentation import format_km, format_whole
from weather_now.search import search_once

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"

ERROR_STATUS = {
    "empty_input": 400,
    "no_match": 404,
    "no_current_weather": 502,
    "unexpected": 502,
}

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["whole"] = format_whole
templates.env.filters["km"] = format_km


def render_page(request: Request, outcome: SearchOutcome | None, city: str = ""):
    """Render the search page for an outcome (or the empty form when there is none)."""
    view = outcome.view if outcome else None
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "city": city,
            "error": outcome.error if outcome else None,
            "view": view,
            "background": view.background if view else "default",
        },
    )


async def index(request: Request):
    city = request.query_params.get("city")
    if city is None:
        return render_page(request, None)
    outcome = await search_once(request.app.state.http_client, city)
    return render_page(request, outcome, city)


async def weather_api(request: Request):
    city = request.query_params.get("city", "")
    outcome = await search_once(request.app.state.http_client, city)
    if outcome.ok:
        return JSONResponse({"query": outcome.query, "view": outcome.view.model_dump(mode="json")})
    return JSONResponse(
        {"query": outcome.query, "error": outcome.error, "code": outcome.code},
        status_code=ERROR_STATUS.get(outcome.code, 502),
    )


def create_app(client_factory: Callable[[], httpx.AsyncClient] = create_http_client) -> Starlette:
    """Build the ASGI app. `client_factory` is swapped out in tests."""
    configure_logging()

    @asynccontextmanager
    async def lifespan(app: Starlette):
        app.state.http_client = client_factory()
        logger.info("HTTP client ready")
        try:
            yield
        finally:
            await app.state.http_client.aclose()

    return Starlette(
        routes=[
            Route("/", index),
            Route("/api/weather", weather_api),
        ],
        lifespan=lifespan,
    )


app = create_app()
