# ABOUTME: Runtime settings read from the environment (and an optional .env file).
# ABOUTME: Also owns the one-time logging setup used by the web entry point.

import logging
import os

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.environ.get("WEATHER_NOW_LOG_LEVEL", "INFO").upper()

# httpx's own default; the app defines no stricter timeout
HTTP_TIMEOUT = float(os.environ.get("WEATHER_NOW_HTTP_TIMEOUT", "5.0"))

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Configure root logging once; later calls are no-ops if handlers exist."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
