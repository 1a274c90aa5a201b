"""Place name → normalized current weather."""

from __future__ import annotations

import time

import httpx
import structlog

from modules.weather.client import AccuWeatherClient, normalize
from modules.weather.errors import ConfigError, InvalidQueryError, NetworkError
from modules.weather.fetcher import RetryingFetcher
from modules.weather.models import NormalizedWeather
from shared.config import Settings

logger = structlog.get_logger()


def _elapsed_ms(started: float) -> int:
    return int((time.monotonic() - started) * 1000)


async def lookup_weather(
    query: str,
    settings: Settings | None = None,
    fetcher: RetryingFetcher | None = None,
) -> NormalizedWeather:
    """Resolve ``query`` to a location and return its current conditions.

    Settings are read fresh on every call unless passed in, so a missing
    credential is detected per lookup and before any request is sent.

    Raises:
        WeatherError: A classified failure (see ``modules.weather.errors``).
            Transport failures that survive the retry budget surface as
            ``NetworkError``. Anything unclassified propagates unchanged.
    """
    settings = settings or Settings()
    if not settings.accuweather_api_key:
        logger.error("weather_api_key_missing")
        raise ConfigError()

    query = query.strip()
    if not query:
        raise InvalidQueryError()

    if fetcher is None:
        fetcher = RetryingFetcher(
            max_retries=settings.weather_max_retries,
            retry_delay=settings.weather_retry_delay_seconds,
            timeout=settings.weather_request_timeout,
        )
    client = AccuWeatherClient(
        settings.accuweather_api_key,
        fetcher=fetcher,
        base_url=settings.accuweather_base_url,
    )

    started = time.monotonic()
    try:
        location = await client.search_location(query)
        reading = await client.get_current_conditions(location.key)
    except httpx.TransportError as e:
        logger.error(
            "weather_lookup_failed",
            query=query,
            error=str(e),
            elapsed_ms=_elapsed_ms(started),
        )
        raise NetworkError() from e
    except Exception as e:
        logger.error(
            "weather_lookup_failed",
            query=query,
            error=str(e),
            elapsed_ms=_elapsed_ms(started),
        )
        raise

    result = normalize(location, reading)
    logger.info(
        "weather_lookup_completed",
        query=query,
        location=location.name,
        elapsed_ms=_elapsed_ms(started),
    )
    return result
