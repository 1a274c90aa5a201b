"""AccuWeather API client."""

from __future__ import annotations

import httpx
import structlog

from modules.weather.errors import (
    InvalidCredentialError,
    LocationSearchError,
    PlaceNotFoundError,
    ServiceUnavailableError,
    WeatherDataUnavailableError,
    WeatherFetchError,
)
from modules.weather.fetcher import RetryingFetcher
from modules.weather.models import (
    ConditionsReading,
    LocationMatch,
    MainReading,
    NormalizedWeather,
    WeatherCondition,
    Wind,
)

logger = structlog.get_logger()

DEFAULT_BASE_URL = "https://dataservice.accuweather.com"

KMH_PER_MS = 3.6


def kmh_to_ms(speed_kmh: float) -> float:
    return speed_kmh / KMH_PER_MS


def icon_token(icon: int | str) -> str:
    """AccuWeather icon numbers are referenced as two-digit tokens ("05")."""
    return str(icon).zfill(2)


def normalize(location: LocationMatch, reading: ConditionsReading) -> NormalizedWeather:
    """Map a location and its conditions into the renderer-facing shape."""
    return NormalizedWeather(
        name=location.name,
        main=MainReading(
            temp=reading.temperature,
            humidity=reading.humidity,
            feels_like=reading.feels_like,
        ),
        weather=[
            WeatherCondition(
                main=reading.condition,
                description=reading.condition,
                icon=icon_token(reading.icon),
            )
        ],
        wind=Wind(speed=kmh_to_ms(reading.wind_speed_kmh)),
    )


class AccuWeatherClient:
    """Async client for the AccuWeather locations and current-conditions APIs."""

    def __init__(
        self,
        api_key: str,
        fetcher: RetryingFetcher | None = None,
        base_url: str = DEFAULT_BASE_URL,
    ):
        self.api_key = api_key
        self.fetcher = fetcher or RetryingFetcher()
        self.base_url = base_url.rstrip("/")

    async def search_location(self, query: str) -> LocationMatch:
        """Resolve a place name to its first AccuWeather match.

        Raises:
            InvalidCredentialError: The API key was rejected (401).
            ServiceUnavailableError: AccuWeather is down (503).
            LocationSearchError: Any other non-success status.
            PlaceNotFoundError: The search returned no candidates.
        """
        logger.info("weather_location_search", query=query)
        try:
            resp = await self.fetcher.get(
                f"{self.base_url}/locations/v1/cities/search",
                params={"apikey": self.api_key, "q": query},
            )
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("weather_location_search_status", query=query, status=status)
            if status == 401:
                raise InvalidCredentialError() from e
            if status == 503:
                raise ServiceUnavailableError() from e
            raise LocationSearchError(status, e.response.reason_phrase) from e

        logger.info("weather_location_search_status", query=query, status=resp.status_code)
        locations = resp.json()
        if not locations:
            raise PlaceNotFoundError(query)

        # Ambiguous names resolve to whatever AccuWeather ranks first
        return LocationMatch.from_payload(locations[0])

    async def get_current_conditions(self, location_key: str) -> ConditionsReading:
        """Fetch detailed current conditions for a location key.

        Raises:
            WeatherFetchError: Non-success status.
            WeatherDataUnavailableError: The response list was empty.
        """
        logger.info("weather_conditions_fetch", location_key=location_key)
        try:
            resp = await self.fetcher.get(
                f"{self.base_url}/currentconditions/v1/{location_key}",
                params={"apikey": self.api_key, "details": "true"},
            )
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("weather_conditions_status", location_key=location_key, status=status)
            raise WeatherFetchError(status, e.response.reason_phrase) from e

        logger.info("weather_conditions_status", location_key=location_key, status=resp.status_code)
        readings = resp.json()
        if not readings:
            raise WeatherDataUnavailableError(location_key)

        return ConditionsReading.from_payload(readings[0])
