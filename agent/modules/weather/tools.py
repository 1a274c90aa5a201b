"""Weather module tool implementations."""

from __future__ import annotations

from modules.weather.fetcher import RetryingFetcher
from modules.weather.lookup import lookup_weather
from shared.config import Settings


class WeatherTools:
    """Tool implementations for weather data retrieval.

    Holds no per-lookup state; concurrent calls are independent.
    """

    def __init__(self, settings: Settings | None = None, fetcher: RetryingFetcher | None = None):
        self.settings = settings
        self.fetcher = fetcher

    async def weather_current(self, location: str) -> dict:
        """Get current weather for a place name as a NormalizedWeather dict."""
        weather = await lookup_weather(location, settings=self.settings, fetcher=self.fetcher)
        return weather.model_dump()
