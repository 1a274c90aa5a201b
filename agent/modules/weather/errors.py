"""Classified failures raised by a weather lookup.

Every error carries a ``kind`` tag so callers can branch on the category
without inspecting message text. ``str(error)`` is the user-facing message.
"""

from __future__ import annotations


class WeatherError(Exception):
    """Base class for all classified lookup failures."""

    kind = "unknown"


class InvalidQueryError(WeatherError):
    kind = "invalid_query"

    def __init__(self) -> None:
        super().__init__("Please enter a city name")


class ConfigError(WeatherError):
    kind = "config"

    def __init__(self) -> None:
        super().__init__(
            "Weather API key is not configured. Please check your environment variables."
        )


class UpstreamError(WeatherError):
    """The weather provider answered with a non-success HTTP status."""

    kind = "upstream"

    def __init__(self, status: int, message: str):
        super().__init__(message)
        self.status = status


class InvalidCredentialError(UpstreamError):
    def __init__(self, status: int = 401):
        super().__init__(status, "Invalid API key. Please check your configuration.")


class ServiceUnavailableError(UpstreamError):
    def __init__(self, status: int = 503):
        super().__init__(
            status, "Weather service is temporarily unavailable. Please try again later."
        )


class LocationSearchError(UpstreamError):
    def __init__(self, status: int, reason: str = ""):
        super().__init__(status, f"Location search failed: {status} {reason}".rstrip())


class WeatherFetchError(UpstreamError):
    def __init__(self, status: int, reason: str = ""):
        super().__init__(status, f"Weather data fetch failed: {status} {reason}".rstrip())


class NotFoundError(WeatherError):
    """The provider answered successfully but with nothing to use."""

    kind = "not_found"


class PlaceNotFoundError(NotFoundError):
    def __init__(self, place: str):
        super().__init__(f"City not found: '{place}'")
        self.place = place


class WeatherDataUnavailableError(NotFoundError):
    def __init__(self, location_key: str):
        super().__init__("Weather data not available")
        self.location_key = location_key


class NetworkError(WeatherError):
    """Transport failure that outlived the retry budget."""

    kind = "network"

    def __init__(self) -> None:
        super().__init__("Network error: Please check your internet connection and try again.")
