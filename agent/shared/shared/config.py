"""Configuration management using Pydantic Settings."""

from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # AccuWeather
    # NEXT_PUBLIC_ prefix is still accepted so existing frontend .env files work.
    accuweather_api_key: str = Field(
        default="",
        validation_alias=AliasChoices(
            "accuweather_api_key",
            "next_public_accuweather_api_key",
        ),
    )
    accuweather_base_url: str = "https://dataservice.accuweather.com"

    # Outbound requests
    weather_max_retries: int = 3
    weather_retry_delay_seconds: float = 1.0
    weather_request_timeout: float = 15.0

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
