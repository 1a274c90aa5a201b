"""Pydantic models for weather module request/response validation."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CurrentWeatherRequest(BaseModel):
    location: str = Field(min_length=1)


class LocationMatch(BaseModel):
    """First candidate of an AccuWeather city search."""

    key: str
    name: str

    @classmethod
    def from_payload(cls, item: dict) -> LocationMatch:
        return cls(key=str(item["Key"]), name=item["LocalizedName"])


class ConditionsReading(BaseModel):
    """The subset of an AccuWeather current-conditions entry we use."""

    temperature: float  # °C
    feels_like: float  # °C
    humidity: int | float | None  # %, None when the station reports no reading
    wind_speed_kmh: float
    condition: str
    icon: int

    @classmethod
    def from_payload(cls, item: dict) -> ConditionsReading:
        return cls(
            temperature=item["Temperature"]["Metric"]["Value"],
            feels_like=item["RealFeelTemperature"]["Metric"]["Value"],
            humidity=item.get("RelativeHumidity"),
            wind_speed_kmh=item["Wind"]["Speed"]["Metric"]["Value"],
            condition=item["WeatherText"],
            icon=item["WeatherIcon"],
        )


class MainReading(BaseModel):
    temp: float
    humidity: int | float | None
    feels_like: float


class WeatherCondition(BaseModel):
    main: str
    description: str
    icon: str  # two-character icon token, e.g. "05"


class Wind(BaseModel):
    speed: float  # m/s


class NormalizedWeather(BaseModel):
    """Provider-independent shape consumed by renderers.

    Field names and units are a stable contract; do not rename.
    """

    name: str
    main: MainReading
    weather: list[WeatherCondition]
    wind: Wind
