"""Test fixtures and mock data for weather module tests."""

from __future__ import annotations

from typing import Callable

import httpx

BASE_URL = "https://dataservice.test"
API_KEY = "test-key"

LOCATION_SEARCH_RESPONSE = [
    {
        "Version": 1,
        "Key": "328328",
        "Type": "City",
        "Rank": 10,
        "LocalizedName": "London",
        "EnglishName": "London",
        "Country": {"ID": "GB", "LocalizedName": "United Kingdom"},
    },
    {
        "Version": 1,
        "Key": "336734",
        "Type": "City",
        "Rank": 45,
        "LocalizedName": "London",
        "EnglishName": "London",
        "Country": {"ID": "CA", "LocalizedName": "Canada"},
    },
]

LOCATION_SEARCH_RESPONSE_EMPTY: list = []

CURRENT_CONDITIONS_RESPONSE = [
    {
        "LocalObservationDateTime": "2026-02-15T12:00:00+00:00",
        "WeatherText": "Mostly cloudy",
        "WeatherIcon": 6,
        "HasPrecipitation": False,
        "IsDayTime": True,
        "Temperature": {
            "Metric": {"Value": 8.5, "Unit": "C", "UnitType": 17},
            "Imperial": {"Value": 47.0, "Unit": "F", "UnitType": 18},
        },
        "RealFeelTemperature": {
            "Metric": {"Value": 5.3, "Unit": "C", "UnitType": 17},
            "Imperial": {"Value": 42.0, "Unit": "F", "UnitType": 18},
        },
        "RelativeHumidity": 72,
        "Wind": {
            "Direction": {"Degrees": 230, "English": "SW"},
            "Speed": {
                "Metric": {"Value": 18.0, "Unit": "km/h", "UnitType": 7},
                "Imperial": {"Value": 11.2, "Unit": "mi/h", "UnitType": 9},
            },
        },
    }
]

CURRENT_CONDITIONS_RESPONSE_EMPTY: list = []


def json_response(status_code: int, payload=None) -> Callable[[httpx.Request], httpx.Response]:
    """Build a MockTransport step that answers with ``payload`` as JSON."""

    def step(request: httpx.Request) -> httpx.Response:
        if payload is None:
            return httpx.Response(status_code)
        return httpx.Response(status_code, json=payload)

    return step


def connect_error(message: str = "connection refused") -> Callable[[httpx.Request], httpx.Response]:
    """Build a MockTransport step that fails at the transport layer."""

    def step(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError(message, request=request)

    return step


class ScriptedUpstream:
    """Replays canned responses per endpoint and records every request.

    Each endpoint gets a list of steps; the last step repeats once the list
    is used up.
    """

    def __init__(self, search=None, conditions=None):
        self.search = list(search or [json_response(200, LOCATION_SEARCH_RESPONSE)])
        self.conditions = list(conditions or [json_response(200, CURRENT_CONDITIONS_RESPONSE)])
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path.startswith("/locations/"):
            steps = self.search
        elif request.url.path.startswith("/currentconditions/"):
            steps = self.conditions
        else:
            return httpx.Response(404)
        step = steps.pop(0) if len(steps) > 1 else steps[0]
        return step(request)

    def calls_to(self, prefix: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path.startswith(prefix)]

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))
