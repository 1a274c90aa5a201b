"""Command-line front end for the weather module."""

from __future__ import annotations

import asyncio
import json
import logging
import os
import sys

import click
import structlog

# Ensure shared package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "shared"))

FALLBACK_ERROR = "Failed to fetch weather data. Please try again."


def run_async(coro):
    """Run an async function in a new event loop."""
    return asyncio.run(coro)


@click.group()
def cli():
    """Weather lookup CLI."""
    # stdout is reserved for results; warnings and up go to stderr
    structlog.configure(
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
    )


@cli.command()
@click.argument("city", required=False, default="")
@click.option("--json", "as_json", is_flag=True, help="Print the normalized weather object as JSON")
def weather(city, as_json):
    """Show current weather for CITY."""
    from modules.weather.errors import InvalidQueryError, WeatherError
    from modules.weather.lookup import lookup_weather

    if not city.strip():
        click.echo(str(InvalidQueryError()), err=True)
        sys.exit(1)

    try:
        result = run_async(lookup_weather(city))
    except WeatherError as e:
        click.echo(str(e), err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(str(e) or FALLBACK_ERROR, err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result.model_dump(), indent=2))
        return

    condition = result.weather[0]
    click.echo(result.name)
    click.echo(f"  {round(result.main.temp)}°C, {condition.description} (icon {condition.icon})")
    click.echo(f"  Feels like: {round(result.main.feels_like)}°C")
    humidity = "n/a" if result.main.humidity is None else f"{result.main.humidity}%"
    click.echo(f"  Humidity:   {humidity}")
    click.echo(f"  Wind speed: {result.wind.speed:.1f} m/s")


if __name__ == "__main__":
    cli()
