"""Weather module manifest — tool definitions."""

from shared.schemas.tools import ModuleManifest, ToolDefinition, ToolParameter

MANIFEST = ModuleManifest(
    module_name="weather",
    description="Look up current weather conditions for a city worldwide using AccuWeather.",
    tools=[
        ToolDefinition(
            name="weather.weather_current",
            description=(
                "Get current weather conditions for a city. "
                "Returns temperature and feels-like (°C), humidity (%), "
                "wind speed (m/s), a condition label and a two-digit icon token. "
                "Ambiguous names resolve to the first match. "
                "Example: 'What's the weather in Tokyo?'"
            ),
            parameters=[
                ToolParameter(
                    name="location",
                    type="string",
                    description="City name (e.g. 'London', 'New York', 'Tokyo')",
                ),
            ],
        ),
    ],
)
