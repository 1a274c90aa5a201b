"""Weather module — FastAPI service."""

from __future__ import annotations

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from modules.weather.errors import WeatherError
from modules.weather.manifest import MANIFEST
from modules.weather.models import CurrentWeatherRequest
from modules.weather.tools import WeatherTools
from shared.schemas.common import HealthResponse
from shared.schemas.tools import ModuleManifest, ToolCall, ToolResult

structlog.configure(
    processors=[
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ],
)

logger = structlog.get_logger()
app = FastAPI(title="Weather Module", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

tools: WeatherTools | None = None


@app.on_event("startup")
async def startup():
    global tools
    # Settings are resolved per lookup so a key added to the environment
    # is picked up without a restart.
    tools = WeatherTools()
    logger.info("weather_module_ready")


@app.get("/manifest", response_model=ModuleManifest)
async def manifest():
    """Return the module manifest."""
    return MANIFEST


@app.post("/execute", response_model=ToolResult)
async def execute(call: ToolCall):
    """Execute a tool call."""
    if tools is None:
        return ToolResult(tool_name=call.tool_name, success=False, error="Module not ready")

    tool_name = call.tool_name.split(".")[-1]
    if tool_name != "weather_current":
        return ToolResult(
            tool_name=call.tool_name,
            success=False,
            error=f"Unknown tool: {call.tool_name}",
        )

    try:
        request = CurrentWeatherRequest(**call.arguments)
    except ValidationError as e:
        return ToolResult(
            tool_name=call.tool_name,
            success=False,
            error=f"Invalid arguments: {e.errors()[0]['msg']}",
            error_kind="invalid_query",
        )

    try:
        result = await tools.weather_current(request.location)
    except WeatherError as e:
        logger.warning("tool_execution_failed", tool=call.tool_name, kind=e.kind, error=str(e))
        return ToolResult(tool_name=call.tool_name, success=False, error=str(e), error_kind=e.kind)
    except Exception as e:
        logger.error("tool_execution_error", tool=call.tool_name, error=str(e), exc_info=True)
        return ToolResult(tool_name=call.tool_name, success=False, error=str(e), error_kind="unknown")

    return ToolResult(tool_name=call.tool_name, success=True, result=result)


@app.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(module=MANIFEST.module_name)
