"""Tool and module manifest schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ToolParameter(BaseModel):
    """Parameter definition for a tool."""

    name: str
    type: str  # string, integer, boolean, number, array, object
    description: str
    required: bool = True


class ToolDefinition(BaseModel):
    """Definition of a single tool exposed by a module."""

    name: str  # e.g. "weather.weather_current"
    description: str
    parameters: list[ToolParameter]


class ModuleManifest(BaseModel):
    """Manifest describing a module and its tools."""

    module_name: str
    description: str
    tools: list[ToolDefinition]


class ToolCall(BaseModel):
    """A tool call request."""

    tool_name: str
    arguments: dict[str, Any] = Field(default_factory=dict)


class ToolResult(BaseModel):
    """Result from a tool execution.

    ``error`` is the message a user should see; ``error_kind`` is the
    machine-readable tag callers branch on (``config``, ``upstream``,
    ``not_found``, ``network``, ``invalid_query`` or ``unknown``).
    """

    tool_name: str
    success: bool
    result: Any = None
    error: str | None = None
    error_kind: str | None = None
