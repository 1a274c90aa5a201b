"""Common schemas used across services."""

from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Liveness response returned by every module's ``/health`` route."""

    status: str = "ok"
    module: str
