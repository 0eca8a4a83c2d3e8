"""Common schemas used across the API."""

from typing import Literal

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Generic error body.

    Format: { "error": str }
    """

    error: str = "Internal server error"


class HealthResponse(BaseModel):
    """Liveness payload. Does not reflect backend availability."""

    status: Literal["ok"] = "ok"
