"""Pydantic schemas for API responses."""

from users_api.schemas.common import ErrorResponse, HealthResponse

__all__ = [
    "ErrorResponse",
    "HealthResponse",
]
