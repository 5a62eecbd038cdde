"""Pydantic schemas for the mock interview API."""

from mockinterview.schemas.common import ErrorResponse, ErrorResponseWithDetails, HealthResponse

__all__ = [
    "ErrorResponse",
    "ErrorResponseWithDetails",
    "HealthResponse",
]
