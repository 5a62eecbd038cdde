"""Common Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exchanging camelCase JSON while keeping snake_case attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class HealthResponse(BaseModel):
    """Response model for health check endpoint."""

    status: str = Field(..., examples=["healthy"])
    service: str = Field(..., examples=["mockinterview-api"])
    version: str = Field(..., examples=["0.1.0"])


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str = Field(..., description="Human-readable error message")
    error_code: str = Field(..., description="Machine-readable error code")
    request_id: str | None = Field(None, description="Request tracking ID")


class ErrorResponseWithDetails(ErrorResponse):
    """Error response with additional details."""

    errors: list[dict] | None = Field(
        None,
        description="Validation error details",
    )
