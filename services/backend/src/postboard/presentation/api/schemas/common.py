"""Common schemas shared across API endpoints."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


def _utc_now() -> datetime:
    """Return current UTC time (timezone-aware)."""
    return datetime.now(timezone.utc)


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    detail: str = Field(..., description="Error message")
    code: str | None = Field(None, description="Error code for programmatic handling")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"detail": "Post with id 7 not found", "code": "POST_NOT_FOUND"},
        },
    )


class MessageResponse(BaseModel):
    """Confirmation message for operations without a resource body."""

    message: str

    model_config = ConfigDict(
        json_schema_extra={"example": {"message": "Post with id 7 deleted"}},
    )


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
    timestamp: datetime = Field(default_factory=_utc_now)
