"""
Shared response schemas - messages, errors, health
"""

from datetime import datetime, timezone
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    msg: str = Field(description="Human-readable message")

    model_config = ConfigDict(json_schema_extra={"example": {"msg": "Note deleted"}})


class ValidationErrorItem(BaseModel):
    """One offending request field."""

    field: str
    message: str


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    msg: str = Field(description="Fixed, client-safe error message")
    errors: Optional[List[ValidationErrorItem]] = Field(
        default=None, description="Field level problems for validation errors"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "msg": "Please fill all the input fields",
                "errors": [{"field": "heading", "message": "Field required"}],
            }
        }
    )


class HealthCheckResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(description="Overall health status")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    version: str = Field(description="Application version")
    checks: dict[str, dict[str, Any]] = Field(description="Individual component health checks")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "healthy",
                "timestamp": "2025-09-13T10:30:00Z",
                "version": "1.0.0",
                "checks": {"database": {"status": "healthy", "response_time_ms": 15}},
            }
        }
    )
