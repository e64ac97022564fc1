"""
Shared response schemas - messages, errors, health
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class MessageResponse(BaseModel):
    """Plain message body, used for confirmations and non-field errors."""

    message: str = Field(description="Human-readable message")


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
                "checks": {
                    "database": {"connected": True, "status": "healthy", "response_time_ms": 15},
                    "redis": {"connected": True, "status": "healthy", "response_time_ms": 5},
                    "response_cache": {"status": "healthy", "entries": 12},
                }
            }
        }
    )
