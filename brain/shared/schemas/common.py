"""
Response envelopes shared by every endpoint.

Every body carries "success". Errors add an "error" object (ErrorResponse),
successes add a "message" and/or a payload.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class BaseSchema(BaseModel):
    """Schemas that can be read straight off ORM rows."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# STANDARD RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class MessageResponse(BaseModel):
    """Simple message response for success confirmations."""

    success: bool = True
    message: str


class ErrorDetail(BaseModel):
    """Error detail structure in error responses."""

    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error message")
    details: Optional[dict[str, Any]] = Field(
        default=None,
        description="Additional error context",
    )


class ErrorResponse(BaseModel):
    """
    Standard error response schema.

    Example:
        {
            "success": false,
            "error": {
                "code": "NOT_FOUND",
                "message": "Share link not found",
                "details": {}
            }
        }
    """

    success: bool = False
    error: ErrorDetail


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH CHECK
# ═══════════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = "healthy"
    service: str = "brain"
    version: str = "1.0.0"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
