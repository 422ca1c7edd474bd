"""
API Response Models

Pydantic models for API response serialization.
"""

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health endpoint."""

    ok: bool = True
    service: str = "merkle-allowlist-api"
    version: str = "v1"


class VerifyResponse(BaseModel):
    """Response for POST /verify endpoint."""

    ok: bool = Field(default=True, description="Whether the request was processed")
    valid: bool = Field(..., description="Whether the proof folds to the root")
    root: str = Field(..., description="Root the proof was checked against")


class ErrorDetail(BaseModel):
    """Detailed error information."""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    """Standard error response."""

    ok: bool = False
    error: ErrorDetail = Field(..., description="Error details")
