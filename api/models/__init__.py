"""API request and response models."""

from api.models.requests import TreeRequest, ProofRequest, VerifyRequest
from api.models.responses import (
    HealthResponse,
    VerifyResponse,
    ErrorDetail,
    ErrorResponse,
)

__all__ = [
    "TreeRequest",
    "ProofRequest",
    "VerifyRequest",
    "HealthResponse",
    "VerifyResponse",
    "ErrorDetail",
    "ErrorResponse",
]
