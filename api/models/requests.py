"""
API Request Models

Pydantic models for API request validation.
"""

from pydantic import BaseModel, Field


class TreeRequest(BaseModel):
    """Request body for POST /tree/root."""

    identifiers: list[str] = Field(
        ...,
        description="Ordered 0x identifiers; duplicates keep their own positions",
    )
    hash_algorithm: str | None = Field(
        default=None,
        description="Override the server's configured hash algorithm",
    )


class ProofRequest(TreeRequest):
    """Request body for POST /tree/proof."""

    identifier: str = Field(
        ...,
        min_length=3,
        description="0x identifier to prove",
    )


class VerifyRequest(BaseModel):
    """Request body for POST /verify."""

    leaf: str = Field(..., description="Leaf digest as 0x hex")
    proof: list[str] = Field(
        default_factory=list,
        description="Sibling digests, leaf level first",
    )
    root: str = Field(..., description="Published 0x root")
    hash_algorithm: str | None = Field(default=None, description="Override the server's configured hash algorithm")
