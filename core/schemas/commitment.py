"""
Commitment Models

Serialized values handed to the external contract environment:
the published root commitment and a single-leaf membership proof.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


# Regex pattern for validating hex strings (0x followed by 64 hex chars = 32 bytes)
HEX_HASH_PATTERN = re.compile(r"^0x[0-9a-fA-F]{64}$")


def validate_hex_hash(value: str, field_name: str) -> str:
    """Validate that a value is a valid 32-byte hex hash with 0x prefix."""
    if not HEX_HASH_PATTERN.match(value):
        shown = value[:20] + "..." if len(value) > 20 else value
        raise ValueError(
            f"{field_name} must be a valid 32-byte hex string with 0x prefix "
            f"(64 hex chars), got: {shown}"
        )
    return value.lower()


class RootCommitment(BaseModel):
    """
    The public commitment to an allowlist.

    This is what gets stored on-chain; the tree itself is discarded.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    root: str = Field(..., description="Merkle root as 0x-prefixed hex")
    hash_algorithm: str = Field(..., description="Digest algorithm used for leaves and nodes")
    leaf_count: int = Field(..., ge=1, description="Number of leaf positions in the tree")
    depth: int = Field(..., ge=0, description="Number of parent levels above the leaves")

    @field_validator("root")
    @classmethod
    def _check_root(cls, v: str) -> str:
        return validate_hex_hash(v, "root")


class MembershipProof(BaseModel):
    """A leaf digest, its ordered sibling path and the root it folds to."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    leaf: str = Field(..., description="Leaf digest as 0x-prefixed hex")
    proof: list[str] = Field(
        default_factory=list,
        description="Sibling digests ordered from leaf level to root level",
    )
    root: str = Field(..., description="Merkle root the proof folds to")
    index: int = Field(..., ge=0, description="Leaf position in the tree")

    @field_validator("leaf", "root")
    @classmethod
    def _check_hash(cls, v: str, info: ValidationInfo) -> str:
        return validate_hex_hash(v, info.field_name)

    @field_validator("proof")
    @classmethod
    def _check_proof(cls, v: list[str]) -> list[str]:
        return [validate_hex_hash(s, f"proof[{i}]") for i, s in enumerate(v)]
