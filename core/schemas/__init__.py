"""
Schemas

Public error taxonomy and the commitment models exchanged with
external verifiers.
"""

from .errors import (
    AllowlistError,
    AllowlistException,
    EmptyInputError,
    ErrorCodes,
    InvalidIdentifierError,
    InvalidProofError,
    NotFoundError,
)

from .commitment import (
    HEX_HASH_PATTERN,
    MembershipProof,
    RootCommitment,
    validate_hex_hash,
)

__all__ = [
    # Errors
    "AllowlistError",
    "AllowlistException",
    "EmptyInputError",
    "ErrorCodes",
    "InvalidIdentifierError",
    "InvalidProofError",
    "NotFoundError",
    # Commitments
    "HEX_HASH_PATTERN",
    "MembershipProof",
    "RootCommitment",
    "validate_hex_hash",
]
