"""
Error taxonomy for allowlist commitments.

Defines both Pydantic models for structured error communication
and Python exceptions for control flow. Every failure is terminal for
the single call that raised it; nothing here is retryable.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Tree construction
    EMPTY_INPUT = "EMPTY_INPUT"

    # Proof generation
    LEAF_NOT_FOUND = "LEAF_NOT_FOUND"

    # Proof verification
    MERKLE_PROOF_INVALID = "MERKLE_PROOF_INVALID"
    ROOT_MISMATCH = "ROOT_MISMATCH"

    # Input decoding
    IDENTIFIER_INVALID = "IDENTIFIER_INVALID"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class AllowlistError(BaseModel):
    """
    Error model for structured error communication.

    Used to pass errors across process boundaries (CLI JSON output,
    HTTP responses) without raising.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.LEAF_NOT_FOUND],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )

    def to_exception(self) -> "AllowlistException":
        """Convert this error model to a raised exception."""
        exc_type = _EXCEPTIONS_BY_CODE.get(self.code)
        if exc_type is not None:
            return exc_type(message=self.message, details=self.details)
        return AllowlistException(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class AllowlistException(Exception):
    """
    Base exception for all allowlist Merkle errors.

    Carries structured error information and can be converted
    to an AllowlistError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "ALLOWLIST_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> AllowlistError:
        """Convert this exception to an AllowlistError model."""
        return AllowlistError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class EmptyInputError(AllowlistException):
    """Raised when a tree is built from zero identifiers."""

    def __init__(
        self,
        message: str = "Cannot build a Merkle tree from an empty identifier list",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.EMPTY_INPUT,
            details=details,
            retryable=False,
        )


class NotFoundError(AllowlistException):
    """Raised when a proof is requested for an identifier absent from the tree."""

    def __init__(
        self,
        message: str,
        leaf: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if leaf:
            full_details["leaf"] = leaf
        super().__init__(
            message=message,
            code=ErrorCodes.LEAF_NOT_FOUND,
            details=full_details,
            retryable=False,
        )


class InvalidProofError(AllowlistException):
    """Raised when a malformed or wrong-length proof is supplied to verify."""

    def __init__(
        self,
        message: str,
        sibling_index: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if sibling_index is not None:
            full_details["sibling_index"] = sibling_index
        super().__init__(
            message=message,
            code=ErrorCodes.MERKLE_PROOF_INVALID,
            details=full_details,
            retryable=False,
        )


class InvalidIdentifierError(AllowlistException):
    """Raised when an identifier string cannot be decoded into bytes."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.IDENTIFIER_INVALID,
            details=details,
            retryable=False,
        )


_EXCEPTIONS_BY_CODE: dict[str, type[AllowlistException]] = {
    ErrorCodes.EMPTY_INPUT: EmptyInputError,
    ErrorCodes.LEAF_NOT_FOUND: NotFoundError,
    ErrorCodes.MERKLE_PROOF_INVALID: InvalidProofError,
    ErrorCodes.IDENTIFIER_INVALID: InvalidIdentifierError,
}
