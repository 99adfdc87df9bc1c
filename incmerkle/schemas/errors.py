"""
Schemas - Error Taxonomy
File: errors.py

Purpose: Standard error taxonomy for Merkle root computation.
Defines both Pydantic models for structured error communication
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Precondition Errors
    EMPTY_INPUT = "EMPTY_INPUT"
    EMPTY_TREE = "EMPTY_TREE"
    DIGEST_SIZE_MISMATCH = "DIGEST_SIZE_MISMATCH"

    # State Errors
    INVALID_STATE = "INVALID_STATE"

    # Configuration Errors
    UNSUPPORTED_HASH = "UNSUPPORTED_HASH"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class MerkleError(BaseModel):
    """
    Base error model for structured error communication.

    Used for passing errors to callers without exceptions,
    enabling structured error handling and serialization.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.EMPTY_TREE],
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

    def to_exception(self) -> "MerkleException":
        """Convert this error model to a raised exception."""
        return MerkleException(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )


class DigestSizeError(MerkleError):
    """Error model for a leaf whose width differs from the hash output size."""

    code: str = Field(default=ErrorCodes.DIGEST_SIZE_MISMATCH)
    expected: int | None = Field(
        default=None,
        description="Expected digest width in bytes",
    )
    actual: int | None = Field(
        default=None,
        description="Actual digest width in bytes",
    )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class MerkleException(Exception):
    """
    Base exception for all Merkle root computation errors.

    This exception carries structured error information and can be
    converted to/from MerkleError models.
    """

    def __init__(
        self,
        message: str,
        code: str = "MERKLE_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> MerkleError:
        """Convert this exception to a MerkleError model."""
        return MerkleError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class EmptyInputException(MerkleException, ValueError):
    """Exception raised when a batch root is requested over zero leaves."""

    def __init__(
        self,
        message: str = "Cannot compute a Merkle root over zero leaves",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.EMPTY_INPUT,
            details=details,
            retryable=False,
        )


class EmptyTreeException(MerkleException, ValueError):
    """Exception raised when an incremental tree is queried before any insert."""

    def __init__(
        self,
        message: str = "Incremental tree has no leaves",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.EMPTY_TREE,
            details=details,
            retryable=False,
        )


class DigestSizeException(MerkleException, ValueError):
    """Exception raised when a leaf digest has the wrong width."""

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = dict(details or {})
        if expected is not None:
            full_details["expected"] = expected
        if actual is not None:
            full_details["actual"] = actual
        super().__init__(
            message=message,
            code=ErrorCodes.DIGEST_SIZE_MISMATCH,
            details=full_details,
            retryable=False,
        )

    def to_error_model(self) -> DigestSizeError:
        return DigestSizeError(
            message=self.message,
            details=self.details,
            expected=self.details.get("expected"),
            actual=self.details.get("actual"),
        )


class InvalidStateException(MerkleException):
    """Exception raised when a tree snapshot cannot be restored."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_STATE,
            details=details,
            retryable=False,
        )


class UnsupportedHashException(MerkleException):
    """Exception raised for an unknown hash algorithm or node encoding."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.UNSUPPORTED_HASH,
            details=details,
            retryable=False,
        )

