"""
Schemas & Errors
File: errors.py

Purpose: Standard error taxonomy for airdrop commitments.
Defines both a Pydantic model for structured error reporting
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Encoding Errors
    ENCODING_ERROR = "ENCODING_ERROR"

    # Merkle Errors
    INDEX_OUT_OF_BOUNDS = "INDEX_OUT_OF_BOUNDS"
    EMPTY_COMMITMENT = "EMPTY_COMMITMENT"

    # Artifact Errors
    ARTIFACT_IO_ERROR = "ARTIFACT_IO_ERROR"


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class AirdropError(BaseModel):
    """
    Error model for structured error reporting, e.g. in --json CLI output.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.ENCODING_ERROR],
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

    def to_exception(self) -> "AirdropException":
        """Convert this error model to a raised exception."""
        return AirdropException(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class AirdropException(Exception):
    """
    Base exception for all airdrop commitment errors.

    Carries structured error information and can be converted
    to an AirdropError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "AIRDROP_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> AirdropError:
        """Convert this exception to an AirdropError model."""
        return AirdropError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class EncodingError(AirdropException):
    """Raised when an address or amount cannot be encoded to fixed width."""

    def __init__(
        self,
        message: str,
        value: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if value is not None:
            full_details["value"] = value
        super().__init__(
            message=message,
            code=ErrorCodes.ENCODING_ERROR,
            details=full_details,
            retryable=False,
        )


class IndexOutOfBounds(AirdropException, IndexError):
    """Raised when a proof is requested for a leaf index that does not exist."""

    def __init__(
        self,
        index: int,
        leaf_count: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        full_details["index"] = index
        full_details["leaf_count"] = leaf_count
        self.index = index
        self.leaf_count = leaf_count
        super().__init__(
            message=f"Leaf index {index} out of range for {leaf_count} leaves",
            code=ErrorCodes.INDEX_OUT_OF_BOUNDS,
            details=full_details,
            retryable=False,
        )


class EmptyCommitmentError(AirdropException):
    """Raised when a root must be published but there are no records."""

    def __init__(
        self,
        message: str = "Cannot publish a commitment over zero records",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.EMPTY_COMMITMENT,
            details=details,
            retryable=False,
        )
