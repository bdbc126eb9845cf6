"""
Module 01 - Values, Names & Errors
File: errors.py

Purpose: Standard error taxonomy for POD validation, encoding and signing.
Defines both a Pydantic model for structured error communication
and Python exceptions for control flow.

Format and bounds failures are TypeError subclasses so callers can treat
every malformed-input failure uniformly. A signature that is well formed
but does not verify is never an exception: verification returns False.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Value & name errors
    INVALID_NAME = "INVALID_NAME"
    INVALID_VALUE = "INVALID_VALUE"
    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"

    # Key & signature codec errors
    INVALID_PRIVATE_KEY = "INVALID_PRIVATE_KEY"
    INVALID_PUBLIC_KEY = "INVALID_PUBLIC_KEY"
    INVALID_SIGNATURE = "INVALID_SIGNATURE"
    INVALID_CURVE_POINT = "INVALID_CURVE_POINT"

    # Serialization errors
    SERIALIZATION_ERROR = "SERIALIZATION_ERROR"

    # Content errors
    ENTRY_NOT_FOUND = "ENTRY_NOT_FOUND"


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class PODError(BaseModel):
    """
    Error model for structured error reporting.

    Calling layers use this to hand failures to user-facing code without
    re-raising.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.INVALID_VALUE],
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

    def to_exception(self) -> "PODException":
        """Convert this error model to a raised exception."""
        return PODException(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class PODException(Exception):
    """
    Base exception for all POD errors.

    Carries structured error information and can be converted to a
    PODError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "POD_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> PODError:
        """Convert this exception to a PODError model."""
        return PODError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class PODFormatException(PODException, TypeError):
    """Raised for a syntactically invalid name, value, key, signature or document."""

    def __init__(
        self,
        message: str,
        label: str | None = None,
        code: str = ErrorCodes.INVALID_VALUE,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = dict(details or {})
        if label is not None:
            full_details["label"] = label
        super().__init__(
            message=message,
            code=code,
            details=full_details,
            retryable=False,
        )
        self.label = label


class PODBoundsException(PODFormatException):
    """Raised when a numeric payload or raw length is outside its closed interval."""

    def __init__(
        self,
        message: str,
        label: str | None = None,
        minimum: int | None = None,
        maximum: int | None = None,
    ) -> None:
        details: dict[str, Any] = {}
        if minimum is not None:
            details["min"] = str(minimum)
        if maximum is not None:
            details["max"] = str(maximum)
        super().__init__(
            message=message,
            label=label,
            code=ErrorCodes.OUT_OF_BOUNDS,
            details=details,
        )


class PODCurvePointException(PODFormatException):
    """Raised when a point does not lie on the BabyJubJub curve."""

    def __init__(
        self,
        message: str,
        label: str | None = None,
    ) -> None:
        super().__init__(
            message=message,
            label=label,
            code=ErrorCodes.INVALID_CURVE_POINT,
        )


class PODEntryNotFoundException(PODException, LookupError):
    """Raised when an entry is requested by a name the POD does not contain."""

    def __init__(self, name: str) -> None:
        super().__init__(
            message=f"POD doesn't contain entry {name!r}.",
            code=ErrorCodes.ENTRY_NOT_FOUND,
            details={"name": name},
            retryable=False,
        )
        self.name = name
