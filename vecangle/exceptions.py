"""Application exception hierarchy.

All custom exceptions inherit from VecAngleError.
Each exception has an error code for structured error handling.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error handling."""

    # General errors (1xxx)
    INTERNAL_ERROR = "VEC-1000"
    CONFIGURATION_ERROR = "VEC-1001"

    # Vector operation errors (2xxx)
    DIMENSION_MISMATCH_OPERATION = "VEC-2000"

    # Ingestion errors (3xxx)
    DIMENSION_MISMATCH_INPUT = "VEC-3000"

    # Input source errors (4xxx)
    INPUT_NOT_FOUND = "VEC-4000"
    INPUT_READ_ERROR = "VEC-4001"


class VecAngleError(Exception):
    """Base exception for all vecangle errors.

    Attributes:
        message: Human-readable error message.
        code: Structured error code.
        details: Additional error context.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for structured output."""
        return {
            "error": {
                "code": self.code.value,
                "message": self.message,
                "details": self.details,
            }
        }


class ConfigurationError(VecAngleError):
    """Configuration or environment error."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR, details)


class DimensionMismatchError(VecAngleError):
    """Binary vector operation invoked on vectors of different dimension."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.DIMENSION_MISMATCH_OPERATION, details)


class IngestionError(VecAngleError):
    """Input data violates the single-dimension dataset invariant."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.DIMENSION_MISMATCH_INPUT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class InputUnavailableError(VecAngleError):
    """Input source cannot be opened or read."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INPUT_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)
