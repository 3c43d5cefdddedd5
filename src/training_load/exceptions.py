"""
Custom exceptions for the training load engine.

The scoring and aggregation functions are total and never raise. These
exceptions only cover the input boundary: reading an activity export from
disk and turning its rows into Activity models. Each exception includes:
- A descriptive message
- An error code for machine-readable output
- Optional details for debugging
"""

from typing import Any, Dict, Optional
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for consistent error output."""

    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Input errors
    INPUT_FILE_NOT_FOUND = "INPUT_FILE_NOT_FOUND"
    INPUT_FILE_INVALID = "INPUT_FILE_INVALID"
    ACTIVITY_PARSE_ERROR = "ACTIVITY_PARSE_ERROR"


class TrainingLoadError(Exception):
    """
    Base exception for all training load errors.

    Attributes:
        message: Human-readable error message
        code: Error code from ErrorCode enum
        details: Optional dictionary with additional error details
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON output."""
        result: Dict[str, Any] = {
            "error": {
                "code": self.code.value,
                "message": self.message,
            }
        }
        if self.details:
            result["error"]["details"] = self.details
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"


class InputFileError(TrainingLoadError):
    """Raised when an activity export cannot be read or decoded."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        missing: bool = False,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        if path:
            error_details["path"] = path
        super().__init__(
            message=message,
            code=ErrorCode.INPUT_FILE_NOT_FOUND if missing else ErrorCode.INPUT_FILE_INVALID,
            details=error_details,
        )


class ActivityParseError(TrainingLoadError):
    """Raised when an activity row fails model validation."""

    def __init__(
        self,
        message: str,
        index: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        if index is not None:
            error_details["index"] = index
        super().__init__(
            message=message,
            code=ErrorCode.ACTIVITY_PARSE_ERROR,
            details=error_details,
        )
