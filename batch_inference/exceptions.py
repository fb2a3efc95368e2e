"""
Custom exceptions for the batch inference contracts.
"""
from typing import Any, Dict, Optional, Sequence


class BatchInferenceError(Exception):
    """Base exception for batch inference contracts."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class ValidationError(BatchInferenceError):
    """A payload or value failed validation."""

    def __init__(
        self,
        message: str,
        parameter: Optional[str] = None,
        value: Any = None,
        expected: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)
        self.parameter = parameter
        self.value = value
        self.expected = expected


class UnrecognizedEnumValueError(ValidationError):
    """Value does not match any declared enum member name."""

    def __init__(
        self,
        enum_name: str,
        value: Any,
        allowed: Sequence[str],
        parameter: Optional[str] = None,
    ):
        self.enum_name = enum_name
        self.allowed = tuple(allowed)
        message = (
            f"{value!r} is not a valid {enum_name}; "
            f"expected one of: {', '.join(self.allowed)}"
        )
        super().__init__(
            message,
            parameter=parameter,
            value=value,
            expected=" | ".join(self.allowed),
        )
