"""
Decorators for error handling at the payload validation boundary.
"""
import functools
from typing import Callable

import pydantic

from ..exceptions import BatchInferenceError, ValidationError


def _format_location(loc) -> str:
    return ".".join(str(part) for part in loc) if loc else ""


def handle_validation_errors(func: Callable) -> Callable:
    """
    Decorator to convert validation failures into library exceptions.

    Args:
        func: Function to wrap

    Returns:
        Wrapped function with error handling
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except BatchInferenceError:
            # Includes UnrecognizedEnumValueError raised from field validators
            raise
        except pydantic.ValidationError as e:
            errors = e.errors()
            first = errors[0] if errors else {}
            parameter = _format_location(first.get("loc"))
            message = first.get("msg", str(e))
            if parameter:
                message = f"{parameter}: {message}"
            raise ValidationError(
                message,
                parameter=parameter or None,
                value=first.get("input"),
                details={"errors": errors, "error_count": e.error_count()},
            ) from e
        except Exception as e:
            raise BatchInferenceError(f"Unexpected error: {str(e)}") from e

    return wrapper
