"""Input validation exceptions."""

from typing import Optional, Any
from .base import ResemblanceError

class ValidationError(ResemblanceError):
    """Base class for validation errors."""

    def __init__(
        self,
        message: str,
        *,
        field_name: Optional[str] = None,
        field_value: Optional[Any] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        if field_name:
            self.add_context('field_name', field_name)
        if field_value is not None:
            self.add_context('field_value', str(field_value))

    def _get_default_error_code(self) -> str:
        return "VALIDATION_ERROR"


class InvalidArgumentError(ValidationError):
    """Raised when an operation receives an absent or out-of-range argument."""

    def __init__(
        self,
        parameter_name: str,
        parameter_value: Any,
        expected: Optional[str] = None,
        **kwargs
    ):
        message = f"Invalid argument '{parameter_name}': {parameter_value!r}"
        if expected:
            message = f"{message} (expected {expected})"
        super().__init__(message, field_name=parameter_name, field_value=parameter_value, **kwargs)
        if expected:
            self.add_context('expected', expected)

    def _get_default_error_code(self) -> str:
        return "INVALID_ARGUMENT"
