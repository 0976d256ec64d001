"""
Custom exceptions for consistent error handling across jsonkit.

Only failures raised by jsonkit itself live here. Errors produced by the
JSON engine propagate unchanged: json.JSONDecodeError on malformed text,
pydantic.ValidationError when parsed data does not fit the target type, and
pydantic_core.PydanticSerializationError on values with no JSON form.
"""

from typing import Optional


class JsonKitError(Exception):
    """Base exception for jsonkit failures."""

    def __init__(self, message: str, type_name: Optional[str] = None):
        """
        Initialize jsonkit error.

        Args:
            message: Error message
            type_name: Name of the type involved (optional)
        """
        self.type_name = type_name
        full_message = message
        if type_name:
            full_message = f"[{type_name}] {full_message}"
        super().__init__(full_message)


class JsonSchemaError(JsonKitError, TypeError):
    """Raised when a type cannot be mapped to JSON (bad declaration or unresolvable annotation)."""
