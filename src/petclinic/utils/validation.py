"""
Validation and data processing utilities for clinic forms.

This module provides the string sanitization and telephone checks shared
by the form schemas and the owner search endpoint.
"""

import re
import unicodedata
from typing import Any, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


class ValidationError(Exception):
    """Custom validation error with structured error information."""

    def __init__(
        self, message: str, field: Optional[str] = None, code: Optional[str] = None
    ):
        self.message = message
        self.field = field
        self.code = code
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the error to a dictionary format."""
        return {"message": self.message, "field": self.field, "code": self.code}


class ValidationResult(Generic[T]):
    """Result of a validation operation."""

    def __init__(
        self, value: Optional[T] = None, errors: Optional[List[ValidationError]] = None
    ):
        self.value = value
        self.errors = errors or []
        self.is_valid = len(self.errors) == 0

    def add_error(self, error: ValidationError) -> None:
        """Add an error to the result."""
        self.errors.append(error)
        self.is_valid = False


# Stored owner telephones are exactly ten digits
TELEPHONE_PATTERN = re.compile(r"^\d{10}$")
DIGITS_PATTERN = re.compile(r"^\d+$")


def sanitize_string(value: Optional[str], max_length: Optional[int] = None) -> str:
    """
    Sanitize a string by normalizing unicode and trimming whitespace.

    Args:
        value: The string to sanitize (None is treated as empty)
        max_length: Maximum allowed length

    Returns:
        Sanitized string
    """
    if value is None:
        return ""

    normalized = unicodedata.normalize("NFKC", value)
    sanitized = re.sub(r"\s+", " ", normalized.strip())

    if max_length and len(sanitized) > max_length:
        sanitized = sanitized[:max_length].rstrip()

    return sanitized


def validate_telephone(telephone: Optional[str]) -> ValidationResult[str]:
    """
    Validate an owner telephone number.

    Args:
        telephone: The telephone to validate

    Returns:
        ValidationResult with the stripped telephone or errors
    """
    result = ValidationResult[str]()
    value = sanitize_string(telephone)

    if not value:
        result.add_error(
            ValidationError("must not be blank", "telephone", "required")
        )
        return result

    if not TELEPHONE_PATTERN.match(value):
        result.add_error(
            ValidationError(
                "Telephone must be a 10-digit number", "telephone", "invalid_format"
            )
        )
        return result

    result.value = value
    return result


def validate_search_telephone(telephone: Optional[str]) -> ValidationResult[str]:
    """
    Validate the optional telephone criterion of an owner search.

    Blank input is valid and yields an empty value; anything else must be
    made of digits only.
    """
    result = ValidationResult[str](value="")
    value = sanitize_string(telephone)

    if value and not DIGITS_PATTERN.match(value):
        result.add_error(
            ValidationError(
                "Telephone must contain only numeric characters",
                "telephone",
                "numeric",
            )
        )
        return result

    result.value = value
    return result
