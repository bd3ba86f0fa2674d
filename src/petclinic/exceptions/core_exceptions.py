"""
Core exceptions for the petclinic package.

This module defines the exception hierarchy used by the repositories,
the search components and the web layer, plus helpers that turn
exceptions and Pydantic errors into presentable structures.
"""

import logging
import time
from typing import Any, Dict, List, Optional


class PetClinicException(Exception):
    """
    Base exception class for all petclinic exceptions.

    Provides a consistent interface for error handling across the package.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize the exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary format.

        Returns:
            Dictionary representation of the exception
        """
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "timestamp": time.time(),
        }

    def log_error(
        self, logger: Optional[logging.Logger] = None, level: int = logging.ERROR
    ) -> None:
        """
        Log the exception with appropriate level and context.

        Args:
            logger: Logger instance to use (creates default if None)
            level: Logging level to use
        """
        if logger is None:
            logger = logging.getLogger(__name__)

        log_data = {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }

        logger.log(
            level,
            f"Exception occurred: {self.message}",
            extra={"exception_data": log_data},
        )

    def __str__(self) -> str:
        """String representation of the exception."""
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


class EntityNotFoundException(PetClinicException):
    """Exception raised when a requested entity does not exist."""

    def __init__(
        self,
        entity: str,
        entity_id: Any,
        message: Optional[str] = None,
    ):
        """
        Initialize not-found exception.

        Args:
            entity: Entity name (e.g. "Owner")
            entity_id: Identifier that was looked up
            message: Optional override for the default message
        """
        super().__init__(
            message or f"{entity} not found with id: {entity_id}",
            error_code="ENTITY_NOT_FOUND",
            details={"entity": entity, "entity_id": entity_id},
        )
        self.entity = entity
        self.entity_id = entity_id


class IdentityMismatchException(PetClinicException):
    """Exception raised when an update targets a different entity than its path."""

    def __init__(
        self,
        entity: str,
        path_id: Any,
        form_id: Any,
        message: Optional[str] = None,
    ):
        """
        Initialize identity mismatch exception.

        Args:
            entity: Entity name (e.g. "Owner")
            path_id: Identifier taken from the request path
            form_id: Identifier carried by the submitted form
            message: Optional override for the default message
        """
        super().__init__(
            message or f"{entity} ID mismatch. Please try again.",
            error_code="IDENTITY_MISMATCH",
            details={"entity": entity, "path_id": path_id, "form_id": form_id},
        )
        self.path_id = path_id
        self.form_id = form_id


class DatabaseException(PetClinicException):
    """Base exception for database-related errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        """
        Initialize database exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            details: Additional error details
            original_error: Original exception that caused this error
        """
        super().__init__(message, error_code or "DATABASE_ERROR", details)
        self.original_error = original_error

        if original_error and "original_error" not in self.details:
            self.details["original_error"] = str(original_error)


class TransactionException(DatabaseException):
    """Exception raised when a database write fails."""

    def __init__(
        self,
        message: str = "Database transaction failed",
        operation: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        """
        Initialize transaction exception.

        Args:
            message: Error message
            operation: Description of the failed operation
            original_error: Original exception
        """
        details = {}
        if operation:
            details["operation"] = operation

        super().__init__(
            message=message,
            error_code="DATABASE_TRANSACTION_ERROR",
            details=details,
            original_error=original_error,
        )


class ConfigurationException(PetClinicException):
    """Exception raised for invalid configuration values."""

    def __init__(
        self,
        message: str = "Configuration error",
        config_key: Optional[str] = None,
        config_value: Optional[str] = None,
    ):
        """
        Initialize configuration exception.

        Args:
            message: Error message
            config_key: Configuration key that caused the error
            config_value: Configuration value (will be sanitized)
        """
        details = {}
        if config_key:
            details["config_key"] = config_key
        if config_value:
            details["config_value"] = self._sanitize_config_value(
                config_key, config_value
            )

        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            details=details,
        )

    @staticmethod
    def _sanitize_config_value(key: Optional[str], value: str) -> str:
        """Sanitize configuration values to avoid exposing secrets."""
        if not key:
            return "[REDACTED]"

        sensitive_keys = ["password", "secret", "key", "token", "credential", "url"]
        if any(sensitive in key.lower() for sensitive in sensitive_keys):
            return "[REDACTED]"

        return value


# Utility functions for exception handling and error formatting


def format_validation_errors(errors: List[Dict[str, Any]]) -> Dict[str, List[str]]:
    """
    Format Pydantic validation errors into a per-field structure.

    Args:
        errors: List of Pydantic validation errors (``ValidationError.errors()``)

    Returns:
        Dictionary mapping field names to lists of error messages
    """
    formatted_errors: Dict[str, List[str]] = {}

    for error in errors:
        field_path = ".".join(str(loc) for loc in error.get("loc", []))
        if not field_path:
            field_path = "root"

        message = error.get("msg", "Validation error")
        error_type = error.get("type", "unknown")

        if error_type == "value_error":
            # Pydantic prefixes messages raised from validators
            formatted_message = message.removeprefix("Value error, ")
        elif error_type in ("missing", "string_too_short"):
            formatted_message = "must not be blank"
        elif error_type.startswith("date"):
            formatted_message = "invalid date"
        elif error_type.startswith("int"):
            formatted_message = "must be a number"
        else:
            formatted_message = message

        formatted_errors.setdefault(field_path, []).append(formatted_message)

    return formatted_errors


def create_error_response(exception: PetClinicException) -> Dict[str, Any]:
    """
    Create a standardized error response from an exception.

    Args:
        exception: The exception to format

    Returns:
        Standardized error response dictionary
    """
    response: Dict[str, Any] = {
        "success": False,
        "error": {
            "type": exception.__class__.__name__,
            "code": exception.error_code,
            "message": exception.message,
        },
    }

    if exception.details:
        response["error"]["details"] = exception.details

    return response


def log_exception_context(
    exception: Exception,
    context: Dict[str, Any],
    logger: Optional[logging.Logger] = None,
    level: int = logging.ERROR,
) -> None:
    """
    Log an exception with additional context information.

    Args:
        exception: The exception to log
        context: Additional context information
        logger: Logger instance to use
        level: Logging level
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    if isinstance(exception, PetClinicException):
        log_data = exception.to_dict()
        log_data["context"] = context
        logger.log(
            level,
            f"Exception with context: {exception.message}",
            extra={"exception_data": log_data},
        )
    else:
        logger.log(
            level,
            f"Unhandled exception: {str(exception)}",
            extra={
                "exception_type": exception.__class__.__name__,
                "exception_message": str(exception),
                "context": context,
            },
        )
