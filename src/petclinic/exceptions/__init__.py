"""
Custom exceptions for the petclinic package.

This module defines the exception hierarchy and helper functions
used throughout the clinic application.
"""

from .core_exceptions import (
    ConfigurationException,
    DatabaseException,
    EntityNotFoundException,
    IdentityMismatchException,
    PetClinicException,
    TransactionException,
    create_error_response,
    format_validation_errors,
    log_exception_context,
)

__all__ = [
    # Exception classes
    "PetClinicException",
    "EntityNotFoundException",
    "IdentityMismatchException",
    "DatabaseException",
    "TransactionException",
    "ConfigurationException",
    # Utility functions
    "format_validation_errors",
    "create_error_response",
    "log_exception_context",
]
