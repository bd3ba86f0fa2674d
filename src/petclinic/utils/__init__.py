"""
Utility functions and helper modules.

This module provides common utility functions for date handling,
validation, and configuration management.
"""

from .config import (
    AppSettings,
    ConfigError,
    DatabaseURLValidator,
    EnvironmentConfig,
    LoggingConfigurator,
    LogLevel,
)
from .datetime_utils import (
    DEFAULT_UPCOMING_DAYS,
    get_today,
    is_future_date,
    upcoming_window,
)
from .validation import (
    ValidationError,
    ValidationResult,
    sanitize_string,
    validate_search_telephone,
    validate_telephone,
)

__all__ = [
    # Date utilities
    "DEFAULT_UPCOMING_DAYS",
    "get_today",
    "is_future_date",
    "upcoming_window",
    # Validation helpers
    "ValidationError",
    "ValidationResult",
    "sanitize_string",
    "validate_telephone",
    "validate_search_telephone",
    # Configuration utilities
    "AppSettings",
    "ConfigError",
    "LogLevel",
    "EnvironmentConfig",
    "DatabaseURLValidator",
    "LoggingConfigurator",
]
