"""
Configuration management utilities.

This module provides environment variable handling with type conversion,
database URL validation, logging configuration, and the application
settings object read at startup.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union
from urllib.parse import parse_qs, urlparse


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


class LogLevel(Enum):
    """Enumeration for log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class EnvironmentConfig:
    """Utility class for handling environment variables with type conversion."""

    @staticmethod
    def get_str(
        key: str, default: Optional[str] = None, required: bool = False
    ) -> Optional[str]:
        """
        Get a string environment variable.

        Args:
            key: Environment variable key
            default: Default value if not found
            required: Whether the variable is required

        Returns:
            String value or default

        Raises:
            ConfigError: If required variable is missing
        """
        value = os.getenv(key, default)

        if required and value is None:
            raise ConfigError(f"Required environment variable '{key}' is not set")

        return value

    @staticmethod
    def get_int(
        key: str, default: Optional[int] = None, required: bool = False
    ) -> Optional[int]:
        """
        Get an integer environment variable.

        Args:
            key: Environment variable key
            default: Default value if not found
            required: Whether the variable is required

        Returns:
            Integer value or default

        Raises:
            ConfigError: If required variable is missing or invalid
        """
        value = os.getenv(key)

        if value is None:
            if required:
                raise ConfigError(f"Required environment variable '{key}' is not set")
            return default

        try:
            return int(value)
        except ValueError:
            raise ConfigError(
                f"Environment variable '{key}' must be an integer, got: {value}"
            )

    @staticmethod
    def get_bool(
        key: str, default: Optional[bool] = None, required: bool = False
    ) -> Optional[bool]:
        """
        Get a boolean environment variable.

        Args:
            key: Environment variable key
            default: Default value if not found
            required: Whether the variable is required

        Returns:
            Boolean value or default

        Raises:
            ConfigError: If required variable is missing
        """
        value = os.getenv(key)

        if value is None:
            if required:
                raise ConfigError(f"Required environment variable '{key}' is not set")
            return default

        return value.lower() in ("true", "1", "yes", "on", "enabled")


class DatabaseURLValidator:
    """Utility class for validating database URLs."""

    SUPPORTED_DRIVERS = {
        "postgresql": ["postgresql", "postgresql+asyncpg"],
        "sqlite": ["sqlite", "sqlite+aiosqlite"],
    }

    @classmethod
    def validate_url(cls, url: str) -> Dict[str, Any]:
        """
        Validate a database URL and return parsed components.

        Args:
            url: Database URL to validate

        Returns:
            Dictionary with validation results and parsed components

        Raises:
            ConfigError: If URL is invalid
        """
        if not url:
            raise ConfigError("Database URL cannot be empty")

        parsed = urlparse(url)

        if not parsed.scheme:
            raise ConfigError(
                "Database URL must include a scheme (e.g., sqlite+aiosqlite://)"
            )

        backend = cls.get_backend(parsed.scheme)
        if backend is None:
            supported_list: List[str] = []
            for drivers in cls.SUPPORTED_DRIVERS.values():
                supported_list.extend(drivers)
            raise ConfigError(
                f"Unsupported database driver '{parsed.scheme}'. Supported: {', '.join(supported_list)}"
            )

        if backend != "sqlite":
            if not parsed.hostname:
                raise ConfigError("Database URL must include a hostname")
            if not parsed.path.lstrip("/"):
                raise ConfigError("Database URL must include a database name")

        return {
            "valid": True,
            "backend": backend,
            "scheme": parsed.scheme,
            "hostname": parsed.hostname,
            "port": parsed.port,
            "database": parsed.path.lstrip("/") if parsed.path else "",
            "query": dict(parse_qs(parsed.query)),
        }

    @classmethod
    def get_backend(cls, scheme: str) -> Optional[str]:
        """Return the backend name for a URL scheme, or None if unsupported."""
        for backend, drivers in cls.SUPPORTED_DRIVERS.items():
            if scheme in drivers:
                return backend
        return None


class LoggingConfigurator:
    """Utility class for configuring logging."""

    DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @staticmethod
    def configure_basic_logging(
        level: Union[str, LogLevel] = LogLevel.INFO,
        format_string: Optional[str] = None,
        log_file: Optional[str] = None,
    ) -> None:
        """
        Configure basic logging for the application.

        Args:
            level: Logging level
            format_string: Custom format string
            log_file: Optional log file path
        """
        if isinstance(level, LogLevel):
            level = level.value

        basic_config_args: Dict[str, Any] = {
            "level": level.upper(),
            "format": format_string or LoggingConfigurator.DEFAULT_FORMAT,
            "datefmt": "%Y-%m-%d %H:%M:%S",
        }

        if log_file:
            basic_config_args["filename"] = log_file
            basic_config_args["filemode"] = "a"

        logging.basicConfig(**basic_config_args)


@dataclass
class AppSettings:
    """Runtime settings for the clinic web application."""

    database_url: str = "sqlite+aiosqlite:///./petclinic.db"
    log_level: str = LogLevel.INFO.value
    seed_data: bool = True
    sql_echo: bool = False
    host: str = "127.0.0.1"
    port: int = 8080

    def __post_init__(self) -> None:
        DatabaseURLValidator.validate_url(self.database_url)
        if self.log_level.upper() not in LogLevel.__members__:
            raise ConfigError(f"Unknown log level '{self.log_level}'")

    @classmethod
    def from_environment(cls) -> "AppSettings":
        """
        Build settings from ``PETCLINIC_*`` environment variables.

        Raises:
            ConfigError: If a variable is malformed
        """
        defaults = cls.__dataclass_fields__
        return cls(
            database_url=EnvironmentConfig.get_str(
                "PETCLINIC_DATABASE_URL", defaults["database_url"].default
            ),
            log_level=EnvironmentConfig.get_str(
                "PETCLINIC_LOG_LEVEL", defaults["log_level"].default
            ),
            seed_data=EnvironmentConfig.get_bool("PETCLINIC_SEED_DATA", True),
            sql_echo=EnvironmentConfig.get_bool("PETCLINIC_SQL_ECHO", False),
            host=EnvironmentConfig.get_str("PETCLINIC_HOST", defaults["host"].default),
            port=EnvironmentConfig.get_int("PETCLINIC_PORT", defaults["port"].default),
        )
