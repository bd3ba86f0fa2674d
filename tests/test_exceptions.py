"""
Tests for exception handling in the petclinic package.
"""

import logging
from unittest.mock import Mock, patch

import pytest

from petclinic.exceptions import (
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


class TestPetClinicException:
    """Test cases for the base PetClinicException class."""

    def test_basic_exception_creation(self):
        """Test creating a basic exception."""
        exc = PetClinicException("Test error")

        assert str(exc) == "Test error"
        assert exc.message == "Test error"
        assert exc.error_code == "PetClinicException"
        assert exc.details == {}

    def test_exception_with_details(self):
        """Test creating exception with details."""
        details = {"field": "test_field", "value": "test_value"}
        exc = PetClinicException("Test error", details=details)

        assert exc.details == details
        assert "Details: " in str(exc)

    def test_to_dict_method(self):
        """Test converting exception to dictionary."""
        exc = PetClinicException("Test error", error_code="TEST_ERROR")

        result = exc.to_dict()

        assert result["error_type"] == "PetClinicException"
        assert result["error_code"] == "TEST_ERROR"
        assert result["message"] == "Test error"
        assert "timestamp" in result

    @patch("petclinic.exceptions.core_exceptions.logging.getLogger")
    def test_exception_logging(self, mock_get_logger):
        """Test exception logging functionality."""
        mock_logger = Mock()
        mock_get_logger.return_value = mock_logger

        exc = PetClinicException("Test error", error_code="TEST_ERROR")
        exc.log_error()

        mock_logger.log.assert_called_once()
        call_args = mock_logger.log.call_args
        assert call_args[0][0] == logging.ERROR
        assert "Exception occurred: Test error" in call_args[0][1]


class TestDomainExceptions:
    """Test cases for the not-found and mismatch exceptions."""

    def test_entity_not_found(self):
        """Test the default not-found message."""
        exc = EntityNotFoundException("Owner", 42)

        assert exc.message == "Owner not found with id: 42"
        assert exc.error_code == "ENTITY_NOT_FOUND"
        assert exc.details == {"entity": "Owner", "entity_id": 42}

    def test_identity_mismatch(self):
        """Test the mismatch message and details."""
        exc = IdentityMismatchException("Owner", path_id=1, form_id=2)

        assert exc.message == "Owner ID mismatch. Please try again."
        assert exc.details["path_id"] == 1
        assert exc.details["form_id"] == 2

class TestDatabaseException:
    """Test cases for DatabaseException and its subclasses."""

    def test_database_exception_creation(self):
        """Test creating a database exception."""
        original = RuntimeError("disk full")
        exc = DatabaseException("DB error", original_error=original)

        assert exc.error_code == "DATABASE_ERROR"
        assert exc.original_error is original
        assert exc.details["original_error"] == "disk full"

    def test_transaction_exception_creation(self):
        """Test creating a transaction exception."""
        exc = TransactionException("Failed to save owner", operation="save")

        assert exc.error_code == "DATABASE_TRANSACTION_ERROR"
        assert exc.details["operation"] == "save"
        assert isinstance(exc, DatabaseException)


class TestConfigurationException:
    """Test cases for ConfigurationException."""

    def test_configuration_exception_creation(self):
        """Test creating a configuration exception."""
        exc = ConfigurationException(
            "Bad level", config_key="log_level", config_value="LOUD"
        )

        assert exc.error_code == "CONFIGURATION_ERROR"
        assert exc.details == {"config_key": "log_level", "config_value": "LOUD"}

    @pytest.mark.parametrize("key", ["database_url", "db_password", "API_TOKEN"])
    def test_sensitive_value_sanitization(self, key):
        """Test sensitive values are redacted."""
        exc = ConfigurationException(
            "Invalid", config_key=key, config_value="postgresql://u:p@h/db"
        )

        assert exc.details["config_value"] == "[REDACTED]"


class TestExceptionHierarchy:
    """Test cases for exception inheritance."""

    def test_exception_inheritance(self):
        """Test every exception derives from PetClinicException."""
        for exc_class in (
            EntityNotFoundException,
            IdentityMismatchException,
            DatabaseException,
            TransactionException,
            ConfigurationException,
        ):
            assert issubclass(exc_class, PetClinicException)


class TestUtilityFunctions:
    """Test cases for exception utility functions."""

    def test_format_validation_errors(self):
        """Test formatting Pydantic validation errors."""
        pydantic_errors = [
            {"loc": ("firstName",), "msg": "Field required", "type": "missing"},
            {
                "loc": ("telephone",),
                "msg": "Value error, Telephone must be a 10-digit number",
                "type": "value_error",
            },
            {"loc": ("city",), "msg": "too short", "type": "string_too_short"},
            {"loc": ("birthDate",), "msg": "bad", "type": "date_from_datetime_parsing"},
            {"loc": ("type",), "msg": "bad", "type": "int_parsing"},
            {"loc": (), "msg": "Whole form", "type": "assertion_error"},
        ]

        formatted = format_validation_errors(pydantic_errors)

        assert formatted == {
            "firstName": ["must not be blank"],
            "telephone": ["Telephone must be a 10-digit number"],
            "city": ["must not be blank"],
            "birthDate": ["invalid date"],
            "type": ["must be a number"],
            "root": ["Whole form"],
        }

    def test_several_errors_for_one_field(self):
        """Test messages for the same field are grouped."""
        formatted = format_validation_errors(
            [
                {"loc": ("name",), "msg": "a", "type": "value_error"},
                {"loc": ("name",), "msg": "b", "type": "value_error"},
            ]
        )

        assert formatted == {"name": ["a", "b"]}

    def test_create_error_response_basic(self):
        """Test creating basic error response."""
        exc = EntityNotFoundException("Pet", 7)
        response = create_error_response(exc)

        assert response["success"] is False
        assert response["error"]["type"] == "EntityNotFoundException"
        assert response["error"]["code"] == "ENTITY_NOT_FOUND"
        assert response["error"]["message"] == "Pet not found with id: 7"
        assert response["error"]["details"] == {"entity": "Pet", "entity_id": 7}

    def test_create_error_response_without_details(self):
        """Test exceptions without details omit the details key."""
        exc = PetClinicException("Test error", error_code="TEST_ERROR")
        response = create_error_response(exc)

        assert response["error"]["code"] == "TEST_ERROR"
        assert "details" not in response["error"]

    def test_log_exception_context(self):
        """Test clinic exceptions are logged with their context."""
        logger = Mock()
        exc = EntityNotFoundException("Owner", 3)

        log_exception_context(exc, {"path": "/owners/3"}, logger=logger)

        level, message = logger.log.call_args[0]
        extra = logger.log.call_args[1]["extra"]
        assert level == logging.ERROR
        assert message == "Exception with context: Owner not found with id: 3"
        assert extra["exception_data"]["context"] == {"path": "/owners/3"}

    def test_log_exception_context_plain_exception(self):
        """Test other exceptions are logged as unhandled."""
        logger = Mock()

        log_exception_context(
            RuntimeError("boom"), {"path": "/"}, logger=logger, level=logging.WARNING
        )

        level, message = logger.log.call_args[0]
        assert level == logging.WARNING
        assert message == "Unhandled exception: boom"
        assert logger.log.call_args[1]["extra"]["exception_type"] == "RuntimeError"
