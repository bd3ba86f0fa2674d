"""
Owner Pydantic schemas for form validation.

Field aliases match the HTML form field names, so validation errors come
back keyed the way the templates look them up.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..utils.validation import (
    sanitize_string,
    validate_search_telephone,
    validate_telephone,
)


class OwnerForm(BaseModel):
    """Schema for creating and editing owners."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    id: Optional[int] = Field(None, description="Owner id, set when editing")
    first_name: str = Field(..., alias="firstName", min_length=1, max_length=30)
    last_name: str = Field(..., alias="lastName", min_length=1, max_length=30)
    address: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=80)
    telephone: str = Field(..., min_length=1)

    @field_validator("id", mode="before")
    @classmethod
    def blank_id_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("first_name", "last_name", "address", "city")
    @classmethod
    def normalize_text(cls, v: str) -> str:
        """Collapse inner whitespace."""
        return sanitize_string(v)

    @field_validator("telephone")
    @classmethod
    def validate_owner_telephone(cls, v: str) -> str:
        """Telephone must be exactly ten digits."""
        result = validate_telephone(v)
        if not result.is_valid:
            raise ValueError(result.errors[0].message)
        return result.value


class OwnerSearchForm(BaseModel):
    """Criteria of the find owners form; every field is optional."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    last_name: str = Field("", alias="lastName")
    telephone: str = Field("")
    city: str = Field("")

    @field_validator("last_name", "city", mode="before")
    @classmethod
    def none_is_blank(cls, v):
        return sanitize_string(v)

    @field_validator("telephone", mode="before")
    @classmethod
    def validate_search_phone(cls, v):
        """Blank, or digits only."""
        result = validate_search_telephone(v)
        if not result.is_valid:
            raise ValueError(result.errors[0].message)
        return result.value
