"""
Pet and visit Pydantic schemas for form validation.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..utils.datetime_utils import get_today, is_future_date


def _blank_to_none(v):
    if isinstance(v, str) and not v.strip():
        return None
    return v


class PetForm(BaseModel):
    """Schema for adding and editing pets."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    id: Optional[int] = None
    name: str = Field(..., min_length=1, max_length=30, description="Pet's name")
    birth_date: Optional[date] = Field(None, alias="birthDate")
    type_id: Optional[int] = Field(None, alias="type", description="Pet type id")

    @model_validator(mode="before")
    @classmethod
    def require_type_field(cls, data):
        """A form posted without a type still reports it under the type field."""
        if isinstance(data, dict) and "type" not in data and "type_id" not in data:
            data = {**data, "type": None}
        return data

    @field_validator("id", "birth_date", "type_id", mode="before")
    @classmethod
    def blank_is_none(cls, v):
        return _blank_to_none(v)

    @field_validator("birth_date")
    @classmethod
    def validate_birth_date(cls, v: Optional[date]) -> Optional[date]:
        """Birth date cannot be in the future."""
        if v is not None and is_future_date(v):
            raise ValueError("Birth date cannot be in the future")
        return v

    @field_validator("type_id")
    @classmethod
    def validate_type(cls, v: Optional[int]) -> Optional[int]:
        if v is None:
            raise ValueError("is required")
        return v


class VisitForm(BaseModel):
    """Schema for booking a visit."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    visit_date: date = Field(default_factory=get_today, alias="date")
    description: str = Field(..., min_length=1, max_length=255)

    @field_validator("visit_date", mode="before")
    @classmethod
    def blank_date_is_today(cls, v):
        """An empty date field books the visit for today."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return get_today()
        return v
