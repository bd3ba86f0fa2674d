"""
Vet Pydantic schemas for the JSON vet list.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class SpecialtyResponse(BaseModel):
    """Schema for a specialty in API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class VetResponse(BaseModel):
    """Schema for a vet in API responses."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    specialties: List[SpecialtyResponse] = Field(default_factory=list)
    nr_of_specialties: int = Field(0, alias="nrOfSpecialties")


class VetsResponse(BaseModel):
    """Wrapper object serialized as ``{"vetList": [...]}``."""

    model_config = ConfigDict(populate_by_name=True)

    vet_list: List[VetResponse] = Field(default_factory=list, alias="vetList")
