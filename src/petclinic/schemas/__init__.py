"""
Pydantic schemas for form validation and API serialization.
"""

from .owner import OwnerForm, OwnerSearchForm
from .pet import PetForm, VisitForm
from .vet import SpecialtyResponse, VetResponse, VetsResponse

__all__ = [
    # Owner schemas
    "OwnerForm",
    "OwnerSearchForm",
    # Pet and visit schemas
    "PetForm",
    "VisitForm",
    # Vet schemas
    "SpecialtyResponse",
    "VetResponse",
    "VetsResponse",
]
