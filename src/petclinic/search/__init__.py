"""
Search and pagination for owners and vets.
"""

from .owner_search import OwnerSearchCriteria, combine, owner_criteria
from .pagination import Page, PageRequest, paginate
from .vet_listing import (
    NO_SPECIALTY,
    VET_PAGE_SIZE,
    VetListing,
    build_vet_listing,
    filter_vets_by_specialty,
    specialty_names,
)

__all__ = [
    "Page",
    "PageRequest",
    "paginate",
    "OwnerSearchCriteria",
    "owner_criteria",
    "combine",
    "NO_SPECIALTY",
    "VET_PAGE_SIZE",
    "VetListing",
    "build_vet_listing",
    "filter_vets_by_specialty",
    "specialty_names",
]
