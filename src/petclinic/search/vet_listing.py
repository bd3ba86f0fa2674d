"""
In-memory filtering and pagination of the vet list.

The full vet list is small, so it is fetched once per request and filtered
and sliced in Python.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..models import Vet
from .pagination import Page, paginate

VET_PAGE_SIZE = 5

# Specialty selector matching vets without any specialty
NO_SPECIALTY = "none"


def filter_vets_by_specialty(vets: Iterable[Vet], selector: Optional[str]) -> List[Vet]:
    """
    Keep the vets matching a specialty selector.

    Args:
        vets: Vets to filter, order is preserved
        selector: Blank for all vets, ``"none"`` for vets without specialties,
            otherwise a specialty name compared case-insensitively

    Returns:
        Matching vets
    """
    if not selector:
        return list(vets)
    if selector.lower() == NO_SPECIALTY:
        return [vet for vet in vets if vet.nr_of_specialties == 0]
    return [vet for vet in vets if vet.has_specialty(selector)]


def specialty_names(vets: Iterable[Vet]) -> List[str]:
    """Distinct specialty names held by the given vets, sorted."""
    return sorted({name for vet in vets for name in vet.specialty_names})


@dataclass
class VetListing:
    """One rendered page of the vet list plus the filter state around it."""

    page: Page[Vet]
    specialties: List[str]
    selected_specialty: Optional[str] = None
    last_name: str = ""

    def to_context(self) -> Dict[str, Any]:
        """Attributes handed to the vet list template."""
        return {
            "specialties": self.specialties,
            "selectedSpecialty": self.selected_specialty,
            "lastName": self.last_name,
            "currentPage": self.page.number,
            "totalPages": self.page.total_pages,
            "hasPrevious": self.page.has_previous,
            "hasNext": self.page.has_next,
            "totalItems": self.page.total_elements,
            "listVets": self.page.content,
        }


def build_vet_listing(
    vets: Sequence[Vet],
    page: int = 1,
    specialty: Optional[str] = None,
    last_name: Optional[str] = None,
    size: int = VET_PAGE_SIZE,
) -> VetListing:
    """
    Filter ``vets`` by specialty and cut out the requested page.

    ``vets`` should already be narrowed by last name; the specialty choices
    offered are taken from that set before the specialty filter applies.
    """
    filtered = filter_vets_by_specialty(vets, specialty)
    return VetListing(
        page=paginate(filtered, page, size),
        specialties=specialty_names(vets),
        selected_specialty=specialty or None,
        last_name=last_name or "",
    )
