"""
Owner search predicates.

An owner search combines up to three optional criteria. Each criterion
becomes one SQL predicate, or nothing when left blank, and the remaining
predicates are combined with AND.
"""

from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy import ColumnElement, and_, true

from ..models import Owner


def last_name_starts_with(prefix: Optional[str]) -> Optional[ColumnElement[bool]]:
    """Case-insensitive prefix match on the last name."""
    if not prefix:
        return None
    return Owner.last_name.istartswith(prefix, autoescape=True)


def telephone_equals(telephone: Optional[str]) -> Optional[ColumnElement[bool]]:
    """Exact telephone match."""
    if not telephone:
        return None
    return Owner.telephone == telephone


def city_contains(city: Optional[str]) -> Optional[ColumnElement[bool]]:
    """Case-insensitive substring match on the city."""
    if not city:
        return None
    return Owner.city.icontains(city, autoescape=True)


def owner_criteria(
    last_name: Optional[str] = None,
    telephone: Optional[str] = None,
    city: Optional[str] = None,
) -> List[ColumnElement[bool]]:
    """
    Build the predicates for the given criteria.

    Blank criteria contribute nothing, so calling this with no arguments
    returns an empty list (every owner matches).
    """
    predicates = [
        last_name_starts_with(last_name),
        telephone_equals(telephone),
        city_contains(city),
    ]
    return [predicate for predicate in predicates if predicate is not None]


def combine(predicates: List[ColumnElement[bool]]) -> ColumnElement[bool]:
    """AND the predicates together; an empty list matches everything."""
    if not predicates:
        return true()
    return and_(*predicates)


@dataclass(frozen=True)
class OwnerSearchCriteria:
    """Normalized owner search input."""

    last_name: str = ""
    telephone: str = ""
    city: str = ""

    @property
    def uses_combined_filter(self) -> bool:
        """True when telephone or city narrows the search beyond the last name."""
        return bool(self.telephone or self.city)

    @property
    def is_empty(self) -> bool:
        return not (self.last_name or self.telephone or self.city)

    def predicates(self) -> List[ColumnElement[bool]]:
        return owner_criteria(self.last_name, self.telephone, self.city)
