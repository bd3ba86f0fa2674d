"""
Vet and Specialty models for the petclinic package.

Specialties are shared name-only tags; the many-to-many link lives in the
``vet_specialties`` association table.
"""

from typing import Any, Dict, List

from sqlalchemy import Column, ForeignKey, Table, UniqueConstraint
from sqlalchemy.orm import Mapped, relationship

from .base import Base, NamedModel, Person

vet_specialties = Table(
    "vet_specialties",
    Base.metadata,
    Column("vet_id", ForeignKey("vets.id", ondelete="CASCADE"), primary_key=True),
    Column(
        "specialty_id",
        ForeignKey("specialties.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Specialty(NamedModel):
    """Named skill tag attachable to any number of vets."""

    __tablename__ = "specialties"

    __table_args__ = (UniqueConstraint("name", name="uq_specialties_name"),)


class Vet(Person):
    """Veterinarian with zero or more specialties."""

    __tablename__ = "vets"

    specialties: Mapped[List[Specialty]] = relationship(
        secondary=vet_specialties,
        order_by="Specialty.name",
        lazy="selectin",
    )

    @property
    def nr_of_specialties(self) -> int:
        """Number of specialties held by this vet."""
        return len(self.specialties)

    @property
    def specialty_names(self) -> List[str]:
        """Specialty names in alphabetical order."""
        return sorted(specialty.name for specialty in self.specialties)

    def add_specialty(self, specialty: Specialty) -> None:
        """Attach a specialty unless one with the same name is already present."""
        if not any(existing.name == specialty.name for existing in self.specialties):
            self.specialties.append(specialty)

    def has_specialty(self, name: str) -> bool:
        """Check for a specialty by name, case-insensitively."""
        wanted = name.lower()
        return any(specialty.name.lower() == wanted for specialty in self.specialties)

    def to_dict(self) -> Dict[str, Any]:
        """Column values plus the specialty list."""
        data = super().to_dict()
        data["specialties"] = [specialty.to_dict() for specialty in self.specialties]
        return data
