"""
Owner model for the petclinic package.

This module contains the Owner SQLAlchemy model with contact details and
the ordered collection of pets the owner brings to the clinic.
"""

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import CheckConstraint, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Person

if TYPE_CHECKING:
    from .pet import Pet
    from .visit import Visit


class Owner(Person):
    """
    Pet owner with address and telephone.

    The ``pets`` collection is ordered by name and loaded with a separate
    ``IN`` select, so queries over owners return one row per owner no matter
    how many pets each one has.
    """

    __tablename__ = "owners"

    address: Mapped[str] = mapped_column(
        String(255), nullable=False, comment="Street address"
    )

    city: Mapped[str] = mapped_column(
        String(80), nullable=False, comment="City of residence"
    )

    telephone: Mapped[str] = mapped_column(
        String(10), nullable=False, comment="Ten digit telephone number"
    )

    pets: Mapped[List["Pet"]] = relationship(
        back_populates="owner",
        cascade="all, delete-orphan",
        order_by="Pet.name",
        lazy="selectin",
    )

    __table_args__ = (
        CheckConstraint("length(telephone) = 10", name="ck_owners_telephone_length"),
        Index("idx_owners_city", "city"),
        Index("idx_owners_telephone", "telephone"),
    )

    def add_pet(self, pet: "Pet") -> None:
        """Attach a new pet to this owner."""
        if pet.is_new:
            self.pets.append(pet)

    def get_pet(self, name: str, ignore_new: bool = False) -> Optional["Pet"]:
        """
        Find a pet by name, case-insensitively.

        Args:
            name: Pet name to look for
            ignore_new: Skip pets that have not been persisted yet

        Returns:
            The matching pet, or None
        """
        wanted = name.lower()
        for pet in self.pets:
            if ignore_new and pet.is_new:
                continue
            if pet.name and pet.name.lower() == wanted:
                return pet
        return None

    def get_pet_by_id(self, pet_id: int) -> Optional["Pet"]:
        """Find one of this owner's persisted pets by id."""
        for pet in self.pets:
            if not pet.is_new and pet.id == pet_id:
                return pet
        return None

    def add_visit(self, pet_id: int, visit: "Visit") -> None:
        """
        Record a visit for one of this owner's pets.

        Raises:
            ValueError: If the pet does not belong to this owner
        """
        pet = self.get_pet_by_id(pet_id)
        if pet is None:
            raise ValueError(f"Invalid Pet identifier: {pet_id}")
        pet.add_visit(visit)
