"""
Pet and PetType models for the petclinic package.
"""

from datetime import date
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Date, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel, NamedModel

if TYPE_CHECKING:
    from .owner import Owner
    from .visit import Visit


class PetType(NamedModel):
    """Kind of animal (cat, dog, lizard, ...)."""

    __tablename__ = "types"

    __table_args__ = (UniqueConstraint("name", name="uq_types_name"),)


class Pet(BaseModel):
    """
    Pet registered by an owner.

    ``owner_id`` is the link back to the owner. The ``owner`` relationship is
    never lazy loaded from the database; it is filled only by queries that
    join the owner in explicitly (or from the session identity map).
    """

    __tablename__ = "pets"

    name: Mapped[str] = mapped_column(String(30), nullable=False, index=True)

    birth_date: Mapped[Optional[date]] = mapped_column(
        Date, nullable=True, comment="Pet's birth date"
    )

    type_id: Mapped[int] = mapped_column(
        ForeignKey("types.id"), nullable=False, comment="Kind of animal"
    )

    owner_id: Mapped[int] = mapped_column(
        ForeignKey("owners.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Owning owner",
    )

    type: Mapped[PetType] = relationship(lazy="joined")

    owner: Mapped["Owner"] = relationship(
        back_populates="pets", lazy="raise_on_sql"
    )

    visits: Mapped[List["Visit"]] = relationship(
        back_populates="pet",
        cascade="all, delete-orphan",
        order_by="Visit.visit_date",
        lazy="selectin",
    )

    def add_visit(self, visit: "Visit") -> None:
        """Append a visit to this pet's history."""
        self.visits.append(visit)

    def __str__(self) -> str:
        return self.name
