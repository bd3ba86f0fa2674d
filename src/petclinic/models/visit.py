"""
Visit model for the petclinic package.
"""

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..utils.datetime_utils import get_today
from .base import BaseModel

if TYPE_CHECKING:
    from .pet import Pet


class Visit(BaseModel):
    """A dated visit of a pet to the clinic."""

    __tablename__ = "visits"

    pet_id: Mapped[int] = mapped_column(
        ForeignKey("pets.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Visiting pet",
    )

    visit_date: Mapped[date] = mapped_column(
        Date, nullable=False, default=get_today, comment="Date of the visit"
    )

    description: Mapped[str] = mapped_column(
        String(255), nullable=False, comment="Reason for the visit"
    )

    # Only populated by queries that join the pet in explicitly
    pet: Mapped["Pet"] = relationship(back_populates="visits", lazy="raise_on_sql")

    __table_args__ = (Index("idx_visits_visit_date", "visit_date"),)
