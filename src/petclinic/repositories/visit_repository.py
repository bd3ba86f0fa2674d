"""
Visit persistence.
"""

import logging
from datetime import date
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import contains_eager

from ..models import Owner, Pet, Visit
from .base import BaseRepository

logger = logging.getLogger(__name__)


class VisitRepository(BaseRepository[Visit]):
    """Repository for visits."""

    model = Visit

    async def find_between(self, start: date, end: date) -> List[Visit]:
        """
        Visits dated within ``[start, end]``, earliest first.

        Each visit comes back with its pet, the pet type and the owner
        loaded by the same query, so rendering needs no further round trips.
        """
        query = (
            select(Visit)
            .join(Visit.pet)
            .join(Owner, Pet.owner_id == Owner.id)
            .options(
                contains_eager(Visit.pet).contains_eager(Pet.owner),
                contains_eager(Visit.pet).joinedload(Pet.type),
            )
            .where(Visit.visit_date.between(start, end))
            .order_by(Visit.visit_date, Visit.id)
        )

        logger.debug(f"Loading visits between {start} and {end}")
        try:
            result = await self.session.scalars(query)
        except SQLAlchemyError as e:
            raise self._query_failed("list", e)
        return list(result.unique().all())
