"""
Vet persistence.
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from ..models import Vet
from .base import BaseRepository

logger = logging.getLogger(__name__)


class VetRepository(BaseRepository[Vet]):
    """Repository for vets; specialties are always loaded with them."""

    model = Vet

    async def find_all(self) -> List[Vet]:
        """Every vet ordered by id."""
        return await self.find_by_last_name_prefix(None)

    async def find_by_last_name_prefix(self, prefix: Optional[str]) -> List[Vet]:
        """Vets whose last name starts with ``prefix``, case-insensitively."""
        query = select(Vet).order_by(Vet.id)
        if prefix:
            query = query.where(Vet.last_name.istartswith(prefix, autoescape=True))

        logger.debug(f"Loading vets with last name prefix={prefix!r}")
        try:
            result = await self.session.scalars(query)
        except SQLAlchemyError as e:
            raise self._query_failed("list", e)
        return list(result.all())
