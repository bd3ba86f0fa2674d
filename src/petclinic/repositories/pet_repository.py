"""
Pet and pet type persistence.
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from ..exceptions import TransactionException
from ..models import Owner, Pet, PetType
from .base import BaseRepository

logger = logging.getLogger(__name__)


class PetRepository(BaseRepository[Pet]):
    """Repository for pets and the pet type lookup table."""

    model = Pet

    async def find_pet_types(self) -> List[PetType]:
        """All pet types ordered by name."""
        try:
            result = await self.session.scalars(select(PetType).order_by(PetType.name))
        except SQLAlchemyError as e:
            raise self._query_failed("list types for", e)
        return list(result.all())

    async def find_pet_type(self, type_id: int) -> Optional[PetType]:
        try:
            return await self.session.get(PetType, type_id)
        except SQLAlchemyError as e:
            raise self._query_failed("load type for", e)

    async def delete(self, owner: Owner, pet: Pet) -> None:
        """
        Remove a pet from its owner, deleting its visits with it.

        Raises:
            TransactionException: If the commit fails
        """
        pet_id = pet.id
        try:
            owner.pets.remove(pet)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Deleting Pet id={pet_id} failed: {e}")
            raise TransactionException(
                "Failed to delete pet", operation="delete", original_error=e
            )
        logger.info(f"Deleted Pet id={pet_id} of Owner id={owner.id}")
