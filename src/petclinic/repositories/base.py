"""
Shared repository plumbing.
"""

import logging
from typing import Generic, Optional, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import DatabaseException, EntityNotFoundException, TransactionException
from ..models import BaseModel

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class BaseRepository(Generic[ModelT]):
    """
    Data access for one model class over an async session.

    The repository never opens or closes sessions; the caller owns the
    session scope.
    """

    model: Type[ModelT]

    def __init__(self, session: AsyncSession):
        self.session = session

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    def _query_failed(self, operation: str, error: SQLAlchemyError) -> DatabaseException:
        logger.error(f"{self.entity_name} {operation} failed: {error}")
        return DatabaseException(
            f"Failed to {operation} {self.entity_name.lower()}",
            error_code="QUERY_FAILED",
            details={"operation": operation, "entity": self.entity_name},
            original_error=error,
        )

    async def find_by_id(self, entity_id: int) -> Optional[ModelT]:
        """Look up an entity by primary key."""
        try:
            return await self.session.get(self.model, entity_id)
        except SQLAlchemyError as e:
            raise self._query_failed("load", e)

    async def get_by_id(self, entity_id: int) -> ModelT:
        """
        Look up an entity by primary key.

        Raises:
            EntityNotFoundException: If no entity has that id
        """
        entity = await self.find_by_id(entity_id)
        if entity is None:
            raise EntityNotFoundException(self.entity_name, entity_id)
        return entity

    async def save(self, entity: ModelT) -> ModelT:
        """
        Insert or update an entity and commit.

        Raises:
            TransactionException: If the commit fails
        """
        is_new = entity.is_new
        try:
            self.session.add(entity)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Saving {self.entity_name} failed: {e}")
            raise TransactionException(
                f"Failed to save {self.entity_name.lower()}",
                operation="save",
                original_error=e,
            )

        logger.info(
            f"{'Created' if is_new else 'Updated'} {self.entity_name} id={entity.id}"
        )
        return entity
