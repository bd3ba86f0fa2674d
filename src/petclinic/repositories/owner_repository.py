"""
Owner persistence, including the paginated owner search.
"""

import logging
from typing import List, Optional

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.exc import SQLAlchemyError

from ..models import Owner
from ..search.owner_search import combine, last_name_starts_with, owner_criteria
from ..search.pagination import Page, PageRequest
from .base import BaseRepository

logger = logging.getLogger(__name__)


class OwnerRepository(BaseRepository[Owner]):
    """Repository for owners and their pets."""

    model = Owner

    async def find_by_last_name_prefix(
        self, prefix: Optional[str], page_request: Optional[PageRequest] = None
    ) -> Page[Owner]:
        """
        Page through owners whose last name starts with ``prefix``.

        A blank prefix returns every owner.
        """
        page_request = page_request or PageRequest()
        logger.debug(f"Owner search by last name prefix={prefix!r} {page_request}")
        predicate = last_name_starts_with(prefix)
        return await self._find_page(
            [predicate] if predicate is not None else [], page_request
        )

    async def find_by_criteria(
        self,
        last_name: Optional[str] = None,
        telephone: Optional[str] = None,
        city: Optional[str] = None,
        page_request: Optional[PageRequest] = None,
    ) -> Page[Owner]:
        """
        Page through owners matching every supplied criterion.

        Args:
            last_name: Case-insensitive last name prefix
            telephone: Exact telephone number
            city: Case-insensitive part of the city name
            page_request: Page to return (first page of 5 by default)

        Returns:
            Page of owners ordered by id, with totals for the whole match
        """
        page_request = page_request or PageRequest()
        logger.debug(
            f"Owner search last_name={last_name!r} telephone={telephone!r} "
            f"city={city!r} {page_request}"
        )
        return await self._find_page(
            owner_criteria(last_name, telephone, city), page_request
        )

    async def _find_page(
        self, predicates: List[ColumnElement[bool]], page_request: PageRequest
    ) -> Page[Owner]:
        condition = combine(predicates)
        count_query = select(func.count()).select_from(Owner).where(condition)
        content_query = (
            select(Owner)
            .where(condition)
            .order_by(Owner.id)
            .limit(page_request.size)
            .offset(page_request.offset)
        )

        try:
            total = await self.session.scalar(count_query)
            owners = list((await self.session.scalars(content_query)).all())
        except SQLAlchemyError as e:
            raise self._query_failed("search", e)

        return Page(
            content=owners,
            number=page_request.page,
            size=page_request.size,
            total_elements=total or 0,
        )

    async def find_duplicates(
        self, first_name: str, last_name: str, telephone: str
    ) -> List[Owner]:
        """Owners with the same name and telephone, ignoring name case."""
        query = (
            select(Owner)
            .where(
                func.lower(Owner.first_name) == func.lower(first_name),
                func.lower(Owner.last_name) == func.lower(last_name),
                Owner.telephone == telephone,
            )
            .order_by(Owner.id)
        )
        try:
            return list((await self.session.scalars(query)).all())
        except SQLAlchemyError as e:
            raise self._query_failed("check", e)

    async def count(self) -> int:
        try:
            total = await self.session.scalar(select(func.count()).select_from(Owner))
        except SQLAlchemyError as e:
            raise self._query_failed("count", e)
        return total or 0
