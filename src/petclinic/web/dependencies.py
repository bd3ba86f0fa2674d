"""
FastAPI dependencies: one database session per request and the
repositories built on it.
"""

from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ..database.session import SessionManager
from ..repositories import (
    OwnerRepository,
    PetRepository,
    VetRepository,
    VisitRepository,
)


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield a session from the application's session manager."""
    manager: SessionManager = request.app.state.session_manager
    async with manager.get_session() as session:
        yield session


def get_owner_repository(
    session: AsyncSession = Depends(get_db_session),
) -> OwnerRepository:
    return OwnerRepository(session)


def get_pet_repository(
    session: AsyncSession = Depends(get_db_session),
) -> PetRepository:
    return PetRepository(session)


def get_vet_repository(
    session: AsyncSession = Depends(get_db_session),
) -> VetRepository:
    return VetRepository(session)


def get_visit_repository(
    session: AsyncSession = Depends(get_db_session),
) -> VisitRepository:
    return VisitRepository(session)
