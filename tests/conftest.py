"""
Pytest configuration and fixtures for petclinic tests.

Every test gets its own SQLite database file holding the demo data set,
so tests can write freely without affecting each other.
"""

from typing import AsyncGenerator, Dict

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from petclinic.database import SessionManager, create_engine, seed_database
from petclinic.models import Base, PetType
from petclinic.utils.config import AppSettings
from petclinic.web import create_app


@pytest_asyncio.fixture
async def engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """Engine on a fresh database file with the schema created."""
    database_file = tmp_path / "petclinic_test.db"
    test_engine = create_engine(
        f"sqlite+aiosqlite:///{database_file}", use_null_pool=True
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield test_engine

    await test_engine.dispose()


@pytest_asyncio.fixture
async def empty_session_manager(engine: AsyncEngine) -> SessionManager:
    """Session manager over an empty schema."""
    return SessionManager(engine)


@pytest_asyncio.fixture
async def session_manager(engine: AsyncEngine) -> SessionManager:
    """Session manager over a database loaded with the demo data."""
    manager = SessionManager(engine)
    async with manager.get_session() as session:
        await seed_database(session)
    return manager


@pytest_asyncio.fixture
async def session(
    session_manager: SessionManager,
) -> AsyncGenerator[AsyncSession, None]:
    """Session on the seeded database."""
    async with session_manager.get_session() as db_session:
        yield db_session


@pytest_asyncio.fixture
async def client(session_manager: SessionManager) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client driving the application against the seeded database."""
    settings = AppSettings(database_url="sqlite+aiosqlite:///:memory:", seed_data=False)
    app = create_app(settings, session_manager=session_manager)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client


@pytest_asyncio.fixture
async def pet_type_ids(session_manager: SessionManager) -> Dict[str, int]:
    """Seeded pet type ids by name."""
    async with session_manager.get_session() as db_session:
        rows = await db_session.execute(select(PetType.name, PetType.id))
        return {name: type_id for name, type_id in rows}
