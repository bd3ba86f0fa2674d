"""
Database session management utilities for the petclinic package.

This module provides the async session factory, per-request session scopes
and schema initialization for the clinic database.
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Optional

from sqlalchemy import MetaData, text
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from .connection import close_engine

logger = logging.getLogger(__name__)


class SessionManager:
    """Manages database sessions and schema setup."""

    def __init__(
        self, engine: AsyncEngine, session_config: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize session manager with database engine.

        Args:
            engine: SQLAlchemy async engine
            session_config: Optional session configuration overrides
        """
        self.engine = engine
        self._is_initialized = False

        # Entities are rendered after commit, so attributes must stay loaded
        default_config = {
            "expire_on_commit": False,
            "autoflush": True,
        }

        if session_config:
            default_config.update(session_config)

        self.session_factory = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            autoflush=default_config["autoflush"],
            expire_on_commit=default_config["expire_on_commit"],
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Context manager for database sessions with automatic cleanup.

        Yields:
            Database session

        Example:
            async with session_manager.get_session() as session:
                owners = await OwnerRepository(session).count()
        """
        session = self.session_factory()
        try:
            yield session
        except Exception as e:
            await session.rollback()
            logger.error(f"Session error, rolling back: {e}")
            raise
        finally:
            await session.close()

    @asynccontextmanager
    async def get_transaction(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Context manager for a session inside one transaction.

        The transaction commits when the block exits normally and rolls back
        when it raises.
        """
        async with self.get_session() as session:
            async with session.begin():
                yield session

    async def health_check(self) -> Dict[str, Any]:
        """
        Run a trivial query and report timing.

        Returns:
            Dictionary with ``status`` and check details
        """
        health_status: Dict[str, Any] = {"status": "healthy", "checks": {}}

        try:
            start_time = time.time()
            async with self.get_session() as session:
                await session.execute(text("SELECT 1"))
            health_status["checks"]["basic_query"] = {
                "status": "pass",
                "response_time": round((time.time() - start_time) * 1000, 2),
            }
        except OperationalError as e:
            health_status["status"] = "unhealthy"
            health_status["checks"]["connection"] = {
                "status": "fail",
                "error": str(e),
                "error_type": "OperationalError",
            }
            logger.error(f"Database operational error during health check: {e}")
        except SQLAlchemyError as e:
            health_status["status"] = "unhealthy"
            health_status["checks"]["database"] = {
                "status": "fail",
                "error": str(e),
                "error_type": "SQLAlchemyError",
            }
            logger.error(f"Database error during health check: {e}")

        return health_status

    async def initialize_database(self, metadata: Optional[MetaData] = None) -> bool:
        """
        Create the schema from model metadata.

        Args:
            metadata: SQLAlchemy metadata object containing table definitions

        Returns:
            True if initialization successful, False otherwise
        """
        logger.info("Starting database initialization...")

        health = await self.health_check()
        if health["status"] != "healthy":
            logger.error("Database health check failed during initialization")
            return False

        try:
            if metadata is not None:
                async with self.engine.begin() as conn:
                    await conn.run_sync(metadata.create_all)
                logger.info("Database tables created successfully")
        except SQLAlchemyError as e:
            logger.error(f"Database initialization failed: {e}")
            return False

        self._is_initialized = True
        return True

    async def close_all_sessions(self) -> None:
        """Dispose of the engine and every pooled connection."""
        await close_engine(self.engine)

    @property
    def is_initialized(self) -> bool:
        """Check if the database has been initialized."""
        return self._is_initialized


# Global session manager instance (will be initialized by application)
_session_manager: Optional[SessionManager] = None


def initialize_session_manager(engine: AsyncEngine) -> SessionManager:
    """
    Initialize the global session manager.

    Args:
        engine: SQLAlchemy async engine

    Returns:
        Initialized session manager
    """
    global _session_manager
    _session_manager = SessionManager(engine)
    logger.info("Session manager initialized")
    return _session_manager


def get_session_manager() -> SessionManager:
    """
    Get the global session manager instance.

    Raises:
        RuntimeError: If session manager is not initialized
    """
    if _session_manager is None:
        raise RuntimeError(
            "Session manager not initialized. Call initialize_session_manager() first."
        )
    return _session_manager


@asynccontextmanager
async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Get a database session from the global session manager.

    Raises:
        RuntimeError: If session manager is not initialized
    """
    manager = get_session_manager()
    async with manager.get_session() as session:
        yield session


@asynccontextmanager
async def get_transaction() -> AsyncGenerator[AsyncSession, None]:
    """
    Get a database transaction from the global session manager.

    Raises:
        RuntimeError: If session manager is not initialized
    """
    manager = get_session_manager()
    async with manager.get_transaction() as session:
        yield session
