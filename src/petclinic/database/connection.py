"""
Database connection utilities for the petclinic package.

This module provides async SQLAlchemy engine configuration for the two
supported backends: PostgreSQL through asyncpg and SQLite through aiosqlite.
"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import AsyncAdaptedQueuePool, NullPool, StaticPool

from ..exceptions import ConfigurationException
from ..utils.config import ConfigError, DatabaseURLValidator

logger = logging.getLogger(__name__)

ASYNC_DRIVERS = {
    "postgresql": "postgresql+asyncpg",
    "sqlite": "sqlite+aiosqlite",
}


class DatabaseConfig:
    """Configuration class for database connections."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 10,
        max_overflow: int = 20,
        pool_timeout: int = 30,
        pool_recycle: int = 3600,
        echo: bool = False,
    ):
        """
        Initialize database configuration.

        Args:
            database_url: PostgreSQL or SQLite connection URL
            pool_size: Number of connections to maintain in the pool
            max_overflow: Maximum number of connections that can overflow the pool
            pool_timeout: Timeout for getting connection from pool
            pool_recycle: Time in seconds to recycle connections
            echo: Whether to echo SQL statements

        Raises:
            ConfigurationException: If the URL is not usable
        """
        self.database_url = database_url
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.pool_timeout = pool_timeout
        self.pool_recycle = pool_recycle
        self.echo = echo

        try:
            self.backend = DatabaseURLValidator.validate_url(database_url)["backend"]
        except ConfigError as e:
            raise ConfigurationException(
                f"Invalid database URL: {e}",
                config_key="database_url",
                config_value=database_url,
            )

    @property
    def is_sqlite(self) -> bool:
        return self.backend == "sqlite"

    @property
    def is_memory(self) -> bool:
        """True for in-memory SQLite databases."""
        database = make_url(self.database_url).database
        return self.is_sqlite and database in (None, "", ":memory:")

    def get_async_url(self) -> str:
        """Convert database URL to its async driver form if needed."""
        url = make_url(self.database_url)
        if "+" not in url.drivername:
            url = url.set(drivername=ASYNC_DRIVERS[self.backend])
        return url.render_as_string(hide_password=False)


def create_engine(
    database_url: str,
    pool_size: int = 10,
    max_overflow: int = 20,
    pool_timeout: int = 30,
    pool_recycle: int = 3600,
    pool_pre_ping: bool = True,
    echo: bool = False,
    use_null_pool: bool = False,
    connect_args: Optional[dict] = None,
) -> AsyncEngine:
    """
    Create an async SQLAlchemy engine with proper configuration.

    SQLite file databases get a ``NullPool``; in-memory SQLite shares a single
    connection through ``StaticPool`` so every session sees the same data.

    Args:
        database_url: Database connection URL
        pool_size: Number of connections to maintain in the pool
        max_overflow: Maximum number of connections that can overflow the pool
        pool_timeout: Timeout for getting connection from pool
        pool_recycle: Time in seconds to recycle connections
        pool_pre_ping: Whether to validate connections before use
        echo: Whether to echo SQL statements
        use_null_pool: Whether to use NullPool (useful for testing)
        connect_args: Additional connection arguments

    Returns:
        Configured async SQLAlchemy engine

    Raises:
        ConfigurationException: If database URL is invalid
    """
    config = DatabaseConfig(
        database_url=database_url,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_timeout=pool_timeout,
        pool_recycle=pool_recycle,
        echo=echo,
    )

    async_url = config.get_async_url()

    engine_kwargs: Dict[str, Any] = {"echo": config.echo}

    if connect_args:
        engine_kwargs["connect_args"] = connect_args

    if config.is_memory:
        engine_kwargs["poolclass"] = StaticPool
        engine_kwargs.setdefault("connect_args", {})["check_same_thread"] = False
    elif use_null_pool or config.is_sqlite:
        engine_kwargs["poolclass"] = NullPool
    else:
        engine_kwargs.update(
            {
                "poolclass": AsyncAdaptedQueuePool,
                "pool_size": config.pool_size,
                "max_overflow": config.max_overflow,
                "pool_timeout": config.pool_timeout,
                "pool_recycle": config.pool_recycle,
                "pool_pre_ping": pool_pre_ping,
            }
        )

    engine = create_async_engine(async_url, **engine_kwargs)
    logger.info(f"Created async database engine for {config.backend} backend")
    return engine


async def close_engine(engine: AsyncEngine) -> None:
    """
    Properly close the database engine and all connections.

    Args:
        engine: SQLAlchemy async engine to close
    """
    await engine.dispose()
    logger.info("Database engine closed successfully")
