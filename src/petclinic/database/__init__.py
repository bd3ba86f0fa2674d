"""
Database connection, session management, and seed data utilities.

This module provides async SQLAlchemy engine configuration, session management
and the reference data set for the clinic database.
"""

from .connection import DatabaseConfig, close_engine, create_engine
from .seed import seed_database
from .session import (
    SessionManager,
    get_session,
    get_session_manager,
    get_transaction,
    initialize_session_manager,
)

__all__ = [
    # Connection utilities
    "DatabaseConfig",
    "create_engine",
    "close_engine",
    # Session management
    "SessionManager",
    "initialize_session_manager",
    "get_session_manager",
    "get_session",
    "get_transaction",
    # Reference data
    "seed_database",
]
