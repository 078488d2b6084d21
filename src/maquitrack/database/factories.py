"""Database factory functions for creating database instances."""

import logging
import os
from pathlib import Path
from typing import Optional

from maquitrack.database.sqlalchemy_db import SQLAlchemyDatabase

logger = logging.getLogger(__name__)

DB_PATH_ENV = "MAQUITRACK_DB_PATH"
DEFAULT_DB_DIR = Path.home() / ".maquitrack"
DEFAULT_DB_NAME = "maquitrack.db"
IN_MEMORY = ":memory:"


def resolve_database_path(database_path: Optional[str] = None) -> str:
    """Pick the SQLite file to open.

    An explicit path wins, then the MAQUITRACK_DB_PATH environment variable,
    then ~/.maquitrack/maquitrack.db (the directory is created on demand).
    """
    if database_path:
        return database_path

    from_env = os.environ.get(DB_PATH_ENV)
    if from_env:
        return from_env

    DEFAULT_DB_DIR.mkdir(parents=True, exist_ok=True)
    return str(DEFAULT_DB_DIR / DEFAULT_DB_NAME)


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to the SQLite file, or ":memory:" for a throwaway
            database. See resolve_database_path for the fallbacks.

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    path = resolve_database_path(database_path)
    logger.debug("Opening SQLite database at %s", path)
    if path == IN_MEMORY:
        return SQLAlchemyDatabase("sqlite://")
    return SQLAlchemyDatabase(f"sqlite:///{path}")
