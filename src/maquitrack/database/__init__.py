"""Database layer for maquitrack application."""

from maquitrack.database.base import Database
from maquitrack.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
