"""Database package: engine handle, session dependency, base."""

from fittrack.db.session import Database, get_database, get_db

__all__ = ["Database", "get_database", "get_db"]
