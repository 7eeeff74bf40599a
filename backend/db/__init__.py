"""Database package."""

from backend.db.base import Base, get_engine, get_session_factory, init_db
from backend.db.store import JobRoleStore
from backend.db.tables import JobRole

__all__ = [
    "Base",
    "get_engine",
    "get_session_factory",
    "init_db",
    "JobRole",
    "JobRoleStore",
]
