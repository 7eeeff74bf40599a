"""Database configuration and session management."""

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from backend.config import settings


class Base(DeclarativeBase):
    """SQLAlchemy declarative base."""

    pass


# Created on first use so tests can run without a configured database
_engine = None
_SessionLocal = None


def get_engine() -> Engine:
    """Get or create the process-wide pooled engine."""
    global _engine
    if _engine is None:
        _engine = create_engine(
            settings.sqlalchemy_url(),
            pool_size=settings.db_pool_size,
            pool_pre_ping=True,  # Test connections before use
            pool_recycle=300,  # Recycle connections after 5 minutes
        )
    return _engine


def get_session_factory() -> sessionmaker:
    """Get or create session factory."""
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=get_engine())
    return _SessionLocal


def init_db(engine: Engine | None = None):
    """Create the tables. Connects, so an unreachable database raises here."""
    from backend.db import tables  # noqa: F401

    Base.metadata.create_all(bind=engine or get_engine())
