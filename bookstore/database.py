"""
Database Configuration Module

SQLAlchemy 2.0 engine, session factory and declarative base for the
bookstore.

Unit of Work Pattern
====================
Every mutating service call runs inside ``unit_of_work(session)``:
1. The service performs its reads, checks and writes on the session
2. If everything succeeds the transaction is committed
3. If anything raises, the transaction is rolled back and the error
   propagates to the caller unchanged

This gives the all-or-nothing behaviour the order workflow needs
(stock decrement + line insert + total update).
"""

import logging
import sqlite3
from collections.abc import Generator, Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from bookstore.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()


# =============================================================================
# SQLite Foreign Keys
# =============================================================================
# SQLite ignores FOREIGN KEY clauses unless the pragma is set per connection.
@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# =============================================================================
# Database Engine
# =============================================================================
def build_engine(database_url: str | None = None, **kwargs) -> Engine:
    """
    Create an engine for the configured database.

    Pool sizing only applies to server databases; SQLite engines are
    created with the driver defaults unless overridden in kwargs.
    """
    url = database_url or settings.database_url
    options = {"echo": settings.db_echo, "pool_pre_ping": True}
    if not url.startswith("sqlite"):
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
        )
    options.update(kwargs)
    return create_engine(url, **options)


engine = build_engine()


# =============================================================================
# Session Factory
# =============================================================================
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


# =============================================================================
# Base Model Class
# =============================================================================
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic uses ``Base.metadata`` to discover tables for migrations.
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Yields a new session per request and closes it when the request ends.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Unit of Work
# =============================================================================
@contextmanager
def unit_of_work(db: Session) -> Iterator[Session]:
    """
    Run a block of work atomically on ``db``.

    Commits when the block completes, rolls back and re-raises otherwise.

    Usage:
        with unit_of_work(db):
            db.add(order)
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise


# =============================================================================
# Utility Functions
# =============================================================================
def create_tables(bind: Engine | None = None) -> None:
    """
    Create all database tables.

    For development and tests; production schemas come from Alembic.
    """
    # Import models so every table is registered on Base.metadata
    import bookstore.models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def drop_tables(bind: Engine | None = None) -> None:
    """Drop all database tables. Never use in production."""
    import bookstore.models  # noqa: F401

    Base.metadata.drop_all(bind=bind or engine)
