"""
Database Configuration Module

This module sets up SQLAlchemy 2.0 for the People API.

We're using SYNCHRONOUS SQLAlchemy because:
- Simpler to understand and debug
- PostgreSQL with psycopg2 is battle-tested
- Async provides minimal benefit for a small CRUD API

Session Management Pattern
==========================
We use the "session per request" pattern:
1. Request arrives → create a new session
2. Use session for all database operations in that request
3. Commit on success, rollback on failure
4. Close session when request ends

This is implemented using FastAPI's dependency injection, which the
GraphQL context getter depends on.
"""

from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from app.config import get_settings

settings = get_settings()


# =============================================================================
# Database Engine
# =============================================================================
# Key parameters:
# - pool_size: Number of connections to keep open permanently
# - max_overflow: How many extra connections can be created during high load
# - pool_pre_ping: Test connection health before using (prevents stale connections)
# - echo: Log all SQL statements (useful for debugging, disable in production)

def _engine_options(database_url: str) -> dict[str, Any]:
    """Build engine keyword arguments for the configured backend."""
    if database_url.startswith("sqlite"):
        # SQLite uses a single-file or in-memory DB without a sized pool
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_pre_ping": True,
    }


engine = create_engine(
    settings.database_url,
    echo=settings.debug,
    **_engine_options(settings.database_url),
)


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """
    Turn on foreign key enforcement for SQLite connections.

    SQLite ignores FOREIGN KEY clauses (including ON DELETE CASCADE)
    unless this pragma is set on every new connection.
    """
    module = type(dbapi_connection).__module__
    if not module.startswith("sqlite3"):
        return
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


# =============================================================================
# Session Factory
# =============================================================================
# - autocommit=False: We control when to commit
# - autoflush=False: Don't auto-flush before queries (more predictable behavior)

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

    All models inherit from this class:

        class Person(Base):
            __tablename__ = "people"
            ...

    Alembic uses Base.metadata to discover tables for migrations.
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Code before yield creates the session, code after yield releases it.
    The finally block ensures the connection goes back to the pool even
    when the request fails.

    Usage:
        from fastapi import Depends
        from app.database import get_db

        async def get_context(db: Session = Depends(get_db)):
            ...

    Yields:
        SQLAlchemy Session instance
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Utility Functions
# =============================================================================
def create_tables() -> None:
    """
    Create all database tables.

    Useful for development and tests. In production, use Alembic
    migrations instead.
    """
    Base.metadata.create_all(bind=engine)

