"""Async Session Factory — provides async DB sessions outside the API process.

Invariants:
    - Meant for scripts (seed) and one-off maintenance tasks
    - Caller owns the engine returned alongside the factory and must dispose it

Design Decisions:
    - Separate from infrastructure/database.py: scripts need neither pooling
      options nor the SQLAlchemy → DatabaseError mapping
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)


def create_session_factory(
    database_url: str,
) -> tuple[AsyncEngine, async_sessionmaker[AsyncSession]]:
    """Create an async engine and session factory for the given database URL."""
    engine = create_async_engine(database_url, echo=False)
    return engine, async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
