"""Database Infrastructure — async session factory and SQLAlchemy Base.

Invariants:
    - One async engine per DatabaseSessionManager (see infrastructure/database.py)
    - All sessions are async (AsyncSession)

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for local runs and tests
"""
