"""SQLAlchemy Declarative Base — shared base class for all ORM models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata
"""

import uuid

from sqlalchemy.orm import DeclarativeBase


def new_id() -> str:
    """Opaque text primary key for new rows."""
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    """Base class for all dashboard ORM models."""
    pass
