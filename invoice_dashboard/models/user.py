"""User ORM — dashboard login accounts.

Invariants:
    - email is unique
    - password holds a bcrypt hash, never plaintext
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from invoice_dashboard.db.base import Base, new_id


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
