"""Invoice ORM — billed amounts owed by a customer.

Invariants:
    - amount is integer cents (never float dollars)
    - status is constrained to 'pending' | 'paid' at the database level
    - customer_id is required and references customers.id

Design Decisions:
    - CHECK constraint over a native ENUM type: identical on PostgreSQL and SQLite,
      and no ALTER TYPE migration if statuses are added
    - date indexed: every listing orders by date desc
"""

from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from invoice_dashboard.db.base import Base, new_id


class Invoice(Base):
    __tablename__ = "invoices"
    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'paid')", name="ck_invoices_status",
        ),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    customer_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("customers.id"), nullable=False, index=True,
    )
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        default=lambda: datetime.now(timezone.utc),
    )

    customer: Mapped["Customer"] = relationship(
        "Customer", back_populates="invoices",
    )
