"""Customer ORM — invoice owners.

Invariants:
    - Read-only from the API; rows come from the seed script
    - Deleting a customer with invoices is not handled (FK restricts it)
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from invoice_dashboard.db.base import Base, new_id


class Customer(Base):
    """Customer — owns invoices through invoices.customer_id."""
    __tablename__ = "customers"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    image_url: Mapped[str] = mapped_column(String(255), nullable=False)

    invoices: Mapped[list["Invoice"]] = relationship(
        "Invoice", back_populates="customer",
    )
