"""Revenue ORM — monthly revenue figures for the dashboard chart.

Invariants:
    - One row per month label
    - Reporting only: nothing in the API writes here
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from invoice_dashboard.db.base import Base, new_id


class Revenue(Base):
    __tablename__ = "revenue"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    month: Mapped[str] = mapped_column(String(20), nullable=False, unique=True)
    revenue: Mapped[int] = mapped_column(Integer, nullable=False)
