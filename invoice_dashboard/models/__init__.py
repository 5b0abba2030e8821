"""ORM Models — SQLAlchemy declarative models for all dashboard entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Customer 1—* Invoice; User and Revenue are independent aggregates

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from invoice_dashboard.models.user import User  # noqa: F401
from invoice_dashboard.models.customer import Customer  # noqa: F401
from invoice_dashboard.models.invoice import Invoice  # noqa: F401
from invoice_dashboard.models.revenue import Revenue  # noqa: F401
