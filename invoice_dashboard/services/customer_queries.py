"""Customer Queries — select-control options and the aggregated customers table.

Invariants:
    - Customers ordered by name ascending
    - Table aggregates: total_invoices counts every invoice, totals only their own status
    - Customers without invoices appear with zero totals (LEFT JOIN)

Design Decisions:
    - Raw parameterized SQL for the grouped join: reads as the report it is
    - LOWER(..) LIKE LOWER(:pattern) instead of ILIKE: runs on PostgreSQL and SQLite
"""

import logging

from sqlalchemy import select, text

from invoice_dashboard.core.formatting import format_currency
from invoice_dashboard.infrastructure.database import DatabaseSessionManager
from invoice_dashboard.models.customer import Customer
from invoice_dashboard.schemas.customer import CustomerField, CustomerTableRow
from invoice_dashboard.services.query_helpers import fetch_guard

logger = logging.getLogger(__name__)

FILTERED_CUSTOMERS_SQL = text(r"""
    SELECT
      customers.id,
      customers.name,
      customers.email,
      customers.image_url,
      COUNT(invoices.id) AS total_invoices,
      COALESCE(SUM(CASE WHEN invoices.status = 'pending' THEN invoices.amount ELSE 0 END), 0) AS total_pending,
      COALESCE(SUM(CASE WHEN invoices.status = 'paid' THEN invoices.amount ELSE 0 END), 0) AS total_paid
    FROM customers
    LEFT JOIN invoices ON customers.id = invoices.customer_id
    WHERE
      LOWER(customers.name) LIKE :pattern ESCAPE '\' OR
      LOWER(customers.email) LIKE :pattern ESCAPE '\'
    GROUP BY customers.id, customers.name, customers.email, customers.image_url
    ORDER BY customers.name ASC
""")


def like_pattern(query: str) -> str:
    """Lowercased substring LIKE pattern with wildcards in the query escaped."""
    escaped = (
        query.lower()
        .replace("\\", "\\\\")
        .replace("%", "\\%")
        .replace("_", "\\_")
    )
    return f"%{escaped}%"


class CustomerQueries:
    """Read access to customers."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self.db_manager = db_manager

    async def fetch_customers(self) -> list[CustomerField]:
        stmt = select(Customer.id, Customer.name).order_by(Customer.name.asc())
        with fetch_guard("Failed to fetch all customers."):
            async with self.db_manager.session() as db:
                rows = (await db.execute(stmt)).all()
        return [CustomerField(id=row.id, name=row.name) for row in rows]

    async def fetch_filtered_customers(self, query: str) -> list[CustomerTableRow]:
        with fetch_guard("Failed to fetch customer table."):
            async with self.db_manager.session() as db:
                result = await db.execute(
                    FILTERED_CUSTOMERS_SQL, {"pattern": like_pattern(query)},
                )
                rows = result.mappings().all()

        return [
            CustomerTableRow(
                id=row["id"],
                name=row["name"],
                email=row["email"],
                image_url=row["image_url"],
                total_invoices=row["total_invoices"],
                total_pending=format_currency(row["total_pending"]),
                total_paid=format_currency(row["total_paid"]),
            )
            for row in rows
        ]
