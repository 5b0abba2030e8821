"""Invoice Queries — latest invoices, summary cards, filtered table, edit lookup.

Invariants:
    - Every method reads fresh from the store (no memoization)
    - Listings order by invoice date, newest first
    - fetch_filtered_invoices and fetch_invoices_pages share invoice_search_filter
    - Card queries run concurrently, each on its own session

Design Decisions:
    - pending_total_mode="legacy" reports (invoice count − paid sum), a count
      minus money; "sum" reports the sum of pending invoices
    - All card queries finish before the first failure is re-raised
"""

import asyncio
import logging
from datetime import timezone
from typing import Literal

from sqlalchemy import case, func, select

from invoice_dashboard.core.domain_types import (
    ITEMS_PER_PAGE, LATEST_INVOICES_LIMIT, InvoiceStatus,
)
from invoice_dashboard.core.formatting import format_currency, format_date_to_local
from invoice_dashboard.core.pagination import page_offset, total_pages_for
from invoice_dashboard.infrastructure.database import DatabaseSessionManager
from invoice_dashboard.models.customer import Customer
from invoice_dashboard.models.invoice import Invoice
from invoice_dashboard.schemas.dashboard import CardData, LatestInvoice
from invoice_dashboard.schemas.invoice import InvoiceEditRecord, InvoiceTableRow
from invoice_dashboard.services.invoice_filters import invoice_search_filter
from invoice_dashboard.services.query_helpers import fetch_guard

logger = logging.getLogger(__name__)


class InvoiceQueries:
    """Read access to invoices joined with their customers."""

    def __init__(
        self,
        db_manager: DatabaseSessionManager,
        pending_total_mode: Literal["legacy", "sum"] = "legacy",
    ):
        self.db_manager = db_manager
        self.pending_total_mode = pending_total_mode

    async def fetch_latest_invoices(self) -> list[LatestInvoice]:
        """The newest invoices for the dashboard overview."""
        stmt = (
            select(Invoice, Customer)
            .join(Customer, Invoice.customer_id == Customer.id)
            .order_by(Invoice.date.desc())
            .limit(LATEST_INVOICES_LIMIT)
        )
        with fetch_guard("Failed to fetch the latest invoices."):
            async with self.db_manager.session() as db:
                rows = (await db.execute(stmt)).all()

        return [
            LatestInvoice(
                id=invoice.id,
                amount=format_currency(invoice.amount),
                name=customer.name,
                email=customer.email,
                image_url=customer.image_url,
            )
            for invoice, customer in rows
        ]

    async def fetch_card_data(self) -> CardData:
        """Customer/invoice counts and paid/pending totals, queried in parallel."""
        with fetch_guard("Failed to fetch card data."):
            results = await asyncio.gather(
                self._count(Invoice),
                self._count(Customer),
                self._status_totals(),
                return_exceptions=True,
            )
            for result in results:
                if isinstance(result, BaseException):
                    raise result
        invoice_count, customer_count, (paid, pending) = results

        if self.pending_total_mode == "legacy":
            pending = invoice_count - paid

        return CardData(
            number_of_customers=customer_count,
            number_of_invoices=invoice_count,
            total_paid_invoices=format_currency(paid),
            total_pending_invoices=format_currency(pending),
        )

    async def _count(self, model) -> int:
        async with self.db_manager.session() as db:
            result = await db.execute(select(func.count()).select_from(model))
            return result.scalar_one()

    async def _status_totals(self) -> tuple[int, int]:
        def total_for(status: InvoiceStatus):
            return func.coalesce(func.sum(case(
                (Invoice.status == status.value, Invoice.amount), else_=0,
            )), 0)

        stmt = select(total_for(InvoiceStatus.PAID), total_for(InvoiceStatus.PENDING))
        async with self.db_manager.session() as db:
            paid, pending = (await db.execute(stmt)).one()
        return int(paid), int(pending)

    async def fetch_filtered_invoices(
        self, query: str, current_page: int,
    ) -> list[InvoiceTableRow]:
        """One page of invoices matching the table search box."""
        stmt = (
            select(Invoice, Customer)
            .join(Customer, Invoice.customer_id == Customer.id)
            .where(invoice_search_filter(query))
            .order_by(Invoice.date.desc(), Invoice.id)
            .limit(ITEMS_PER_PAGE)
            .offset(page_offset(current_page))
        )
        with fetch_guard("Failed to fetch invoices."):
            async with self.db_manager.session() as db:
                rows = (await db.execute(stmt)).all()

        logger.debug(
            f"Filtered invoices: {len(rows)} rows",
            extra={"query": query, "page": current_page},
        )
        return [_table_row(invoice, customer) for invoice, customer in rows]

    async def fetch_invoices_pages(self, query: str) -> int:
        """Number of table pages for the search box query."""
        stmt = (
            select(func.count(Invoice.id))
            .join(Customer, Invoice.customer_id == Customer.id)
            .where(invoice_search_filter(query))
        )
        with fetch_guard("Failed to fetch total number of invoices."):
            async with self.db_manager.session() as db:
                count = (await db.execute(stmt)).scalar_one()
        return total_pages_for(count)

    async def fetch_invoice_by_id(self, invoice_id: str) -> InvoiceEditRecord | None:
        """Invoice for the edit form, amount converted back to dollars."""
        with fetch_guard("Failed to fetch invoice."):
            async with self.db_manager.session() as db:
                invoice = await db.get(Invoice, invoice_id)

        if invoice is None:
            return None
        return InvoiceEditRecord(
            id=invoice.id,
            customer_id=invoice.customer_id,
            amount=invoice.amount / 100,
            status=invoice.status,
        )


def _table_row(invoice: Invoice, customer: Customer) -> InvoiceTableRow:
    date = invoice.date
    if date.tzinfo is None:
        date = date.replace(tzinfo=timezone.utc)
    return InvoiceTableRow(
        id=invoice.id,
        customer_id=invoice.customer_id,
        amount=invoice.amount,
        formatted_amount=format_currency(invoice.amount),
        date=date.isoformat(),
        formatted_date=format_date_to_local(date),
        status=invoice.status,
        name=customer.name,
        email=customer.email,
        image_url=customer.image_url,
    )
