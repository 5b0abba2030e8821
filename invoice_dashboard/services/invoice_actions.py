"""Invoice Actions — create, update and delete invoices from form submissions.

Invariants:
    - Invalid forms never reach the store; they come back as field errors
    - Amounts are written as integer cents
    - Store failures are logged and returned as a generic message, never retried
    - Only a successful write carries the revalidate/redirect effects

Design Decisions:
    - create and update share parse_invoice_form, so both report field errors
      the same way instead of one of them raising
    - Missing invoice on update/delete is reported as not_found, not as a
      database error: the row being gone is not a store failure
"""

import logging
from datetime import datetime, timezone
from typing import Any, Mapping

from invoice_dashboard.core.action_state import (
    ActionState, invalid_form, listing_changed, missing_invoice, store_failure,
)
from invoice_dashboard.core.errors import DatabaseError
from invoice_dashboard.core.invoice_form import InvoiceFormInvalid, parse_invoice_form
from invoice_dashboard.infrastructure.database import DatabaseSessionManager
from invoice_dashboard.models.invoice import Invoice

logger = logging.getLogger(__name__)


class InvoiceActions:
    """Mutations on the invoices table."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self.db_manager = db_manager

    async def create_invoice(
        self, prev_state: ActionState | None, form: Mapping[str, Any],
    ) -> ActionState:
        """Insert an invoice dated now.

        prev_state is the form's previous ActionState, as handed back by the
        form on resubmission; the outcome depends only on the new submission.
        """
        parsed = parse_invoice_form(form)
        if isinstance(parsed, InvoiceFormInvalid):
            logger.info(f"Invoice create rejected: {sorted(parsed.errors)}")
            return invalid_form(
                parsed.errors, "Missing Fields. Failed to Create Invoice.",
            )

        data = parsed.data
        invoice = Invoice(
            customer_id=data.customer_id,
            amount=data.amount_in_cents,
            status=data.status.value,
            date=datetime.now(timezone.utc),
        )
        try:
            async with self.db_manager.session() as db:
                db.add(invoice)
                await db.commit()
        except DatabaseError as e:
            logger.error(
                f"Failed to create invoice: {e.message}",
                extra={"customer_id": data.customer_id, "error_code": e.code},
            )
            return store_failure("Database Error: Failed to Create Invoice.")

        logger.info(
            "Invoice created",
            extra={"invoice_id": invoice.id, "customer_id": data.customer_id},
        )
        return listing_changed(invoice_id=invoice.id)

    async def update_invoice(
        self, invoice_id: str, form: Mapping[str, Any],
    ) -> ActionState:
        """Replace customer, amount and status of an invoice; its date is kept."""
        parsed = parse_invoice_form(form)
        if isinstance(parsed, InvoiceFormInvalid):
            logger.info(
                f"Invoice update rejected: {sorted(parsed.errors)}",
                extra={"invoice_id": invoice_id},
            )
            return invalid_form(
                parsed.errors, "Missing Fields. Failed to Update Invoice.",
            )

        data = parsed.data
        try:
            async with self.db_manager.session() as db:
                invoice = await db.get(Invoice, invoice_id)
                if invoice is None:
                    return missing_invoice()
                invoice.customer_id = data.customer_id
                invoice.amount = data.amount_in_cents
                invoice.status = data.status.value
                await db.commit()
        except DatabaseError as e:
            logger.error(
                f"Failed to update invoice: {e.message}",
                extra={"invoice_id": invoice_id, "error_code": e.code},
            )
            return store_failure("Database Error: Failed to Update Invoice.")

        logger.info("Invoice updated", extra={"invoice_id": invoice_id})
        return listing_changed(invoice_id=invoice_id)

    async def delete_invoice(self, invoice_id: str) -> ActionState:
        """Remove an invoice. The listing is revalidated but not navigated to."""
        try:
            async with self.db_manager.session() as db:
                invoice = await db.get(Invoice, invoice_id)
                if invoice is None:
                    return missing_invoice()
                await db.delete(invoice)
                await db.commit()
        except DatabaseError as e:
            logger.error(
                f"Failed to delete invoice: {e.message}",
                extra={"invoice_id": invoice_id, "error_code": e.code},
            )
            return store_failure("Database Error: Failed to Delete Invoice.")

        logger.info("Invoice deleted", extra={"invoice_id": invoice_id})
        return listing_changed(
            "Deleted Invoice.", navigate=False, invoice_id=invoice_id,
        )
