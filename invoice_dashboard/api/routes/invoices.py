"""Invoices — filtered table, page count, edit lookup and form-driven mutations.

Invariants:
    - GET endpoints are no-store; mutations return the serialized ActionState
    - /pages is declared before /{invoice_id} so it is not captured as an id
    - Form fields are passed to the actions untouched (validation happens there)
"""

from fastapi import APIRouter, Depends, Query, Request, status

from invoice_dashboard.api.dependencies import (
    action_response, get_invoice_actions, get_invoice_queries, no_store,
)
from invoice_dashboard.core.errors import ErrorContext, ResourceNotFoundError
from invoice_dashboard.core.pagination import generate_pagination
from invoice_dashboard.schemas.invoice import (
    InvoiceEditRecord, InvoicePages, InvoiceTableRow,
)
from invoice_dashboard.services.invoice_actions import InvoiceActions
from invoice_dashboard.services.invoice_queries import InvoiceQueries

router = APIRouter(prefix="/api/v1/invoices", tags=["invoices"])


@router.get(
    "", response_model=list[InvoiceTableRow], dependencies=[Depends(no_store)],
)
async def list_invoices(
    query: str = Query(""),
    page: int = Query(1, ge=1),
    queries: InvoiceQueries = Depends(get_invoice_queries),
):
    """One page (6 rows) of invoices matching the search query."""
    return await queries.fetch_filtered_invoices(query, page)


@router.get(
    "/pages", response_model=InvoicePages, dependencies=[Depends(no_store)],
)
async def get_invoice_pages(
    query: str = Query(""),
    page: int = Query(1, ge=1),
    queries: InvoiceQueries = Depends(get_invoice_queries),
):
    total_pages = await queries.fetch_invoices_pages(query)
    return InvoicePages(
        total_pages=total_pages,
        current_page=page,
        pagination=generate_pagination(page, total_pages),
    )


@router.get(
    "/{invoice_id}", response_model=InvoiceEditRecord,
    dependencies=[Depends(no_store)],
)
async def get_invoice(
    invoice_id: str, queries: InvoiceQueries = Depends(get_invoice_queries),
):
    invoice = await queries.fetch_invoice_by_id(invoice_id)
    if invoice is None:
        raise ResourceNotFoundError(
            "Invoice", invoice_id, ErrorContext(invoice_id=invoice_id),
        )
    return invoice


@router.post("")
async def create_invoice(
    request: Request, actions: InvoiceActions = Depends(get_invoice_actions),
):
    form = await request.form()
    state = await actions.create_invoice(None, dict(form))
    return action_response(state, success_status=status.HTTP_201_CREATED)


@router.put("/{invoice_id}")
async def update_invoice(
    invoice_id: str,
    request: Request,
    actions: InvoiceActions = Depends(get_invoice_actions),
):
    form = await request.form()
    state = await actions.update_invoice(invoice_id, dict(form))
    return action_response(state)


@router.delete("/{invoice_id}")
async def delete_invoice(
    invoice_id: str, actions: InvoiceActions = Depends(get_invoice_actions),
):
    state = await actions.delete_invoice(invoice_id)
    return action_response(state)
