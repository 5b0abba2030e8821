"""Dashboard Overview — revenue chart, latest invoices and summary cards.

Invariants:
    - Read-only; every response is marked no-store
    - Store failures surface as DataFetchError via the global handler
"""

from fastapi import APIRouter, Depends

from invoice_dashboard.api.dependencies import (
    get_invoice_queries, get_revenue_queries, no_store,
)
from invoice_dashboard.core.formatting import generate_y_axis
from invoice_dashboard.schemas.dashboard import CardData, LatestInvoice, RevenueChart
from invoice_dashboard.services.invoice_queries import InvoiceQueries
from invoice_dashboard.services.revenue_queries import RevenueQueries

router = APIRouter(
    prefix="/api/v1/dashboard", tags=["dashboard"],
    dependencies=[Depends(no_store)],
)


@router.get("/revenue", response_model=RevenueChart)
async def get_revenue(queries: RevenueQueries = Depends(get_revenue_queries)):
    revenue = await queries.fetch_revenue()
    labels, top_label = generate_y_axis([r.revenue for r in revenue])
    return RevenueChart(revenue=revenue, y_axis_labels=labels, top_label=top_label)


@router.get("/latest-invoices", response_model=list[LatestInvoice])
async def get_latest_invoices(
    queries: InvoiceQueries = Depends(get_invoice_queries),
):
    return await queries.fetch_latest_invoices()


@router.get("/cards", response_model=CardData)
async def get_cards(queries: InvoiceQueries = Depends(get_invoice_queries)):
    return await queries.fetch_card_data()
