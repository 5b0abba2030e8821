"""Customers — select-control options and the customers table."""

from fastapi import APIRouter, Depends, Query

from invoice_dashboard.api.dependencies import get_customer_queries, no_store
from invoice_dashboard.schemas.customer import CustomerField, CustomerTableRow
from invoice_dashboard.services.customer_queries import CustomerQueries

router = APIRouter(
    prefix="/api/v1/customers", tags=["customers"],
    dependencies=[Depends(no_store)],
)


@router.get("", response_model=list[CustomerField])
async def list_customers(
    queries: CustomerQueries = Depends(get_customer_queries),
):
    return await queries.fetch_customers()


@router.get("/table", response_model=list[CustomerTableRow])
async def customers_table(
    query: str = Query(""),
    queries: CustomerQueries = Depends(get_customer_queries),
):
    return await queries.fetch_filtered_customers(query)
