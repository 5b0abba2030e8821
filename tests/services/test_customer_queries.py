"""Customer Queries — select options and the aggregated customers table."""

import pytest

from invoice_dashboard.core.errors import DataFetchError
from invoice_dashboard.services.customer_queries import CustomerQueries, like_pattern


@pytest.fixture
def queries(seeded_db):
    return CustomerQueries(seeded_db)


async def test_customers_ordered_by_name(queries):
    customers = await queries.fetch_customers()
    assert [c.name for c in customers] == [
        "Amy Burns", "Delba de Oliveira", "Lee Robinson",
    ]
    assert customers[0].id == "cust-3"


async def test_customer_table_aggregates_per_status(queries):
    rows = {r.id: r for r in await queries.fetch_filtered_customers("")}
    delba = rows["cust-1"]
    assert delba.total_invoices == 4
    assert delba.total_pending == "$510.38"
    assert delba.total_paid == "$30.40"

    lee = rows["cust-2"]
    assert lee.total_invoices == 4
    assert lee.total_pending == "$745.94"
    assert lee.total_paid == "$773.45"


async def test_customer_without_invoices_has_zero_totals(queries):
    rows = await queries.fetch_filtered_customers("amy")
    assert len(rows) == 1
    assert rows[0].total_invoices == 0
    assert rows[0].total_pending == "$0.00"
    assert rows[0].total_paid == "$0.00"


async def test_customer_table_matches_name_or_email_case_insensitively(queries):
    assert [r.id for r in await queries.fetch_filtered_customers("DELBA")] == ["cust-1"]
    assert [r.id for r in await queries.fetch_filtered_customers("robinson.com")] == ["cust-2"]
    assert await queries.fetch_filtered_customers("zzz") == []


def test_like_pattern_escapes_wildcards():
    assert like_pattern("50%_Off") == "%50\\%\\_off%"


async def test_store_outage_raises_data_fetch_error(broken_db_manager):
    with pytest.raises(DataFetchError, match="Failed to fetch customer table."):
        await CustomerQueries(broken_db_manager).fetch_filtered_customers("")
