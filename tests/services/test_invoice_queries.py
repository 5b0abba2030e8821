"""Invoice Queries — latest invoices, cards, filtered table, page count, edit lookup.

Invariants:
    - Expected figures come from the seeded_db dataset in conftest.py
    - Store outages surface as DataFetchError, never partial results
"""

import pytest

from invoice_dashboard.core.errors import DatabaseError, DataFetchError
from invoice_dashboard.services.invoice_queries import InvoiceQueries


@pytest.fixture
def queries(seeded_db):
    return InvoiceQueries(seeded_db)


async def test_latest_invoices_are_five_newest_with_formatted_amount(queries):
    latest = await queries.fetch_latest_invoices()
    assert [i.id for i in latest] == ["inv-1", "inv-2", "inv-3", "inv-4", "inv-5"]
    assert latest[0].amount == "$157.95"
    assert latest[0].name == "Delba de Oliveira"
    assert latest[0].email == "delba@oliveira.com"
    assert latest[0].image_url == "/customers/delba.png"


async def test_card_data_counts_and_paid_total(queries):
    cards = await queries.fetch_card_data()
    assert cards.number_of_invoices == 8
    assert cards.number_of_customers == 3
    assert cards.total_paid_invoices == "$803.85"


async def test_card_pending_total_keeps_legacy_figure_by_default(queries):
    cards = await queries.fetch_card_data()
    # invoice count (8) minus paid cents (80385)
    assert cards.total_pending_invoices == "-$803.77"


async def test_card_pending_total_sum_mode(seeded_db):
    cards = await InvoiceQueries(seeded_db, pending_total_mode="sum").fetch_card_data()
    assert cards.total_pending_invoices == "$1,256.32"


async def test_filter_by_status_returns_newest_first(queries):
    rows = await queries.fetch_filtered_invoices("paid", 1)
    assert [r.id for r in rows] == ["inv-3", "inv-4", "inv-8"]
    assert all("paid" in r.status for r in rows)


async def test_filter_by_customer_name_is_case_insensitive(queries):
    rows = await queries.fetch_filtered_invoices("ROBINSON", 1)
    assert {r.id for r in rows} == {"inv-2", "inv-4", "inv-6", "inv-8"}


async def test_filter_by_customer_email(queries):
    rows = await queries.fetch_filtered_invoices("oliveira.com", 1)
    assert {r.customer_id for r in rows} == {"cust-1"}
    assert len(rows) == 4


async def test_filter_by_exact_amount_in_cents(queries):
    rows = await queries.fetch_filtered_invoices("666", 1)
    assert [r.id for r in rows] == ["inv-7"]


async def test_filter_by_calendar_day(queries):
    rows = await queries.fetch_filtered_invoices("2023-12-06", 1)
    assert [r.id for r in rows] == ["inv-1"]


async def test_wildcards_in_query_match_literally(queries):
    assert await queries.fetch_filtered_invoices("%", 1) == []
    assert await queries.fetch_invoices_pages("%") == 0


async def test_empty_query_pages_through_all_invoices(queries):
    first = await queries.fetch_filtered_invoices("", 1)
    second = await queries.fetch_filtered_invoices("", 2)
    third = await queries.fetch_filtered_invoices("", 3)
    assert len(first) == 6
    assert [r.id for r in second] == ["inv-7", "inv-8"]
    assert third == []


async def test_table_row_is_flattened_and_formatted(queries):
    row = (await queries.fetch_filtered_invoices("2023-12-06", 1))[0]
    assert row.amount == 15795
    assert row.formatted_amount == "$157.95"
    assert row.formatted_date == "Dec 6, 2023"
    assert row.date.startswith("2023-12-06T00:00:00")
    assert row.name == "Delba de Oliveira"


@pytest.mark.parametrize("query", ["", "paid", "pending", "lee", "666", "nothing"])
async def test_page_count_matches_filtered_rows(queries, query):
    pages = await queries.fetch_invoices_pages(query)
    total = 0
    page = 1
    while rows := await queries.fetch_filtered_invoices(query, page):
        total += len(rows)
        page += 1
    assert pages == -(-total // 6)


async def test_invoice_by_id_converts_cents_to_dollars(queries):
    invoice = await queries.fetch_invoice_by_id("inv-3")
    assert invoice.customer_id == "cust-1"
    assert invoice.amount == 30.40
    assert invoice.status == "paid"


async def test_invoice_by_id_missing_returns_none(queries):
    assert await queries.fetch_invoice_by_id("nope") is None


async def test_store_outage_raises_data_fetch_error(broken_db_manager):
    queries = InvoiceQueries(broken_db_manager)
    with pytest.raises(DataFetchError, match="Failed to fetch card data."):
        await queries.fetch_card_data()
    with pytest.raises(DataFetchError, match="Failed to fetch invoices."):
        await queries.fetch_filtered_invoices("", 1)


async def test_one_failing_card_query_fails_the_cards(queries, monkeypatch):
    async def failing_totals():
        raise DatabaseError("status aggregate failed", operation="select")

    monkeypatch.setattr(queries, "_status_totals", failing_totals)
    with pytest.raises(DataFetchError, match="Failed to fetch card data."):
        await queries.fetch_card_data()
