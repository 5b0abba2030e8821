"""API Routes — HTTP mapping of queries and actions.

Invariants:
    - Read endpoints answer with Cache-Control: no-store
    - Action endpoints serialize ActionState: 201/200 success, 422 invalid,
      404 missing, 503 store failure
    - DataFetchError reaches the client as a structured 500 envelope
"""

from invoice_dashboard.main import app
from tests.services.conftest import USER_EMAIL, USER_PASSWORD


async def test_liveness_and_readiness(client):
    assert (await client.get("/api/v1/health/")).status_code == 200
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_readiness_reports_database_outage(client, broken_db_manager):
    app.state.db_manager = broken_db_manager
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_revenue_chart_includes_axis_labels(client):
    res = await client.get("/api/v1/dashboard/revenue")
    body = res.json()
    assert res.status_code == 200
    assert res.headers["cache-control"] == "no-store"
    assert [r["month"] for r in body["revenue"]] == ["Jan", "Feb", "Mar"]
    assert body["top_label"] == 3000
    assert body["y_axis_labels"] == ["$3K", "$2K", "$1K", "$0K"]


async def test_latest_invoices_and_cards(client):
    latest = (await client.get("/api/v1/dashboard/latest-invoices")).json()
    assert len(latest) == 5
    assert latest[0]["amount"] == "$157.95"

    cards = (await client.get("/api/v1/dashboard/cards")).json()
    assert cards["number_of_invoices"] == 8
    assert cards["number_of_customers"] == 3
    assert cards["total_paid_invoices"] == "$803.85"


async def test_invoice_table_and_pages(client):
    res = await client.get("/api/v1/invoices", params={"query": "paid", "page": 1})
    assert res.status_code == 200
    assert res.headers["cache-control"] == "no-store"
    assert [r["id"] for r in res.json()] == ["inv-3", "inv-4", "inv-8"]

    pages = (await client.get("/api/v1/invoices/pages")).json()
    assert pages == {"total_pages": 2, "current_page": 1, "pagination": [1, 2]}


async def test_invoice_table_rejects_page_zero(client):
    res = await client.get("/api/v1/invoices", params={"page": 0})
    assert res.status_code == 422
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_get_invoice_and_missing_invoice(client):
    res = await client.get("/api/v1/invoices/inv-3")
    assert res.json() == {
        "id": "inv-3", "customer_id": "cust-1", "amount": 30.4, "status": "paid",
    }

    missing = await client.get("/api/v1/invoices/nope")
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_create_invoice_from_form(client):
    res = await client.post(
        "/api/v1/invoices",
        data={"customerId": "cust-1", "amount": "49.99", "status": "pending"},
    )
    body = res.json()
    assert res.status_code == 201
    assert body["redirect_to"] == "/dashboard/invoices"
    assert body["revalidated_paths"] == ["/dashboard/invoices"]

    created = (await client.get(f"/api/v1/invoices/{body['invoice_id']}")).json()
    assert created["amount"] == 49.99


async def test_create_invoice_with_errors_is_422(client):
    res = await client.post("/api/v1/invoices", data={"amount": "-1"})
    body = res.json()
    assert res.status_code == 422
    assert set(body["errors"]) == {"customerId", "amount", "status"}
    assert body["redirect_to"] is None


async def test_create_invoice_with_oversized_amount_is_422(client):
    res = await client.post(
        "/api/v1/invoices",
        data={"customerId": "cust-1", "amount": "1e30", "status": "paid"},
    )
    assert res.status_code == 422
    assert res.json()["errors"] == {"amount": ["Please enter an amount greater than $0."]}


async def test_update_and_delete_invoice(client):
    res = await client.put(
        "/api/v1/invoices/inv-1",
        data={"customerId": "cust-2", "amount": "1.50", "status": "paid"},
    )
    assert res.status_code == 200
    assert (await client.get("/api/v1/invoices/inv-1")).json()["amount"] == 1.5

    deleted = await client.delete("/api/v1/invoices/inv-1")
    assert deleted.status_code == 200
    assert deleted.json()["message"] == "Deleted Invoice."
    assert (await client.delete("/api/v1/invoices/inv-1")).status_code == 404


async def test_mutation_during_outage_is_503(client, broken_db_manager):
    app.state.db_manager = broken_db_manager
    res = await client.delete("/api/v1/invoices/inv-1")
    assert res.status_code == 503
    assert res.json()["message"] == "Database Error: Failed to Delete Invoice."


async def test_read_during_outage_is_structured_500(client, broken_db_manager):
    app.state.db_manager = broken_db_manager
    res = await client.get("/api/v1/dashboard/cards")
    assert res.status_code == 500
    assert res.json()["error"]["code"] == "DATA_FETCH_ERROR"
    assert res.json()["error"]["message"] == "Failed to fetch card data."


async def test_customer_endpoints(client):
    names = [c["name"] for c in (await client.get("/api/v1/customers")).json()]
    assert names == ["Amy Burns", "Delba de Oliveira", "Lee Robinson"]

    table = (await client.get("/api/v1/customers/table", params={"query": "lee"})).json()
    assert len(table) == 1
    assert table[0]["total_paid"] == "$773.45"


async def test_login(client):
    ok = await client.post(
        "/api/v1/auth/login", data={"email": USER_EMAIL, "password": USER_PASSWORD},
    )
    assert ok.status_code == 200
    assert ok.json() == {"id": "user-1", "name": "User", "email": USER_EMAIL}

    bad = await client.post(
        "/api/v1/auth/login", data={"email": USER_EMAIL, "password": "nope"},
    )
    assert bad.status_code == 401
