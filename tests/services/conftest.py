"""Service test fixtures — file-backed SQLite database, seeded rows, API client.

Invariants:
    - Every test gets a fresh database file under tmp_path
    - The app reads its DatabaseSessionManager from app.state; the client fixture
      installs the test manager there and removes it afterwards
    - seeded_db inserts a fixed dataset whose totals the tests assert on

Design Decisions:
    - File-backed SQLite instead of :memory:: concurrent card queries need
      separate connections that see the same data
    - broken_db_manager fakes a store outage without touching the engine
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient

import invoice_dashboard.models  # noqa: F401
from invoice_dashboard.core.errors import DatabaseError
from invoice_dashboard.db.base import Base
from invoice_dashboard.infrastructure.database import DatabaseSessionManager
from invoice_dashboard.main import app
from invoice_dashboard.models import Customer, Invoice, Revenue, User
from invoice_dashboard.services.user_queries import hash_password


def _utc(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


CUSTOMERS = [
    ("cust-1", "Delba de Oliveira", "delba@oliveira.com", "/customers/delba.png"),
    ("cust-2", "Lee Robinson", "lee@robinson.com", "/customers/lee.png"),
    ("cust-3", "Amy Burns", "amy@burns.com", "/customers/amy.png"),
]

# paid: 3040 + 44800 + 32545 = 80385; pending: 125632
INVOICES = [
    ("inv-1", "cust-1", 15795, "pending", _utc(2023, 12, 6)),
    ("inv-2", "cust-2", 20348, "pending", _utc(2023, 11, 14)),
    ("inv-3", "cust-1", 3040, "paid", _utc(2023, 10, 29)),
    ("inv-4", "cust-2", 44800, "paid", _utc(2023, 9, 10)),
    ("inv-5", "cust-1", 34577, "pending", _utc(2023, 8, 5)),
    ("inv-6", "cust-2", 54246, "pending", _utc(2023, 7, 16)),
    ("inv-7", "cust-1", 666, "pending", _utc(2023, 6, 27)),
    ("inv-8", "cust-2", 32545, "paid", _utc(2023, 6, 9)),
]

# Inserted out of calendar order on purpose
REVENUE = [("Mar", 2200), ("Jan", 2000), ("Feb", 1800)]

USER_EMAIL = "user@nextmail.com"
USER_PASSWORD = "123456"


@pytest.fixture
async def db_manager(tmp_path):
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        pool_size=5, max_overflow=5,
    )
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    await manager.dispose()


@pytest.fixture
async def seeded_db(db_manager):
    async with db_manager.session() as db:
        db.add_all([
            Customer(id=cid, name=name, email=email, image_url=image)
            for cid, name, email, image in CUSTOMERS
        ])
        await db.flush()
        db.add_all([
            Invoice(id=iid, customer_id=cid, amount=amount, status=status, date=date)
            for iid, cid, amount, status, date in INVOICES
        ])
        db.add_all([Revenue(month=m, revenue=r) for m, r in REVENUE])
        db.add(User(
            id="user-1", name="User", email=USER_EMAIL,
            password=hash_password(USER_PASSWORD),
        ))
        await db.commit()
    return db_manager


class _BrokenSessionManager:
    """Stands in for a DatabaseSessionManager whose database is down."""

    @asynccontextmanager
    async def session(self):
        raise DatabaseError("Connection or operational error", "execute")
        yield  # pragma: no cover

    async def health_check(self) -> bool:
        return False


@pytest.fixture
def broken_db_manager():
    return _BrokenSessionManager()


@pytest.fixture
async def client(seeded_db):
    """API client bound to the seeded test database."""
    app.state.db_manager = seeded_db
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    del app.state.db_manager
