"""Seed Script — one-shot population of baseline users, customers, invoices and revenue.

Invariants:
    - Idempotent: does nothing when the users table already has rows
    - Passwords are stored as bcrypt hashes
    - Invoice amounts are integer cents; invoices reference seeded customers
    - All rows are committed in one transaction (all or nothing)

Design Decisions:
    - Runs outside the API process with its own engine (db/session.py);
      the schema itself comes from alembic migrations
"""

import asyncio
import logging
from datetime import datetime, timezone

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from invoice_dashboard.config import get_settings
from invoice_dashboard.db.base import new_id
from invoice_dashboard.db.session import create_session_factory
from invoice_dashboard.infrastructure.observability import setup_logging
from invoice_dashboard.models import Customer, Invoice, Revenue, User
from invoice_dashboard.services.user_queries import hash_password

logger = logging.getLogger(__name__)

USERS = [
    {"name": "John Doe1", "email": "johndoe1@example.com", "password": "password123"},
    {"name": "Jane Doe2", "email": "janedoe2@example.com", "password": "password456"},
]

CUSTOMERS = [
    {"name": "Customer 1", "email": "customer1@example.com",
     "image_url": "https://example.com/image1.jpg"},
    {"name": "Customer 2", "email": "customer2@example.com",
     "image_url": "https://example.com/image2.jpg"},
]

# (customer index, cents, status, date)
INVOICES = [
    (0, 10_000, "paid", datetime(2023, 12, 1, tzinfo=timezone.utc)),
    (0, 5_000, "pending", datetime(2023, 12, 10, tzinfo=timezone.utc)),
    (1, 7_500, "paid", datetime(2023, 12, 5, tzinfo=timezone.utc)),
]

REVENUE = [
    ("January", 500),
    ("February", 750),
    ("March", 1000),
]


def build_seed_rows() -> list:
    customers = [Customer(id=new_id(), **c) for c in CUSTOMERS]
    rows: list = [
        User(
            name=u["name"], email=u["email"],
            password=hash_password(u["password"]),
        )
        for u in USERS
    ]
    rows.extend(customers)
    rows.extend(
        Invoice(
            customer_id=customers[idx].id, amount=cents, status=status, date=date,
        )
        for idx, cents, status, date in INVOICES
    )
    rows.extend(Revenue(month=month, revenue=revenue) for month, revenue in REVENUE)
    return rows


async def seed_database(
    session_factory: async_sessionmaker[AsyncSession],
) -> bool:
    """Insert the baseline rows. Returns False when the database was already seeded."""
    async with session_factory() as db:
        existing = (await db.execute(select(func.count()).select_from(User))).scalar_one()
        if existing:
            logger.info("Database already seeded; skipping")
            return False
        db.add_all(build_seed_rows())
        await db.commit()
    logger.info("Seed data created successfully")
    return True


async def _run() -> None:
    settings = get_settings()
    engine, session_factory = create_session_factory(settings.database_url)
    try:
        await seed_database(session_factory)
    except Exception:
        logger.exception("Error seeding the database")
        raise
    finally:
        await engine.dispose()


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    asyncio.run(_run())


if __name__ == "__main__":
    main()
