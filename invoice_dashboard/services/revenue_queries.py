"""Revenue Queries — monthly revenue for the dashboard chart.

Invariants:
    - Rows returned in calendar month order
    - delay_seconds > 0 waits before querying (demo of a slow data source)
"""

import asyncio
import logging

from sqlalchemy import select

from invoice_dashboard.core.formatting import month_order
from invoice_dashboard.infrastructure.database import DatabaseSessionManager
from invoice_dashboard.models.revenue import Revenue
from invoice_dashboard.schemas.dashboard import RevenueRecord
from invoice_dashboard.services.query_helpers import fetch_guard

logger = logging.getLogger(__name__)


class RevenueQueries:
    """Read access to the revenue table."""

    def __init__(self, db_manager: DatabaseSessionManager, delay_seconds: float = 0):
        self.db_manager = db_manager
        self.delay_seconds = delay_seconds

    async def fetch_revenue(self) -> list[RevenueRecord]:
        with fetch_guard("Failed to fetch revenue data."):
            if self.delay_seconds > 0:
                logger.info(f"Fetching revenue data (delay {self.delay_seconds}s)")
                await asyncio.sleep(self.delay_seconds)

            async with self.db_manager.session() as db:
                result = await db.execute(select(Revenue))
                rows = result.scalars().all()

        rows = sorted(rows, key=lambda r: month_order(r.month))
        return [RevenueRecord(month=r.month, revenue=r.revenue) for r in rows]
