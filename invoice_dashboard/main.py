"""Invoice Dashboard API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map DashboardError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - The DatabaseSessionManager lives on app.state for the app's lifetime

Design Decisions:
    - Lifespan over @app.on_event: creates and disposes the connection pool
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from invoice_dashboard.api.error_handlers import register_error_handlers
from invoice_dashboard.api.routes import auth, customers, dashboard, health, invoices
from invoice_dashboard.config import get_settings
from invoice_dashboard.infrastructure.database import DatabaseSessionManager
from invoice_dashboard.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Invoice dashboard API started")
    yield
    await app.state.db_manager.dispose()
    logger.info("Invoice dashboard API shutting down")


app = FastAPI(
    title="Invoice Dashboard API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(dashboard.router)
app.include_router(invoices.router)
app.include_router(customers.router)
app.include_router(auth.router)

register_error_handlers(app)
