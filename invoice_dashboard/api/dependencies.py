"""Route Dependencies — service construction and response cache policy.

Invariants:
    - Services are built per request around the app-owned DatabaseSessionManager
    - Read endpoints send Cache-Control: no-store (dashboard data is always live)
"""

from fastapi import Depends, Response
from fastapi.responses import JSONResponse

from invoice_dashboard.config import Settings, get_settings
from invoice_dashboard.core.action_state import ActionState
from invoice_dashboard.infrastructure.database import (
    DatabaseSessionManager, get_db_manager,
)
from invoice_dashboard.services.customer_queries import CustomerQueries
from invoice_dashboard.services.invoice_actions import InvoiceActions
from invoice_dashboard.services.invoice_queries import InvoiceQueries
from invoice_dashboard.services.revenue_queries import RevenueQueries
from invoice_dashboard.services.user_queries import UserQueries


def no_store(response: Response) -> None:
    response.headers["Cache-Control"] = "no-store"


def get_revenue_queries(
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
    settings: Settings = Depends(get_settings),
) -> RevenueQueries:
    return RevenueQueries(
        db_manager, delay_seconds=settings.revenue_fetch_delay_ms / 1000,
    )


def get_invoice_queries(
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
    settings: Settings = Depends(get_settings),
) -> InvoiceQueries:
    return InvoiceQueries(
        db_manager, pending_total_mode=settings.card_pending_total_mode,
    )


def get_customer_queries(
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
) -> CustomerQueries:
    return CustomerQueries(db_manager)


def get_user_queries(
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
) -> UserQueries:
    return UserQueries(db_manager)


def get_invoice_actions(
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
) -> InvoiceActions:
    return InvoiceActions(db_manager)


def action_response(state: ActionState, success_status: int = 200) -> JSONResponse:
    """Map an ActionState to an HTTP status: 422 invalid, 404 missing, 503 store failure."""
    if state.errors:
        status_code = 422
    elif state.not_found:
        status_code = 404
    elif not state.succeeded:
        status_code = 503
    else:
        status_code = success_status
    return JSONResponse(status_code=status_code, content=state.to_dict())
