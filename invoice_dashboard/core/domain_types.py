"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - InvoiceId, CustomerId, UserId wrap opaque non-empty strings
    - Cents is an integer count of minor currency units (never a float)
    - Invoice status is a closed two-value enumeration

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and compare against DB text without converters
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

InvoiceId = NewType("InvoiceId", str)
CustomerId = NewType("CustomerId", str)
UserId = NewType("UserId", str)


# ─── Value Types ─────────────────────────────────────────────────

Cents = NewType("Cents", int)


# ─── Constants ───────────────────────────────────────────────────

ITEMS_PER_PAGE = 6
LATEST_INVOICES_LIMIT = 5
INVOICES_LISTING_PATH = "/dashboard/invoices"


# ─── Enums ───────────────────────────────────────────────────────

class InvoiceStatus(str, Enum):
    """Payment state of an invoice — maps to DB `status` column."""
    PENDING = "pending"
    PAID = "paid"
