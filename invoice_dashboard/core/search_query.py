"""Search Query Interpretation — reads a free-text table query as number or date.

Invariants:
    - Pure: no IO, never raises on arbitrary input
    - A query only yields an amount when it is an integral number of cents
    - A query only yields a date when it is an ISO-8601 calendar date or timestamp
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation


def parse_amount_query(query: str) -> int | None:
    """Integer cents the query names exactly, e.g. '4999' -> 4999."""
    text = query.strip()
    if not text:
        return None
    try:
        number = Decimal(text)
    except InvalidOperation:
        return None
    if not number.is_finite() or number != number.to_integral_value():
        return None
    return int(number)


def parse_date_query(query: str) -> date | None:
    """Calendar day the query names, e.g. '2023-12-01' -> date(2023, 12, 1)."""
    text = query.strip()
    if len(text) < 8:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None
