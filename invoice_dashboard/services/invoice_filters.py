"""Invoice Search Filter — the WHERE clause shared by the invoice table and its page count.

Invariants:
    - Customer name, customer email and status match case-insensitively by substring
    - A numeric query also matches invoices whose amount (cents) equals it exactly
    - A date query also matches invoices dated on that calendar day (UTC)
    - Statements using the filter must join Invoice to Customer

Design Decisions:
    - icontains(autoescape=True): '%' and '_' in user input match literally
    - Whole-day range instead of timestamp equality: invoices carry creation
      timestamps, so only a day match is meaningful for a typed date
"""

from datetime import datetime, time, timedelta, timezone

from sqlalchemy import ColumnElement, and_, or_

from invoice_dashboard.core.search_query import parse_amount_query, parse_date_query
from invoice_dashboard.models.customer import Customer
from invoice_dashboard.models.invoice import Invoice


def invoice_search_filter(query: str) -> ColumnElement[bool]:
    clauses: list[ColumnElement[bool]] = [
        Customer.name.icontains(query, autoescape=True),
        Customer.email.icontains(query, autoescape=True),
        Invoice.status.icontains(query, autoescape=True),
    ]

    amount = parse_amount_query(query)
    if amount is not None:
        clauses.append(Invoice.amount == amount)

    day = parse_date_query(query)
    if day is not None:
        start = datetime.combine(day, time.min, tzinfo=timezone.utc)
        clauses.append(and_(
            Invoice.date >= start, Invoice.date < start + timedelta(days=1),
        ))

    return or_(*clauses)
