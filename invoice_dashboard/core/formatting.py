"""Display Formatting — currency, dates and revenue chart axis labels.

Invariants:
    - Currency input is integer cents; output is en-US dollars with 2 decimals
    - Missing aggregates (None from SUM over zero rows) format as $0.00
    - Naive datetimes are treated as UTC

Design Decisions:
    - Decimal arithmetic for cents → dollars: no float rounding in the display path
    - Month abbreviations from a fixed table instead of the process locale:
      output must not depend on the host's LC_TIME
"""

from datetime import date, datetime, timezone
from decimal import Decimal

_MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def format_currency(cents: int | Decimal | None) -> str:
    """Format integer cents as a dollar string, e.g. 123456 -> '$1,234.56'."""
    dollars = Decimal(cents or 0) / 100
    sign = "-" if dollars < 0 else ""
    return f"{sign}${abs(dollars):,.2f}"


def format_date_to_local(value: date | datetime | str) -> str:
    """Format a date for tables, e.g. 2023-12-01 -> 'Dec 1, 2023'."""
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        value = value.date()
    return f"{_MONTH_ABBR[value.month - 1]} {value.day}, {value.year}"


def generate_y_axis(revenues: list[int]) -> tuple[list[str], int]:
    """Chart labels in $1K steps from the rounded-up maximum down to $0K."""
    highest = max(revenues, default=0)
    top_label = -(-highest // 1000) * 1000
    labels = [f"${step // 1000}K" for step in range(top_label, -1, -1000)]
    return labels, top_label


def month_order(label: str) -> int:
    """Calendar position of a month label ('Jan', 'January', 'jan'); unknown sorts last."""
    try:
        return _MONTH_ABBR.index(label.strip()[:3].title())
    except ValueError:
        return len(_MONTH_ABBR)
