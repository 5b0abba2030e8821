"""Pagination — page-number strip for the invoice table.

Invariants:
    - At most 7 entries; ellipses ("...") stand in for skipped ranges
    - First and last pages are always present when total_pages > 0
"""

from math import ceil

from invoice_dashboard.core.domain_types import ITEMS_PER_PAGE

ELLIPSIS = "..."


def total_pages_for(count: int, per_page: int = ITEMS_PER_PAGE) -> int:
    return ceil(count / per_page)


def page_offset(page: int, per_page: int = ITEMS_PER_PAGE) -> int:
    """Row offset for a 1-based page number. Pages below 1 clamp to 1."""
    return (max(page, 1) - 1) * per_page


def generate_pagination(current_page: int, total_pages: int) -> list[int | str]:
    """Page numbers to render around current_page."""
    if total_pages <= 7:
        return list(range(1, total_pages + 1))

    if current_page <= 3:
        return [1, 2, 3, ELLIPSIS, total_pages - 1, total_pages]

    if current_page >= total_pages - 2:
        return [1, 2, ELLIPSIS, total_pages - 2, total_pages - 1, total_pages]

    return [
        1, ELLIPSIS,
        current_page - 1, current_page, current_page + 1,
        ELLIPSIS, total_pages,
    ]
