"""Query Helpers — shared failure handling for read operations.

Invariants:
    - A store failure inside fetch_guard is logged once and re-raised as DataFetchError
    - Non-database exceptions pass through untouched
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from invoice_dashboard.core.errors import DatabaseError, DataFetchError

logger = logging.getLogger(__name__)


@contextmanager
def fetch_guard(failure_message: str) -> Iterator[None]:
    """Turn DatabaseError into DataFetchError(failure_message)."""
    try:
        yield
    except DatabaseError as e:
        logger.error(
            f"Database Error: {e.message}",
            extra={"error_code": e.code},
        )
        raise DataFetchError(failure_message) from e
