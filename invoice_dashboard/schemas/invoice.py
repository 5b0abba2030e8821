"""Invoice Schemas — table rows, edit-form record and page counts."""

from pydantic import BaseModel

from invoice_dashboard.core.domain_types import InvoiceStatus


class InvoiceTableRow(BaseModel):
    """One row of the filtered invoice table (invoice joined with its customer)."""
    id: str
    customer_id: str
    amount: int
    formatted_amount: str
    date: str
    formatted_date: str
    status: InvoiceStatus
    name: str
    email: str
    image_url: str


class InvoiceEditRecord(BaseModel):
    """Invoice as loaded into the edit form — amount in dollars, not cents."""
    id: str
    customer_id: str
    amount: float
    status: InvoiceStatus


class InvoicePages(BaseModel):
    total_pages: int
    current_page: int
    pagination: list[int | str]
