"""Customer Schemas — select-control options and the customers table."""

from pydantic import BaseModel


class CustomerField(BaseModel):
    id: str
    name: str


class CustomerTableRow(BaseModel):
    """Customer with invoice aggregates; totals are formatted currency strings."""
    id: str
    name: str
    email: str
    image_url: str
    total_invoices: int
    total_pending: str
    total_paid: str
