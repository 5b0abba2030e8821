"""Dashboard Schemas — revenue chart, latest invoices and summary cards."""

from pydantic import BaseModel


class RevenueRecord(BaseModel):
    month: str
    revenue: int


class RevenueChart(BaseModel):
    """Revenue rows plus precomputed y-axis labels for the chart."""
    revenue: list[RevenueRecord]
    y_axis_labels: list[str]
    top_label: int


class LatestInvoice(BaseModel):
    id: str
    amount: str
    name: str
    email: str
    image_url: str


class CardData(BaseModel):
    number_of_customers: int
    number_of_invoices: int
    total_paid_invoices: str
    total_pending_invoices: str
