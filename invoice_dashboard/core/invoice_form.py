"""Invoice Form Parsing — untrusted flat form fields to a typed invoice record.

Invariants:
    - parse_invoice_form() never raises on bad input; it returns InvoiceFormInvalid
    - InvoiceFormInvalid.errors has an entry for exactly the invalid fields
    - Error keys are the form field names (customerId, amount, status)
    - A parsed amount is finite, rounds to at least one cent and fits the
      32-bit amount column (MAX_AMOUNT_CENTS)

Design Decisions:
    - Pydantic model with PydanticCustomError: user-facing messages without
      pydantic's "Value error, " prefix
    - validate_default=True so a missing field gets the same message as an empty one
    - Tagged result (ok=True/False) instead of exceptions: callers branch on data
"""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from invoice_dashboard.core.domain_types import Cents, CustomerId, InvoiceStatus

CUSTOMER_REQUIRED = "Please select a customer."
AMOUNT_NOT_POSITIVE = "Please enter an amount greater than $0."
STATUS_REQUIRED = "Please select an invoice status."

MAX_AMOUNT_CENTS = 2_147_483_647
MAX_AMOUNT = Decimal(MAX_AMOUNT_CENTS) / 100

_FORM_KEYS = {
    "customer_id": "customerId",
    "customerId": "customerId",
    "amount": "amount",
    "status": "status",
}


def to_cents(amount: Decimal) -> Cents:
    """Dollars to integer cents, rounding half up."""
    return Cents(int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)))


class InvoiceFormInput(BaseModel):
    """Raw invoice form fields as submitted by the dashboard forms."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    customer_id: str = Field(None, alias="customerId", validate_default=True)
    amount: Decimal = Field(None, validate_default=True)
    status: InvoiceStatus = Field(None, validate_default=True)

    @field_validator("customer_id", mode="before")
    @classmethod
    def require_customer(cls, v: Any) -> str:
        if not isinstance(v, str) or not v.strip():
            raise PydanticCustomError("customer_required", CUSTOMER_REQUIRED)
        return v.strip()

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, v: Any) -> Decimal:
        if v is None or isinstance(v, bool):
            raise PydanticCustomError("amount_not_positive", AMOUNT_NOT_POSITIVE)
        try:
            amount = Decimal(str(v).strip())
        except InvalidOperation:
            raise PydanticCustomError("amount_not_positive", AMOUNT_NOT_POSITIVE)
        # bound before rounding: quantize fails past the context precision
        if not amount.is_finite() or amount > MAX_AMOUNT or to_cents(amount) < 1:
            raise PydanticCustomError("amount_not_positive", AMOUNT_NOT_POSITIVE)
        return amount

    @field_validator("status", mode="before")
    @classmethod
    def require_status(cls, v: Any) -> str:
        if v not in {s.value for s in InvoiceStatus}:
            raise PydanticCustomError("status_required", STATUS_REQUIRED)
        return v


@dataclass(frozen=True)
class InvoiceFormData:
    """Validated invoice fields."""
    customer_id: CustomerId
    amount: Decimal
    status: InvoiceStatus

    @property
    def amount_in_cents(self) -> Cents:
        return to_cents(self.amount)


@dataclass(frozen=True)
class InvoiceFormParsed:
    data: InvoiceFormData
    ok: Literal[True] = True


@dataclass(frozen=True)
class InvoiceFormInvalid:
    errors: dict[str, list[str]] = field(default_factory=dict)
    ok: Literal[False] = False


InvoiceFormResult = InvoiceFormParsed | InvoiceFormInvalid


def parse_invoice_form(raw: Mapping[str, Any]) -> InvoiceFormResult:
    """Parse submitted form fields, collecting every field error."""
    try:
        parsed = InvoiceFormInput.model_validate(dict(raw))
    except ValidationError as e:
        return InvoiceFormInvalid(errors=_collect_field_errors(e))
    return InvoiceFormParsed(
        data=InvoiceFormData(
            customer_id=CustomerId(parsed.customer_id),
            amount=parsed.amount,
            status=parsed.status,
        ),
    )


def _collect_field_errors(exc: ValidationError) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for err in exc.errors():
        loc = err["loc"][0] if err["loc"] else "form"
        key = _FORM_KEYS.get(str(loc), str(loc))
        errors.setdefault(key, []).append(err["msg"])
    return errors
