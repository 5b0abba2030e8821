"""Action State — outcome of an invoice mutation, with its effects made explicit.

Invariants:
    - revalidated_paths and redirect_to are only set when the write succeeded
    - errors is non-empty only for validation failures (no write attempted)
    - not_found marks a write that targeted a missing invoice

Design Decisions:
    - Effects returned as data, not fired: callers (HTTP routes, tests) decide how
      to invalidate cached listings and navigate
"""

from dataclasses import asdict, dataclass, field

from invoice_dashboard.core.domain_types import INVOICES_LISTING_PATH


@dataclass(frozen=True)
class ActionState:
    """Next form state after a create/update/delete."""
    message: str | None = None
    errors: dict[str, list[str]] = field(default_factory=dict)
    revalidated_paths: tuple[str, ...] = ()
    redirect_to: str | None = None
    invoice_id: str | None = None
    not_found: bool = False

    @property
    def succeeded(self) -> bool:
        return bool(self.revalidated_paths)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["revalidated_paths"] = list(self.revalidated_paths)
        return data


def invalid_form(errors: dict[str, list[str]], message: str) -> ActionState:
    return ActionState(message=message, errors=errors)


def store_failure(message: str) -> ActionState:
    return ActionState(message=message)


def missing_invoice() -> ActionState:
    return ActionState(message="Invoice not found.", not_found=True)


def listing_changed(
    message: str | None = None,
    navigate: bool = True,
    invoice_id: str | None = None,
) -> ActionState:
    """Successful write: the invoice listing is stale, optionally go back to it."""
    return ActionState(
        message=message,
        revalidated_paths=(INVOICES_LISTING_PATH,),
        redirect_to=INVOICES_LISTING_PATH if navigate else None,
        invoice_id=invoice_id,
    )
