"""Pydantic Schemas — response shapes for API endpoints.

Invariants:
    - Schemas are view-friendly records: flattened joins, formatted money where shown
    - Form input parsing lives in core/invoice_form.py (it is domain validation)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
