"""Invoice Dashboard — customers, invoices and revenue behind a JSON API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
