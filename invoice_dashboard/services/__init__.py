"""Services Layer — data access (queries) and mutations (actions).

Invariants:
    - Every service receives the DatabaseSessionManager explicitly
    - Queries raise DataFetchError on store failure; actions return ActionState

Design Decisions:
    - One file per aggregate for locality (revenue, invoices, customers, users)
"""
