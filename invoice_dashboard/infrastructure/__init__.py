"""Infrastructure Layer — database pool and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
"""
