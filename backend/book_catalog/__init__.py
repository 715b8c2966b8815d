"""Book Catalog Service: CRUD and search over book records.

Invariants:
    - Package root contains no executable code (no import side effects)
"""
