"""Core Layer: pure catalog logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Pagination math and patch merging are pure and deterministic
"""
