"""Services Layer: orchestrates store calls around the pure core.

Invariants:
    - Services receive their repository by injection; they never open sessions
"""
