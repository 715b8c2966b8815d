"""Async Session Factory: DB sessions for use outside FastAPI.

Invariants:
    - Meant for scripts and test fixtures; requests go through infrastructure/database.py
    - In-memory SQLite URLs share one connection (StaticPool) so every session
      sees the same database
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine, create_async_engine,
)
from sqlalchemy.pool import StaticPool


def create_engine_for_url(database_url: str) -> AsyncEngine:
    if database_url.startswith("sqlite") and ":memory:" in database_url:
        return create_async_engine(
            database_url, echo=False, poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    return create_async_engine(database_url, echo=False)
