"""Boundary Protocols: contract between the book service and the store.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - Store lookups by id return None for both unknown and malformed ids
    - list_page/count receive the same SearchCriteria so totals match the page

Design Decisions:
    - Protocol over ABC: the SQL repository and the in-memory test fake
      satisfy it structurally, with no shared base class
    - Async methods: implementations do IO; core functions around them stay sync
"""

from typing import Protocol

from book_catalog.core.domain_types import (
    BookId, BookRecord, NewBook, SearchCriteria,
)


class BookRepository(Protocol):
    """Contract for book persistence: implemented by shell."""
    async def insert(self, book: NewBook) -> BookRecord: ...
    async def get(self, book_id: BookId) -> BookRecord | None: ...
    async def update(
        self, book_id: BookId, changes: dict[str, object],
    ) -> BookRecord | None: ...
    async def delete(self, book_id: BookId) -> bool: ...
    async def list_page(
        self, criteria: SearchCriteria, skip: int, limit: int,
    ) -> list[BookRecord]: ...
    async def count(self, criteria: SearchCriteria) -> int: ...
