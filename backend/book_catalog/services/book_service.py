"""Book Service: the six catalog operations over an injected BookRepository.

Invariants:
    - Stateless: the only attribute is the repository passed in
    - BookNotFoundError is the only error raised here; store failures propagate as-is
    - find_all and search share one code path; no criteria means "match everything"
    - Count runs first, then the data query on the same store; either failing
      aborts the whole operation (no partial pages)
    - A page whose offset is at or past the total issues no data query
"""

import logging

from book_catalog.core.domain_types import (
    BookId, BookPatch, BookRecord, NewBook, Page, PageRequest, SearchCriteria,
)
from book_catalog.core.errors import BookNotFoundError
from book_catalog.core.pagination import build_page, compute_skip
from book_catalog.core.repository_protocols import BookRepository

logger = logging.getLogger(__name__)


class BookService:
    """Catalog façade used by the HTTP routes."""

    def __init__(self, repository: BookRepository):
        self.repository = repository

    async def create(self, book: NewBook) -> BookRecord:
        record = await self.repository.insert(book)
        logger.info("Book created", extra={"book_id": record.id})
        return record

    async def find_all(self, pagination: PageRequest) -> Page[BookRecord]:
        return await self._paginate(SearchCriteria(), pagination)

    async def find_one(self, book_id: BookId) -> BookRecord:
        record = await self.repository.get(book_id)
        if record is None:
            raise BookNotFoundError(book_id)
        return record

    async def update(self, book_id: BookId, patch: BookPatch) -> BookRecord:
        record = await self.repository.update(book_id, patch.changes())
        if record is None:
            raise BookNotFoundError(book_id)
        if not patch.is_empty():
            logger.info("Book updated", extra={"book_id": record.id})
        return record

    async def remove(self, book_id: BookId) -> None:
        deleted = await self.repository.delete(book_id)
        if not deleted:
            raise BookNotFoundError(book_id)
        logger.info("Book deleted", extra={"book_id": book_id})

    async def search(
        self, criteria: SearchCriteria, pagination: PageRequest,
    ) -> Page[BookRecord]:
        return await self._paginate(criteria, pagination)

    async def _paginate(
        self, criteria: SearchCriteria, pagination: PageRequest,
    ) -> Page[BookRecord]:
        total = await self.repository.count(criteria)
        skip = compute_skip(pagination)
        if skip >= total:
            # past the end: OFFSET may exceed the store's integer range
            return build_page([], total, pagination)
        data = await self.repository.list_page(criteria, skip, pagination.limit)
        return build_page(data, total, pagination)
