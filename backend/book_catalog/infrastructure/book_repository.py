"""SQL Book Repository: BookRepository implemented over an AsyncSession.

Invariants:
    - Malformed ids behave exactly like unknown ids (None / False), never raise
    - Every write commits before returning; reads never commit
    - list_page orders by (created_at, id) so pagination is deterministic
    - Substring filters match user input literally (LIKE wildcards escaped)

Case folding uses the database's lower(). PostgreSQL folds non-ASCII letters;
SQLite's built-in lower() is ASCII-only, so on the SQLite test store "émile"
does not match "Émile".
"""

import logging
import uuid

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from book_catalog.core.domain_types import (
    BookId, BookRecord, NewBook, SearchCriteria,
)
from book_catalog.models.book import Book

logger = logging.getLogger(__name__)


def parse_book_id(book_id: str) -> uuid.UUID | None:
    """Store-format id, or None when the string is not a UUID."""
    try:
        return uuid.UUID(str(book_id))
    except (ValueError, TypeError, AttributeError):
        return None


def to_record(row: Book) -> BookRecord:
    return BookRecord(
        id=BookId(str(row.id)),
        title=row.title,
        author=row.author,
        genre=row.genre,
        published_year=row.published_year,
        available=row.available,
    )


def _filters(criteria: SearchCriteria) -> list:
    clauses = []
    if criteria.author:
        clauses.append(Book.author.icontains(criteria.author, autoescape=True))
    if criteria.genre:
        clauses.append(Book.genre.icontains(criteria.genre, autoescape=True))
    return clauses


class SqlBookRepository:
    """Persists books in the `books` table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def insert(self, book: NewBook) -> BookRecord:
        row = Book(
            title=book.title,
            author=book.author,
            genre=book.genre,
            published_year=book.published_year,
            available=book.available,
        )
        self.db.add(row)
        await self.db.commit()
        await self.db.refresh(row)
        return to_record(row)

    async def get(self, book_id: BookId) -> BookRecord | None:
        row = await self._get_row(book_id)
        return to_record(row) if row else None

    async def update(
        self, book_id: BookId, changes: dict[str, object],
    ) -> BookRecord | None:
        row = await self._get_row(book_id)
        if row is None:
            return None
        if not changes:
            return to_record(row)
        for name, value in changes.items():
            setattr(row, name, value)
        await self.db.commit()
        await self.db.refresh(row)
        return to_record(row)

    async def delete(self, book_id: BookId) -> bool:
        uid = parse_book_id(book_id)
        if uid is None:
            return False
        result = await self.db.execute(delete(Book).where(Book.id == uid))
        await self.db.commit()
        return result.rowcount > 0

    async def list_page(
        self, criteria: SearchCriteria, skip: int, limit: int,
    ) -> list[BookRecord]:
        query = (
            select(Book)
            .where(*_filters(criteria))
            .order_by(Book.created_at.asc(), Book.id.asc())
            .offset(skip)
            .limit(limit)
        )
        result = await self.db.execute(query)
        return [to_record(row) for row in result.scalars().all()]

    async def count(self, criteria: SearchCriteria) -> int:
        query = select(func.count()).select_from(Book).where(*_filters(criteria))
        result = await self.db.execute(query)
        return result.scalar_one()

    async def _get_row(self, book_id: BookId) -> Book | None:
        uid = parse_book_id(book_id)
        if uid is None:
            logger.debug("Malformed book id treated as missing", extra={"book_id": book_id})
            return None
        return await self.db.get(Book, uid)
