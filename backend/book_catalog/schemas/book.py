"""Book Schemas: Pydantic models with field-level validation for API boundaries.

Invariants:
    - Wire keys are camelCase (publishedYear, totalPages); Python names are snake_case
    - title/author are stripped and must stay non-empty
    - publishedYear lies in [1000, current year] whenever present
    - Request bodies are strict (no "1965" -> 1965 coercion) and reject unknown keys
    - BookUpdate.to_patch() keeps only keys the client actually sent
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from book_catalog.core.domain_types import (
    MIN_PUBLISHED_YEAR, BookPatch, BookRecord, NewBook, Page, current_year,
)

_REQUEST_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    str_strip_whitespace=True,
    extra="forbid",
    strict=True,
)


def _check_year(v: int | None) -> int | None:
    if v is not None and v > current_year():
        raise ValueError(f"publishedYear must not be after {current_year()}")
    return v


class BookCreate(BaseModel):
    """Create payload: title and author required."""
    model_config = _REQUEST_CONFIG

    title: str = Field(min_length=1, examples=["To Kill a Mockingbird"])
    author: str = Field(min_length=1, examples=["Harper Lee"])
    genre: str | None = Field(None, examples=["Fiction"])
    published_year: int | None = Field(
        None, ge=MIN_PUBLISHED_YEAR, examples=[1960],
    )
    available: bool = True

    @field_validator("published_year")
    @classmethod
    def year_not_in_future(cls, v: int | None) -> int | None:
        return _check_year(v)

    def to_new_book(self) -> NewBook:
        return NewBook(
            title=self.title,
            author=self.author,
            genre=self.genre,
            published_year=self.published_year,
            available=self.available,
        )


class BookUpdate(BaseModel):
    """Partial update payload: every field optional.

    genre and publishedYear accept an explicit null (clears the value);
    title, author and available do not.
    """
    model_config = _REQUEST_CONFIG

    title: str | None = Field(None, min_length=1)
    author: str | None = Field(None, min_length=1)
    genre: str | None = None
    published_year: int | None = Field(None, ge=MIN_PUBLISHED_YEAR)
    available: bool | None = None

    @field_validator("title", "author", "available")
    @classmethod
    def not_null(cls, v, info):
        if v is None:
            raise ValueError(f"{to_camel(info.field_name)} cannot be null")
        return v

    @field_validator("published_year")
    @classmethod
    def year_not_in_future(cls, v: int | None) -> int | None:
        return _check_year(v)

    def to_patch(self) -> BookPatch:
        return BookPatch(**{
            name: getattr(self, name) for name in self.model_fields_set
        })


class BookResponse(BaseModel):
    """Book as exposed to clients."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    title: str
    author: str
    genre: str | None = None
    published_year: int | None = None
    available: bool = True

    @classmethod
    def from_record(cls, record: BookRecord) -> "BookResponse":
        return cls(
            id=record.id,
            title=record.title,
            author=record.author,
            genre=record.genre,
            published_year=record.published_year,
            available=record.available,
        )


class PaginatedBookResponse(BaseModel):
    """Page envelope shared by list and search."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    data: list[BookResponse]
    total: int
    page: int
    limit: int
    total_pages: int

    @classmethod
    def from_page(cls, page: Page[BookRecord]) -> "PaginatedBookResponse":
        return cls(
            data=[BookResponse.from_record(r) for r in page.data],
            total=page.total,
            page=page.page,
            limit=page.limit,
            total_pages=page.total_pages,
        )
