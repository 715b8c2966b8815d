"""Domain Types: catalog entities and request value objects.

Invariants:
    - BookId wraps the store-assigned identifier as an opaque string
    - BookRecord.title and BookRecord.author are never empty
    - BookPatch distinguishes "absent" (UNSET) from "set to None"
    - PageRequest.page >= 1 and 1 <= PageRequest.limit <= MAX_PAGE_LIMIT

Design Decisions:
    - Frozen dataclasses: records are read-only once the store returns them
    - UNSET is a single-member Enum so `is UNSET` narrows the type
"""

from dataclasses import dataclass, field, fields
from datetime import date
from enum import Enum
from typing import Generic, NewType, TypeVar


# ─── Identity Types ──────────────────────────────────────────────

BookId = NewType("BookId", str)


# ─── Limits ──────────────────────────────────────────────────────

MIN_PUBLISHED_YEAR = 1000
DEFAULT_PAGE = 1
DEFAULT_PAGE_LIMIT = 10
MAX_PAGE_LIMIT = 100


def current_year() -> int:
    """Upper bound for publishedYear, evaluated per call (not at import)."""
    return date.today().year


# ─── Sentinels ───────────────────────────────────────────────────

class Unset(Enum):
    """Marker for a patch field the caller did not supply."""
    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = Unset.UNSET


# ─── Entities ────────────────────────────────────────────────────

@dataclass(frozen=True)
class BookRecord:
    """A persisted book as returned by the store."""
    id: BookId
    title: str
    author: str
    genre: str | None = None
    published_year: int | None = None
    available: bool = True


@dataclass(frozen=True)
class NewBook:
    """Validated input for create. The store assigns the id."""
    title: str
    author: str
    genre: str | None = None
    published_year: int | None = None
    available: bool = True


@dataclass(frozen=True)
class BookPatch:
    """Partial update: every field is present-or-absent."""
    title: str | Unset = UNSET
    author: str | Unset = UNSET
    genre: str | None | Unset = UNSET
    published_year: int | None | Unset = UNSET
    available: bool | Unset = UNSET

    def changes(self) -> dict[str, object]:
        """Only the supplied fields, keyed by attribute name."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }

    def is_empty(self) -> bool:
        return not self.changes()


# ─── Queries ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class PageRequest:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_PAGE_LIMIT

    def __post_init__(self):
        if self.page < 1:
            raise ValueError(f"page must be >= 1, got {self.page}")
        if not 1 <= self.limit <= MAX_PAGE_LIMIT:
            raise ValueError(
                f"limit must be between 1 and {MAX_PAGE_LIMIT}, got {self.limit}",
            )


@dataclass(frozen=True)
class SearchCriteria:
    """Case-insensitive substring filters; empty strings count as absent."""
    author: str | None = None
    genre: str | None = None

    def __post_init__(self):
        # frozen: normalize through object.__setattr__
        object.__setattr__(self, "author", self.author or None)
        object.__setattr__(self, "genre", self.genre or None)

    def is_empty(self) -> bool:
        return self.author is None and self.genre is None


T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results plus corpus-wide counts."""
    data: list[T] = field(default_factory=list)
    total: int = 0
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_PAGE_LIMIT
    total_pages: int = 0
