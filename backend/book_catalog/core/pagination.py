"""Pagination Math: offset and page-count arithmetic shared by list and search.

Invariants:
    - skip = (page - 1) * limit
    - total_pages = ceil(total / limit), and 0 when total is 0
    - A page past the end yields empty data but keeps corpus-wide total/total_pages
"""

from typing import Sequence, TypeVar

from book_catalog.core.domain_types import Page, PageRequest

T = TypeVar("T")


def compute_skip(request: PageRequest) -> int:
    return (request.page - 1) * request.limit


def compute_total_pages(total: int, limit: int) -> int:
    """Integer ceiling division; avoids float rounding on large totals."""
    if total <= 0:
        return 0
    return -(-total // limit)


def build_page(items: Sequence[T], total: int, request: PageRequest) -> Page[T]:
    return Page(
        data=list(items),
        total=total,
        page=request.page,
        limit=request.limit,
        total_pages=compute_total_pages(total, request.limit),
    )
