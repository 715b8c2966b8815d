"""Book Routes: HTTP surface for the catalog.

Invariants:
    - Bodies and query params are validated by Pydantic/FastAPI before BookService runs
    - Path ids are plain strings; a malformed id is a 404, never a 400
    - /books/search is registered before /books/{book_id}
    - DELETE returns 204 with an empty body
"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from book_catalog.core.domain_types import (
    DEFAULT_PAGE, DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT,
    BookId, PageRequest, SearchCriteria,
)
from book_catalog.infrastructure.book_repository import SqlBookRepository
from book_catalog.infrastructure.database import get_db
from book_catalog.schemas.book import (
    BookCreate, BookResponse, BookUpdate, PaginatedBookResponse,
)
from book_catalog.services.book_service import BookService

router = APIRouter(prefix="/books", tags=["books"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "Book not found"}}
_BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"description": "Invalid request data"}}


def get_book_service(db: AsyncSession = Depends(get_db)) -> BookService:
    """Per-request service bound to the request's DB session."""
    return BookService(SqlBookRepository(db))


def get_page_request(
    page: int = Query(DEFAULT_PAGE, ge=1, description="Page number (default: 1)"),
    limit: int = Query(
        DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT,
        description="Items per page (default: 10, max: 100)",
    ),
) -> PageRequest:
    return PageRequest(page=page, limit=limit)


@router.post(
    "", response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    responses=_BAD_REQUEST,
)
async def create_book(
    body: BookCreate, service: BookService = Depends(get_book_service),
):
    record = await service.create(body.to_new_book())
    return BookResponse.from_record(record)


@router.get(
    "", response_model=PaginatedBookResponse,
    summary="Get all books with pagination",
    responses=_BAD_REQUEST,
)
async def list_books(
    pagination: PageRequest = Depends(get_page_request),
    service: BookService = Depends(get_book_service),
):
    page = await service.find_all(pagination)
    return PaginatedBookResponse.from_page(page)


@router.get(
    "/search", response_model=PaginatedBookResponse,
    summary="Search books by author or genre",
    responses=_BAD_REQUEST,
)
async def search_books(
    author: str | None = Query(None, description="Author substring, case-insensitive"),
    genre: str | None = Query(None, description="Genre substring, case-insensitive"),
    pagination: PageRequest = Depends(get_page_request),
    service: BookService = Depends(get_book_service),
):
    page = await service.search(
        SearchCriteria(author=author, genre=genre), pagination,
    )
    return PaginatedBookResponse.from_page(page)


@router.get(
    "/{book_id}", response_model=BookResponse,
    summary="Get a book by ID",
    responses=_NOT_FOUND,
)
async def get_book(
    book_id: str, service: BookService = Depends(get_book_service),
):
    record = await service.find_one(BookId(book_id))
    return BookResponse.from_record(record)


@router.put(
    "/{book_id}", response_model=BookResponse,
    summary="Update a book",
    responses={**_NOT_FOUND, **_BAD_REQUEST},
)
async def update_book(
    book_id: str,
    body: BookUpdate,
    service: BookService = Depends(get_book_service),
):
    record = await service.update(BookId(book_id), body.to_patch())
    return BookResponse.from_record(record)


@router.delete(
    "/{book_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a book",
    responses=_NOT_FOUND,
)
async def delete_book(
    book_id: str, service: BookService = Depends(get_book_service),
):
    await service.remove(BookId(book_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
