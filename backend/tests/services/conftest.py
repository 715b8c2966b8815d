"""Service test fixtures: BookService over the in-memory repository."""

import pytest

from book_catalog.core.domain_types import NewBook
from book_catalog.services.book_service import BookService
from tests.services.fake_repository import InMemoryBookRepository


@pytest.fixture
def repository():
    return InMemoryBookRepository()


@pytest.fixture
def service(repository):
    return BookService(repository)


@pytest.fixture
async def shelf(service):
    """Four books with distinct authors and genres."""
    books = [
        NewBook(title="To Kill a Mockingbird", author="Harper Lee", genre="Fiction", published_year=1960),
        NewBook(title="Murder on the Orient Express", author="Agatha Christie", genre="Mystery", published_year=1934),
        NewBook(title="Relativity", author="Albert Einstein", genre="Science", published_year=1916),
        NewBook(title="Go Set a Watchman", author="Harper Lee", genre="Fiction", published_year=2015),
    ]
    return [await service.create(b) for b in books]
