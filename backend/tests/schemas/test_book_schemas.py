"""Book schema validation: the boundary that keeps invalid books out of the store.

Invariants:
    - title/author required, stripped, non-empty
    - publishedYear in [1000, current year]
    - strict types and no unknown keys on request bodies
    - BookUpdate.to_patch() contains exactly the keys sent
"""

import pytest
from pydantic import ValidationError

from book_catalog.core.domain_types import UNSET, BookId, BookRecord, Page, current_year
from book_catalog.schemas.book import (
    BookCreate, BookResponse, BookUpdate, PaginatedBookResponse,
)


# --- BookCreate ---------------------------------------------------------------

def test_create_accepts_camel_case_payload():
    body = BookCreate.model_validate({
        "title": "Dune", "author": "Frank Herbert",
        "genre": "Science Fiction", "publishedYear": 1965, "available": False,
    })
    book = body.to_new_book()
    assert book.published_year == 1965
    assert book.available is False


def test_create_defaults_available_true():
    body = BookCreate.model_validate({"title": "Dune", "author": "Frank Herbert"})
    assert body.available is True
    assert body.genre is None
    assert body.published_year is None


@pytest.mark.parametrize("missing", ["title", "author"])
def test_create_requires_title_and_author(missing):
    payload = {"title": "Dune", "author": "Frank Herbert"}
    del payload[missing]
    with pytest.raises(ValidationError) as exc_info:
        BookCreate.model_validate(payload)
    assert exc_info.value.errors()[0]["loc"] == (missing,)


@pytest.mark.parametrize("blank", ["", "   "])
def test_create_rejects_blank_title(blank):
    with pytest.raises(ValidationError):
        BookCreate.model_validate({"title": blank, "author": "Frank Herbert"})


def test_create_strips_whitespace():
    body = BookCreate.model_validate({"title": "  Dune ", "author": " Frank Herbert"})
    assert body.title == "Dune"
    assert body.author == "Frank Herbert"


@pytest.mark.parametrize("year", [999, current_year() + 1])
def test_create_rejects_year_out_of_range(year):
    with pytest.raises(ValidationError):
        BookCreate.model_validate({"title": "T", "author": "A", "publishedYear": year})


@pytest.mark.parametrize("year", [1000, current_year()])
def test_create_accepts_year_bounds(year):
    body = BookCreate.model_validate({"title": "T", "author": "A", "publishedYear": year})
    assert body.published_year == year


def test_create_rejects_string_year():
    with pytest.raises(ValidationError):
        BookCreate.model_validate({"title": "T", "author": "A", "publishedYear": "1965"})


def test_create_rejects_string_boolean():
    with pytest.raises(ValidationError):
        BookCreate.model_validate({"title": "T", "author": "A", "available": "true"})


def test_create_rejects_unknown_field():
    with pytest.raises(ValidationError) as exc_info:
        BookCreate.model_validate({"title": "T", "author": "A", "isbn": "123"})
    assert exc_info.value.errors()[0]["type"] == "extra_forbidden"


# --- BookUpdate ---------------------------------------------------------------

def test_update_empty_body_gives_empty_patch():
    assert BookUpdate.model_validate({}).to_patch().is_empty()


def test_update_patch_contains_only_sent_fields():
    patch = BookUpdate.model_validate({"available": False}).to_patch()
    assert patch.changes() == {"available": False}
    assert patch.title is UNSET


def test_update_null_genre_clears_it():
    patch = BookUpdate.model_validate({"genre": None, "publishedYear": None}).to_patch()
    assert patch.changes() == {"genre": None, "published_year": None}


@pytest.mark.parametrize("field", ["title", "author", "available"])
def test_update_rejects_null_for_required_fields(field):
    with pytest.raises(ValidationError):
        BookUpdate.model_validate({field: None})


def test_update_rejects_out_of_range_year():
    with pytest.raises(ValidationError):
        BookUpdate.model_validate({"publishedYear": 500})


def test_update_rejects_id_in_body():
    with pytest.raises(ValidationError):
        BookUpdate.model_validate({"id": "abc"})


# --- Responses ----------------------------------------------------------------

def test_response_serializes_camel_case():
    record = BookRecord(id=BookId("b1"), title="Dune", author="Frank Herbert", published_year=1965)
    dumped = BookResponse.from_record(record).model_dump(by_alias=True)
    assert dumped == {
        "id": "b1", "title": "Dune", "author": "Frank Herbert",
        "genre": None, "publishedYear": 1965, "available": True,
    }


def test_paginated_response_serializes_total_pages():
    record = BookRecord(id=BookId("b1"), title="Dune", author="Frank Herbert")
    page = Page(data=[record], total=11, page=1, limit=10, total_pages=2)
    dumped = PaginatedBookResponse.from_page(page).model_dump(by_alias=True)
    assert dumped["totalPages"] == 2
    assert dumped["total"] == 11
    assert dumped["data"][0]["id"] == "b1"
