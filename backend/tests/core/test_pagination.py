"""Tests for pagination math: pure, no IO."""

import math

import pytest

from book_catalog.core.domain_types import PageRequest
from book_catalog.core.pagination import (
    build_page, compute_skip, compute_total_pages,
)


@pytest.mark.parametrize(
    "page,limit,expected",
    [(1, 10, 0), (2, 10, 10), (3, 7, 14), (1, 100, 0), (5, 1, 4)],
)
def test_skip_is_page_minus_one_times_limit(page, limit, expected):
    assert compute_skip(PageRequest(page=page, limit=limit)) == expected


@pytest.mark.parametrize("total,limit", [(1, 10), (10, 10), (11, 10), (99, 100), (250, 7)])
def test_total_pages_is_ceiling(total, limit):
    assert compute_total_pages(total, limit) == math.ceil(total / limit)


def test_total_pages_is_zero_for_empty_corpus():
    assert compute_total_pages(0, 10) == 0


def test_total_pages_exact_for_large_totals():
    assert compute_total_pages(10**18 + 1, 100) == 10**16 + 1


def test_build_page_echoes_request_and_counts():
    page = build_page(["a", "b"], total=12, request=PageRequest(page=2, limit=2))
    assert page.data == ["a", "b"]
    assert page.total == 12
    assert (page.page, page.limit, page.total_pages) == (2, 2, 6)


def test_build_page_past_end_keeps_totals():
    page = build_page([], total=3, request=PageRequest(page=9, limit=2))
    assert page.data == []
    assert page.total_pages == 2
