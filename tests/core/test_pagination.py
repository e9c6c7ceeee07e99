"""Pagination Engine — tests for window math and parameter normalization."""

import pytest

from reporting.core.pagination import (
    build_page, normalize_page_params, paginate,
)


def test_last_partial_page():
    w = paginate(25, 3, 10)
    assert w.items_offset == 20
    assert w.items_limit == 10
    assert w.total_pages == 3
    assert w.has_next is False
    assert w.has_prev is True


def test_empty_collection_has_no_pages():
    w = paginate(0, 1, 10)
    assert w.total_pages == 0
    assert w.has_next is False
    assert w.has_prev is False


def test_first_page_of_many():
    w = paginate(25, 1, 10)
    assert w.items_offset == 0
    assert w.has_next is True
    assert w.has_prev is False


def test_page_past_the_end_keeps_requested_page():
    w = paginate(5, 4, 2)
    assert w.page == 4
    assert w.items_offset == 6
    assert w.total_pages == 3
    assert w.has_next is False
    assert w.has_prev is True


@pytest.mark.parametrize("page,page_size,expected", [
    (None, None, (1, 10)),
    (0, 0, (1, 10)),
    (-3, -1, (1, 10)),
    ("abc", "x", (1, 10)),
    ("2", "5", (2, 5)),
    (" 4 ", 20, (4, 20)),
    ("1.5", "2.5", (1, 10)),
])
def test_normalize_falls_back_to_defaults(page, page_size, expected):
    assert normalize_page_params(page, page_size) == expected


def test_normalize_caps_page_size():
    assert normalize_page_params(1, 500, max_page_size=100) == (1, 100)


def test_normalize_uses_configured_default_page_size():
    assert normalize_page_params(None, None, default_page_size=25) == (1, 25)


def test_build_page_envelope():
    w = paginate(3, 2, 2)
    assert build_page([{"order_id": 3}], w) == {
        "items": [{"order_id": 3}],
        "page": 2,
        "page_size": 2,
        "total_items": 3,
        "total_pages": 2,
        "has_next": False,
        "has_prev": True,
    }
