"""Pagination Engine — bounded, deterministic page windows over ordered collections.

Invariants:
    - page and page_size are >= 1 after normalization; absent, unparsable or
      non-positive values fall back to the defaults (page=1, page_size=10)
    - offset = (page - 1) * page_size
    - total_pages = ceil(total_items / page_size); 0 when total_items == 0
    - has_next = page < total_pages; has_prev = page > 1
    - The caller fetches rows in ascending identifier order so pages repeat
"""

import math
from dataclasses import dataclass

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class PageWindow:
    """Slice of an ordered collection plus its page metadata."""
    page: int
    page_size: int
    total_items: int
    items_offset: int
    items_limit: int
    total_pages: int
    has_next: bool
    has_prev: bool


def _positive_int(value: object, default: int) -> int:
    if value is None or isinstance(value, bool):
        return default
    try:
        parsed = int(str(value).strip())
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def normalize_page_params(
    page: object = None,
    page_size: object = None,
    *,
    default_page_size: int = DEFAULT_PAGE_SIZE,
    max_page_size: int | None = None,
) -> tuple[int, int]:
    """Parse caller-supplied page/page_size, falling back to defaults."""
    p = _positive_int(page, DEFAULT_PAGE)
    size = _positive_int(page_size, default_page_size)
    if max_page_size is not None:
        size = min(size, max_page_size)
    return p, size


def paginate(total_items: int, page: object = None, page_size: object = None) -> PageWindow:
    """Compute the window for `page` over `total_items` rows."""
    p, size = normalize_page_params(page, page_size)
    total = max(total_items, 0)
    total_pages = math.ceil(total / size)
    return PageWindow(
        page=p,
        page_size=size,
        total_items=total,
        items_offset=(p - 1) * size,
        items_limit=size,
        total_pages=total_pages,
        has_next=p < total_pages,
        has_prev=p > 1,
    )


def build_page(items: list, window: PageWindow) -> dict:
    """Pagination envelope for already-fetched page items."""
    return {
        "items": items,
        "page": window.page,
        "page_size": window.page_size,
        "total_items": window.total_items,
        "total_pages": window.total_pages,
        "has_next": window.has_next,
        "has_prev": window.has_prev,
    }
