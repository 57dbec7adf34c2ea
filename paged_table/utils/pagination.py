"""Pagination helpers for page slicing and page-link windows."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional

from paged_table.config import DEFAULT_PER_PAGE, DEFAULT_RANGE


@dataclass(frozen=True)
class PageState:
    """Slice boundaries for one requested page."""

    number_of_pages: int
    remainder: int
    start: int
    end: int


@dataclass(frozen=True)
class PageRangeWindow:
    """Contiguous block of page numbers shown as links."""

    start: int
    end: int
    show_prev: bool = False
    show_next: bool = False

    @property
    def pages(self) -> Iterator[int]:
        return iter(range(self.start, self.end + 1))

    @property
    def is_empty(self) -> bool:
        return self.end < self.start


def normalize_per_page(per_page: object) -> int:
    """Return a usable items-per-page value, falling back to the default."""
    try:
        value = int(per_page)
    except (TypeError, ValueError):
        return DEFAULT_PER_PAGE
    return value if value > 0 else DEFAULT_PER_PAGE


def normalize_range(page_range: object) -> int:
    """Return a usable window width, falling back to the default."""
    try:
        value = int(page_range)
    except (TypeError, ValueError):
        return DEFAULT_RANGE
    return value if value > 0 else DEFAULT_RANGE


def effective_count(item_count: int, total: Optional[int] = None) -> int:
    """Use an external total when one is supplied and positive."""
    if total is not None and int(total) > 0:
        return int(total)
    return item_count


def compute_total_pages(total_rows: int, page_size: int) -> int:
    """Compute the total number of pages for the provided page size."""
    page_size = normalize_per_page(page_size)
    if total_rows <= 0:
        return 0
    return math.ceil(total_rows / page_size)


def clamp_page_number(page_number: int, total_pages: int) -> int:
    """Clamp page number to valid bounds."""
    return min(max(page_number, 1), max(total_pages, 1))


def coerce_page_number(value: object, default: int = 1) -> int:
    """Turn a raw query value into a positive page number."""
    try:
        page_number = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    return page_number if page_number > 0 else default


def compute_page_state(
    item_count: int,
    per_page: int,
    requested_page: int,
    total: Optional[int] = None,
) -> PageState:
    """Compute slice boundaries and page count for the requested page.

    ``item_count`` is the length of the materialized collection; ``total``
    overrides it for the page arithmetic when the caller counted the dataset
    elsewhere. Pages are 1-based and the returned ``start``/``end`` are
    zero-based, end-exclusive indexes into the materialized collection.

    When ``start`` falls outside the materialized collection the state falls
    back to the first page instead of an empty slice.
    """
    per_page = normalize_per_page(per_page)
    count = effective_count(item_count, total)

    remainder = count % per_page
    number_of_pages = count // per_page + (1 if remainder != 0 else 0)

    start = (requested_page * per_page) - per_page
    if requested_page == number_of_pages and remainder == 0:
        end = start + per_page
    elif requested_page == number_of_pages:
        end = (requested_page * per_page) - (per_page - remainder)
    else:
        end = requested_page * per_page

    if start < 0 or start >= item_count:
        start = 0
        end = per_page

    return PageState(number_of_pages=number_of_pages, remainder=remainder, start=start, end=end)


def compute_window(
    requested_page: int,
    number_of_pages: int,
    page_range: Optional[int],
    total: Optional[int] = None,
) -> PageRangeWindow:
    """Select the block of page links to show around the requested page.

    Cases are checked in order: everything fits without an external total,
    first block that holds all pages, first block with more pages after it,
    last block with a remainder, last block that divides evenly, and finally
    a middle block with links on both sides.
    """
    if (page_range is None or page_range > number_of_pages) and total is None:
        return PageRangeWindow(1, number_of_pages)

    page_range = normalize_range(page_range)

    if requested_page <= page_range and number_of_pages <= page_range:
        return PageRangeWindow(1, number_of_pages)

    if requested_page <= page_range and number_of_pages > page_range:
        return PageRangeWindow(1, page_range, show_prev=False, show_next=True)

    full_blocks = number_of_pages // page_range
    if requested_page > page_range * full_blocks:
        return PageRangeWindow(page_range * full_blocks + 1, number_of_pages, show_prev=True, show_next=False)

    if number_of_pages % page_range == 0 and requested_page > page_range * (full_blocks - 1):
        return PageRangeWindow(page_range * (full_blocks - 1) + 1, number_of_pages, show_prev=True, show_next=False)

    if requested_page % page_range == 0:
        position_in_range = page_range - 1
    else:
        position_in_range = (requested_page % page_range) - 1
    window_start = requested_page - position_in_range
    return PageRangeWindow(window_start, window_start + page_range - 1, show_prev=True, show_next=True)
