"""Render one page of row records as table markup or through templates."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence, Tuple

from paged_table.config import (
    DEFAULT_PER_PAGE,
    DEFAULT_RANGE,
    FIELD_PLACEHOLDER,
    PAGE_LINKS_PLACEHOLDER,
    TABLE_CLOSE_TAG,
    TABLE_OPEN_TAG,
)
from paged_table.services.link_service import HtmlLinkFactory, LinkContext, LinkStyle, build_links, join_links
from paged_table.utils.helpers import format_date_value, normalize_text
from paged_table.utils.pagination import (
    PageRangeWindow,
    PageState,
    compute_page_state,
    compute_window,
    normalize_per_page,
    normalize_range,
)

logger = logging.getLogger(__name__)

Row = Mapping[str, object]


@dataclass
class PaginationConfig:
    """Items per page, link window width and an optional external total."""

    per_page: int = DEFAULT_PER_PAGE
    page_range: int = DEFAULT_RANGE
    total: Optional[int] = None

    def __post_init__(self) -> None:
        self.per_page = normalize_per_page(self.per_page)
        self.page_range = normalize_range(self.page_range)
        self.total = int(self.total) if self.total is not None else None


@dataclass
class Templates:
    """Optional header, row and footer templates."""

    header: Optional[str] = None
    row: Optional[str] = None
    footer: Optional[str] = None


def paginate(
    item_count: int,
    config: PaginationConfig,
    requested_page: int,
) -> Tuple[PageState, PageRangeWindow]:
    """Compute the page slice and link window for one request."""
    state = compute_page_state(item_count, config.per_page, requested_page, config.total)
    window = compute_window(requested_page, state.number_of_pages, config.page_range, config.total)
    logger.debug(
        f"Page {requested_page}: {state.number_of_pages} pages, slice [{state.start}, {state.end}), "
        f"window {window.start}-{window.end}"
    )
    return state, window


def format_cell(key: str, value: object, date_format: Optional[str], templated: bool) -> str:
    """Apply optional date reformatting to a field value."""
    if date_format:
        if templated and "date" in key.lower():
            value = format_date_value(value, date_format, lenient=True)
        else:
            value = format_date_value(value, date_format)
    return normalize_text(value)


def render_row(row: Row, date_format: Optional[str] = None) -> str:
    cells = "".join(f"<td>{format_cell(key, value, date_format, False)}</td>" for key, value in row.items())
    return f"    <tr>{cells}</tr>\n"


def render_row_template(template: str, row: Row, date_format: Optional[str] = None) -> str:
    """Substitute each field of ``row`` into a fresh copy of ``template``."""
    output = template
    for key, value in row.items():
        output = output.replace(FIELD_PLACEHOLDER.format(field=key), format_cell(key, value, date_format, True))
    return output


def render_header(links: List[str], separator: str, template: Optional[str] = None) -> str:
    if template is None:
        output = ""
        if len(links) > 1:
            output += join_links(links, separator) + "\n"
        return output + TABLE_OPEN_TAG + "\n"
    return template.replace(PAGE_LINKS_PLACEHOLDER, join_links(links, separator))


def render_footer(links: List[str], separator: str, template: Optional[str] = None) -> str:
    if template is None:
        output = TABLE_CLOSE_TAG + "\n"
        if len(links) > 1:
            output += join_links(links, separator) + "\n"
        return output
    return template.replace(PAGE_LINKS_PLACEHOLDER, join_links(links, separator))


def render_body(
    items: Sequence[Row],
    state: PageState,
    row_template: Optional[str] = None,
    date_format: Optional[str] = None,
) -> str:
    """Render rows ``[start, end)``, skipping indexes past the collection."""
    parts: List[str] = []
    for index in range(state.start, state.end):
        if index >= len(items) or items[index] is None:
            continue
        if row_template is None:
            parts.append(render_row(items[index], date_format))
        else:
            parts.append(render_row_template(row_template, items[index], date_format))
    return "".join(parts)


def render_page(
    items: Sequence[Row],
    config: PaginationConfig,
    templates: Optional[Templates],
    requested_page: int,
    context: Optional[LinkContext] = None,
    style: Optional[LinkStyle] = None,
    date_format: Optional[str] = None,
) -> str:
    """Render the requested page with its page links.

    The whole page is assembled in memory and returned in one piece; callers
    decide where it goes.
    """
    templates = templates or Templates()
    style = style or LinkStyle()

    state, window = paginate(len(items), config, requested_page)
    links = build_links(window, requested_page, HtmlLinkFactory(context, style), style.bookend)

    return (
        render_header(links, style.separator, templates.header)
        + render_body(items, state, templates.row, date_format)
        + render_footer(links, style.separator, templates.footer)
    )
