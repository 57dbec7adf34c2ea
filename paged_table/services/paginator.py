"""Stateful paginator facade over the pure page calculations."""

from __future__ import annotations

import logging
import sys
from typing import List, Optional, Sequence, TextIO
from urllib.parse import parse_qs, urlsplit

from paged_table.config import DEFAULT_PER_PAGE, DEFAULT_RANGE, DEFAULT_SEPARATOR, PAGE_PARAM
from paged_table.services.link_service import Bookend, HtmlLinkFactory, LinkContext, LinkStyle, build_links
from paged_table.services.render_service import PaginationConfig, Row, Templates, paginate, render_page
from paged_table.utils.pagination import (
    PageRangeWindow,
    PageState,
    coerce_page_number,
    compute_total_pages,
    effective_count,
)

logger = logging.getLogger(__name__)


class Paginator:
    """Hold items, settings and templates for rendering pages.

    Setters return the paginator so calls can be chained. The last computed
    page state and window are kept for inspection and are fully recomputed on
    every ``get_links``/``render`` call.
    """

    def __init__(
        self,
        items: Sequence[Row],
        per_page: int = DEFAULT_PER_PAGE,
        page_range: int = DEFAULT_RANGE,
        total: Optional[int] = None,
    ) -> None:
        self._items: Sequence[Row] = items
        self._config = PaginationConfig(per_page, page_range, total)
        self._templates = Templates()
        self._bookend = Bookend.SINGLE_ARROWS
        self._separator = DEFAULT_SEPARATOR
        self._date_format: Optional[str] = None
        self._class_on: Optional[str] = None
        self._class_off: Optional[str] = None
        self._page_state: Optional[PageState] = None
        self._window: Optional[PageRangeWindow] = None

    # Items and sizing

    @property
    def items(self) -> Sequence[Row]:
        return self._items

    @property
    def item_count(self) -> int:
        return len(self._items)

    @property
    def per_page(self) -> int:
        return self._config.per_page

    @property
    def page_range(self) -> int:
        return self._config.page_range

    @property
    def total(self) -> Optional[int]:
        return self._config.total

    @property
    def config(self) -> PaginationConfig:
        return PaginationConfig(self._config.per_page, self._config.page_range, self._config.total)

    def set_items(self, items: Sequence[Row]) -> "Paginator":
        self._items = items
        return self

    def set_per_page(self, per_page: int = DEFAULT_PER_PAGE) -> "Paginator":
        self._config = PaginationConfig(per_page, self._config.page_range, self._config.total)
        return self

    def set_range(self, page_range: int = DEFAULT_RANGE) -> "Paginator":
        self._config = PaginationConfig(self._config.per_page, page_range, self._config.total)
        return self

    def set_total(self, total: Optional[int] = None) -> "Paginator":
        self._config = PaginationConfig(self._config.per_page, self._config.page_range, total)
        return self

    # Link presentation

    @property
    def bookend(self) -> Bookend:
        return self._bookend

    @property
    def separator(self) -> str:
        return self._separator

    @property
    def class_on(self) -> Optional[str]:
        return self._class_on

    @property
    def class_off(self) -> Optional[str]:
        return self._class_off

    def set_bookend(self, bookend: int = Bookend.SINGLE_ARROWS) -> "Paginator":
        self._bookend = Bookend(bookend)
        return self

    def set_separator(self, separator: str = DEFAULT_SEPARATOR) -> "Paginator":
        self._separator = separator
        return self

    def set_class_on(self, class_name: Optional[str]) -> "Paginator":
        self._class_on = class_name
        return self

    def set_class_off(self, class_name: Optional[str]) -> "Paginator":
        self._class_off = class_name
        return self

    @property
    def style(self) -> LinkStyle:
        return LinkStyle(self._bookend, self._separator, self._class_on, self._class_off)

    # Output formatting

    @property
    def date_format(self) -> Optional[str]:
        return self._date_format

    @property
    def header_template(self) -> Optional[str]:
        return self._templates.header

    @property
    def row_template(self) -> Optional[str]:
        return self._templates.row

    @property
    def footer_template(self) -> Optional[str]:
        return self._templates.footer

    def set_date_format(self, date_format: Optional[str] = None) -> "Paginator":
        self._date_format = date_format or None
        return self

    def set_header_template(self, template: Optional[str]) -> "Paginator":
        self._templates.header = template
        return self

    def set_row_template(self, template: Optional[str]) -> "Paginator":
        self._templates.row = template
        return self

    def set_footer_template(self, template: Optional[str]) -> "Paginator":
        self._templates.footer = template
        return self

    # Computation

    @property
    def page_state(self) -> Optional[PageState]:
        return self._page_state

    @property
    def window(self) -> Optional[PageRangeWindow]:
        return self._window

    @property
    def number_of_pages(self) -> int:
        return compute_total_pages(effective_count(self.item_count, self.total), self.per_page)

    def _calculate(self, page: int) -> None:
        self._page_state, self._window = paginate(self.item_count, self._config, page)

    def get_links(self, page: int, context: Optional[LinkContext] = None) -> List[str]:
        """Return the link set for ``page``."""
        self._calculate(page)
        return build_links(self._window, page, HtmlLinkFactory(context, self.style), self._bookend)

    def render(
        self,
        page: int,
        return_output: bool = True,
        stream: Optional[TextIO] = None,
        context: Optional[LinkContext] = None,
    ) -> Optional[str]:
        """Render ``page``; return the text or write it to ``stream``."""
        self._calculate(page)
        output = render_page(
            self._items,
            self._config,
            Templates(self._templates.header, self._templates.row, self._templates.footer),
            page,
            context=context,
            style=self.style,
            date_format=self._date_format,
        )
        if return_output:
            return output
        (stream or sys.stdout).write(output)
        return None

    def render_request(self, request_uri: str) -> str:
        """Render the page named by the ``page`` query parameter of a request URI."""
        values = parse_qs(urlsplit(request_uri).query).get(PAGE_PARAM, [])
        page = coerce_page_number(values[0]) if values else 1
        logger.debug(f"Rendering page {page} for {request_uri}")
        return self.render(page, context=LinkContext.from_request_uri(request_uri))
