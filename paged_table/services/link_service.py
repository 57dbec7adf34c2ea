"""Page-link construction for a computed page window."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, List, Mapping, Optional, Protocol, Tuple
from urllib.parse import parse_qsl, urlencode, urlsplit

from paged_table.config import DEFAULT_SEPARATOR, PAGE_PARAM
from paged_table.utils.pagination import PageRangeWindow

logger = logging.getLogger(__name__)


class Bookend(IntEnum):
    """Prev/next token pairs shown at the edges of a link window."""

    SINGLE_ARROWS = 0
    DOUBLE_ARROWS = 1
    PREV_NEXT = 2
    ELLIPSIS = 3

    @property
    def labels(self) -> Tuple[str, str]:
        return BOOKEND_LABELS[self]


BOOKEND_LABELS: Dict[Bookend, Tuple[str, str]] = {
    Bookend.SINGLE_ARROWS: ("&lt;", "&gt;"),
    Bookend.DOUBLE_ARROWS: ("&lt;&lt;", "&gt;&gt;"),
    Bookend.PREV_NEXT: ("Prev", "Next"),
    Bookend.ELLIPSIS: ("...", "..."),
}


@dataclass(frozen=True)
class LinkContext:
    """Base path and query parameters carried into generated link targets."""

    base_path: str = ""
    query_params: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_request_uri(cls, request_uri: Optional[str]) -> "LinkContext":
        """Split a request URI into its path and non-page query parameters."""
        if not request_uri:
            return cls()
        parts = urlsplit(request_uri)
        params = {key: value for key, value in parse_qsl(parts.query, keep_blank_values=True) if key != PAGE_PARAM}
        return cls(base_path=parts.path, query_params=params)

    def href(self, page: int) -> str:
        """Build a link target for ``page`` with the preserved parameters."""
        passthrough = {key: value for key, value in self.query_params.items() if key != PAGE_PARAM}
        query = f"&{urlencode(passthrough)}" if passthrough else ""
        return f"{self.base_path}?{PAGE_PARAM}={page}{query}"


@dataclass(frozen=True)
class LinkStyle:
    """Presentation options for rendered page links."""

    bookend: Bookend = Bookend.SINGLE_ARROWS
    separator: str = DEFAULT_SEPARATOR
    class_on: Optional[str] = None
    class_off: Optional[str] = None


class LinkFactory(Protocol):
    def current(self, page: int) -> str: ...

    def link(self, page: int, label: str) -> str: ...


class HtmlLinkFactory:
    """Render link tokens as ``<span>``/``<a>`` markup."""

    def __init__(self, context: Optional[LinkContext] = None, style: Optional[LinkStyle] = None) -> None:
        self.context = context or LinkContext()
        self.style = style or LinkStyle()

    def current(self, page: int) -> str:
        class_attr = f' class="{self.style.class_off}"' if self.style.class_off is not None else ""
        return f"<span{class_attr}>{page}</span>"

    def link(self, page: int, label: str) -> str:
        class_attr = f' class="{self.style.class_on}"' if self.style.class_on is not None else ""
        return f'<a{class_attr} href="{self.context.href(page)}">{label}</a>'


def build_links(
    window: PageRangeWindow,
    requested_page: int,
    factory: LinkFactory,
    bookend: Bookend = Bookend.SINGLE_ARROWS,
) -> List[str]:
    """Build the ordered link set for a page window, bookends included."""
    prev_label, next_label = Bookend(bookend).labels
    links: List[str] = []

    for page in window.pages:
        if page == window.start and window.show_prev:
            links.append(factory.link(requested_page - 1, prev_label))
        if page == requested_page:
            links.append(factory.current(page))
        else:
            links.append(factory.link(page, str(page)))
        if page == window.end and window.show_next:
            links.append(factory.link(requested_page + 1, next_label))

    logger.debug(f"Built {len(links)} links for page {requested_page} in window {window.start}-{window.end}")
    return links


def join_links(links: List[str], separator: str = DEFAULT_SEPARATOR) -> str:
    """Join a link set, or return an empty string when paging is pointless."""
    if len(links) > 1:
        return separator.join(links)
    return ""
