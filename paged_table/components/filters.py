"""Sidebar settings panel component."""

from __future__ import annotations

from typing import Dict

import streamlit as st

from paged_table.config import DATE_FORMAT_OPTIONS, DEFAULT_SEPARATOR, PER_PAGE_OPTIONS, RANGE_OPTIONS
from paged_table.services.link_service import Bookend


def render_settings() -> Dict[str, object]:
    """Render pagination settings and return the selected values."""
    st.sidebar.markdown("## Pagination")

    per_page = st.sidebar.selectbox("Rows per page", PER_PAGE_OPTIONS, index=1, key="settings_per_page")
    page_range = st.sidebar.selectbox("Page links shown", RANGE_OPTIONS, index=1, key="settings_range")
    bookend = st.sidebar.selectbox(
        "Prev/next style",
        list(Bookend),
        format_func=lambda option: option.name.replace("_", " ").title(),
        key="settings_bookend",
    )
    separator = st.sidebar.text_input("Link separator", value=DEFAULT_SEPARATOR, key="settings_separator")
    date_format = st.sidebar.selectbox(
        "Date format",
        DATE_FORMAT_OPTIONS,
        format_func=lambda option: option or "Unchanged",
        key="settings_date_format",
    )

    return {
        "per_page": per_page,
        "page_range": page_range,
        "bookend": bookend,
        "separator": separator,
        "date_format": date_format,
    }
