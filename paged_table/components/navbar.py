"""Top navigation bar component."""

from __future__ import annotations

import streamlit as st

from paged_table.utils.pagination import PageState


def render_navbar(title: str, page: int, state: PageState, item_count: int) -> None:
    """Render the page header with the current position in the collection."""
    if state.number_of_pages:
        first_row = state.start + 1
        last_row = min(state.end, item_count)
        position = f"Page {page} of {state.number_of_pages} | Rows {first_row}-{last_row} of {item_count}"
    else:
        position = "No rows"
    st.markdown(
        f"""
        <div class="navbar">
            <div class="navbar-title">{title}</div>
            <div class="navbar-meta">{position}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )
