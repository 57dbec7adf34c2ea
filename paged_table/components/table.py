"""Paged table component rendering paginator markup."""

from __future__ import annotations

from typing import Dict

import streamlit as st

from paged_table.services.link_service import LinkContext
from paged_table.services.paginator import Paginator


def render_table(paginator: Paginator, page: int, query_params: Dict[str, str]) -> str:
    """Render one page of the paginator as HTML and return the markup."""
    if not paginator.item_count and paginator.total is None:
        st.info("No rows available.")
        return ""

    context = LinkContext(query_params=query_params)
    markup = paginator.render(page, context=context)
    st.markdown(f'<div class="paged-table-wrapper">{markup}</div>', unsafe_allow_html=True)
    return markup
