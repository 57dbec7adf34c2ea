"""Streamlit app entrypoint for the paged table viewer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict

import streamlit as st

from paged_table.components.filters import render_settings
from paged_table.components.navbar import render_navbar
from paged_table.components.table import render_table
from paged_table.config import ASSETS_DIR, ITEMS_FILE, LOG_FORMAT, LOG_LEVEL, PAGE_PARAM
from paged_table.services import data_loader
from paged_table.services.paginator import Paginator
from paged_table.utils.pagination import clamp_page_number, coerce_page_number

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

st.set_page_config(page_title="Paged Table", layout="wide")


def load_css() -> None:
    """Load app-level CSS styling from the assets directory."""
    css_path = ASSETS_DIR / "styles.css"
    if css_path.exists():
        with css_path.open("r", encoding="utf-8") as css_file:
            st.markdown(f"<style>{css_file.read()}</style>", unsafe_allow_html=True)


@st.cache_data(show_spinner=False)
def get_items(items_path: str, file_mtime: float):
    """Load row records with cache invalidation by mtime."""
    del file_mtime
    return data_loader.load_items(Path(items_path))


def read_query_params() -> Dict[str, str]:
    """Return the current query parameters as plain strings."""
    return {key: str(value) for key, value in st.query_params.to_dict().items()}


def main() -> None:
    """Render and run the paged table viewer."""
    load_css()

    try:
        items = get_items(str(ITEMS_FILE), ITEMS_FILE.stat().st_mtime if ITEMS_FILE.exists() else 0.0)
    except FileNotFoundError as exc:
        st.error(str(exc))
        st.stop()

    settings = render_settings()
    paginator = (
        Paginator(items, settings["per_page"], settings["page_range"])
        .set_bookend(settings["bookend"])
        .set_separator(settings["separator"])
        .set_date_format(settings["date_format"])
        .set_class_off("off")
    )

    query_params = read_query_params()
    requested_page = coerce_page_number(query_params.get(PAGE_PARAM, 1))
    page = clamp_page_number(requested_page, paginator.number_of_pages)
    if page != requested_page:
        logger.warning(f"Requested page {requested_page} out of range, showing page {page}")

    navbar_slot = st.container()
    passthrough = {key: value for key, value in query_params.items() if key != PAGE_PARAM}
    markup = render_table(paginator, page, passthrough)
    if paginator.page_state is not None:
        with navbar_slot:
            render_navbar(ITEMS_FILE.stem.replace("_", " ").title(), page, paginator.page_state, paginator.item_count)

    with st.expander("Rendered markup"):
        st.code(markup, language="html")


if __name__ == "__main__":
    main()
