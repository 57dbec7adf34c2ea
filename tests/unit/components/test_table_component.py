"""
Unit tests for the paged table component.

Streamlit calls are patched so the component runs outside an app session.
"""

from unittest.mock import patch

import pytest

from paged_table.components.table import render_table
from paged_table.services.paginator import Paginator


@pytest.fixture
def mock_st():
    """Patch the streamlit module used by the table component."""
    with patch("paged_table.components.table.st") as mocked:
        yield mocked


class TestRenderTable:
    """Test rendering paginator markup into the page."""

    def test_empty_collection_shows_notice(self, mock_st):
        """Test that no rows and no external total shows a notice only."""
        paginator = Paginator([])

        assert render_table(paginator, 1, {}) == ""
        mock_st.info.assert_called_once_with("No rows available.")
        mock_st.markdown.assert_not_called()
        assert paginator.page_state is None

    def test_explicit_zero_total_renders_table(self, mock_st):
        """Test that an explicit total of zero still renders the table."""
        paginator = Paginator([], total=0)

        markup = render_table(paginator, 1, {})

        assert markup.startswith("<table")
        mock_st.info.assert_not_called()
        mock_st.markdown.assert_called_once()

    def test_renders_page_with_passthrough(self, mock_st, make_items):
        """Test markup, page state and preserved query parameters."""
        paginator = Paginator(make_items(25))

        markup = render_table(paginator, 2, {"sort": "name"})

        assert '<a href="?page=3&sort=name">3</a>' in markup
        assert paginator.page_state.start == 10
        rendered = mock_st.markdown.call_args.args[0]
        assert rendered == f'<div class="paged-table-wrapper">{markup}</div>'
