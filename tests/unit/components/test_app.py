"""
Tests for the Streamlit viewer run through the app test harness.
"""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = Path(__file__).resolve().parents[3] / "paged_table" / "app.py"


@pytest.fixture
def app():
    """Provide an app test instance for the viewer."""
    return AppTest.from_file(str(APP_PATH), default_timeout=30)


def markdown_values(app):
    return [element.value for element in app.markdown]


class TestViewer:
    """Test the viewer end to end on the bundled sample collection."""

    def test_first_page(self, app):
        """Test the default page with navbar and table."""
        app.run()

        assert not app.exception
        values = markdown_values(app)
        assert any("Page 1 of 4 | Rows 1-10 of 37" in value for value in values)
        assert any('<table class="paged-table"' in value for value in values)

    def test_navbar_precedes_table(self, app):
        """Test that the navbar is shown above the table it describes."""
        app.query_params["page"] = "4"
        app.run()

        values = markdown_values(app)
        navbar_index = next(index for index, value in enumerate(values) if "Page 4 of 4" in value)
        table_index = next(index for index, value in enumerate(values) if "paged-table-wrapper" in value)
        assert navbar_index < table_index
        assert "Rows 31-37 of 37" in values[navbar_index]

    def test_out_of_range_page_is_clamped(self, app):
        """Test that a page past the end shows the last page."""
        app.query_params["page"] = "99"
        app.query_params["sort"] = "name"
        app.run()

        assert not app.exception
        values = markdown_values(app)
        assert any("Page 4 of 4" in value for value in values)
        assert any("sort=name" in value for value in values)
