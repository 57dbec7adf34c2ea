"""Application configuration constants."""

import os
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent
DATA_DIR = ROOT_DIR / "data"
ASSETS_DIR = ROOT_DIR / "assets"

SAMPLE_ITEMS_FILE = DATA_DIR / "sample_items.csv"
ITEMS_FILE = Path(os.getenv("PAGED_TABLE_DATA_FILE", str(SAMPLE_ITEMS_FILE)))

LOG_LEVEL = os.getenv("PAGED_TABLE_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

DEFAULT_PER_PAGE = 10
DEFAULT_RANGE = 10
DEFAULT_SEPARATOR = " | "

PAGE_PARAM = "page"
PAGE_LINKS_PLACEHOLDER = "[{page_links}]"
FIELD_PLACEHOLDER = "[{{{field}}}]"

TABLE_OPEN_TAG = '<table class="paged-table" cellpadding="0" cellspacing="0" border="0">'
TABLE_CLOSE_TAG = "</table>"

PER_PAGE_OPTIONS = [5, 10, 25, 50]
RANGE_OPTIONS = [3, 5, 10]
DATE_FORMAT_OPTIONS = ["", "%Y-%m-%d", "%m/%d/%Y", "%d.%m.%Y", "%b %d, %Y"]

# Strings handed to the generic date parser without a field-name hint must match one of these.
DATE_LIKE_PATTERNS = [
    r"\d{4}[-/.]\d{1,2}[-/.]\d{1,2}",
    r"\d{1,2}[-/.]\d{1,2}[-/.]\d{2,4}",
    r"[A-Za-z]{3,}\.?\s+\d{1,2}(?:st|nd|rd|th)?,?\s+\d{4}",
    r"\d{1,2}\s+[A-Za-z]{3,}\.?,?\s+\d{4}",
]
DATE_TIME_SUFFIX = r"(?:[ T]\d{1,2}:\d{2}(?::\d{2}(?:\.\d+)?)?(?:Z|[+-]\d{2}:?\d{2})?)?"
