"""Helper utilities for value normalization and date handling."""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional

import pandas as pd
from dateutil import parser as date_parser

from paged_table.config import DATE_LIKE_PATTERNS, DATE_TIME_SUFFIX

DATE_LIKE_PATTERN = re.compile("(?:" + "|".join(DATE_LIKE_PATTERNS) + ")" + DATE_TIME_SUFFIX)

# Two distinct fallbacks; a parse that depends on them was missing a date part.
PARSE_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def normalize_text(value: object) -> str:
    """Normalize a value into a string, or empty string for nulls."""
    if value is None:
        return ""
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        pass
    if isinstance(value, pd.Timestamp):
        return value.isoformat()
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def _parse_complete(raw_value: str) -> Optional[datetime]:
    """Parse with the generic parser, rejecting values missing a date part."""
    try:
        first = date_parser.parse(raw_value, default=PARSE_DEFAULTS[0])
        second = date_parser.parse(raw_value, default=PARSE_DEFAULTS[1])
    except (ValueError, OverflowError):
        return None
    # Any year, month or day filled in from the default differs between the two passes.
    if first.date() != second.date():
        return None
    return first


def parse_datetime(value: object, lenient: bool = False) -> Optional[datetime]:
    """Parse date-like values into datetime objects.

    Plain numbers never count as dates. Strings must look like a date
    (``2024-01-05``, ``01/05/2024``, ``Jan 5 2024``) unless ``lenient`` is
    set, in which case anything the generic parser reads as a full
    year-month-day is used. Text naming only part of a date (``5``,
    ``Monday``) is never completed from the current day.
    """
    if value is None or value is pd.NaT:
        return None
    if isinstance(value, pd.Timestamp):
        if pd.isna(value):
            return None
        return value.to_pydatetime()
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        return None

    raw_value = value.strip()
    if not raw_value:
        return None

    if not lenient and not DATE_LIKE_PATTERN.fullmatch(raw_value):
        return None

    for date_format in ("%Y-%m-%d", "%Y/%m/%d", "%m/%d/%Y", "%m-%d-%Y"):
        try:
            return datetime.strptime(raw_value, date_format)
        except ValueError:
            pass

    return _parse_complete(raw_value)


def format_date_value(value: object, date_format: str, lenient: bool = False) -> object:
    """Reformat a date-like value, leaving anything unparseable untouched."""
    parsed = parse_datetime(value, lenient=lenient)
    if parsed is None:
        return value
    return parsed.strftime(date_format)
