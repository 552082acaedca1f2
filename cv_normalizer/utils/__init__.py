"""Utility functions for dates, periods and text handling."""

from .dates import (
    ParsedDate,
    format_period,
    is_ongoing_marker,
    parse_date,
    period_from_dates,
    today_iso,
)
from .text import clean_text, first_text, optional_text, pick_text, string_list, truncate_text

__all__ = [
    # Dates
    "ParsedDate",
    "parse_date",
    "format_period",
    "period_from_dates",
    "is_ongoing_marker",
    "today_iso",
    # Text
    "clean_text",
    "first_text",
    "pick_text",
    "optional_text",
    "string_list",
    "truncate_text",
]
