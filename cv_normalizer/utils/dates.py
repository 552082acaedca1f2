"""Date and period utilities for CV entries.

This module provides:
- ParsedDate: an ISO date string plus a flag telling whether it was defaulted
- parse_date: best-effort parsing of free-text dates into ISO form
- format_period: "MM/YYYY - MM/YYYY" periods from month/year pairs
- period_from_dates: periods from free-text start/end dates

Nothing here raises on bad input: CV data is partial by nature and
normalization must never block a save.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Optional

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
YEAR_ONLY_PATTERN = re.compile(r"^\d{4}$")
ONGOING_MARKERS = ("present", "current", "now", "ongoing", "today")
PRESENT_LABEL = "Present"

# Tried in order after ISO parsing fails. Day-first wins over month-first.
DATE_FORMATS = (
    "%Y-%m",
    "%Y/%m/%d",
    "%m/%Y",
    "%m-%Y",
    "%d/%m/%Y",
    "%m/%d/%Y",
    "%d.%m.%Y",
    "%B %Y",
    "%b %Y",
    "%b. %Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %B %Y",
    "%d %b %Y",
    "%Y",
)


@dataclass(frozen=True)
class ParsedDate:
    """Result of parse_date.

    Attributes:
        value: ISO-8601 calendar date (YYYY-MM-DD)
        defaulted: True when the input was missing or unparseable and
            today's date was substituted
    """

    value: str
    defaulted: bool = False


def today_iso(today: Optional[date] = None) -> str:
    """Return today's UTC date (or the supplied one) as YYYY-MM-DD."""
    if today is None:
        today = datetime.now(timezone.utc).date()
    return today.isoformat()


def parse_date(value: Any, today: Optional[date] = None) -> ParsedDate:
    """Parse a free-text date into an ISO date string.

    Already-ISO strings pass through untouched. Other strings go through
    datetime.fromisoformat and then a fixed list of strptime formats.

    Args:
        value: Date text (or a bare year as int) from a CV source
        today: Date to substitute on failure (defaults to current UTC date)

    Returns:
        ParsedDate; ``defaulted`` is True when today's date was substituted

    Example:
        >>> parse_date("March 2021").value
        '2021-03-01'
        >>> parse_date(None, today=date(2025, 1, 2))
        ParsedDate(value='2025-01-02', defaulted=True)
    """
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    if not isinstance(value, str) or not value.strip():
        return ParsedDate(today_iso(today), defaulted=True)

    cleaned = value.strip()
    if ISO_DATE_PATTERN.match(cleaned):
        return ParsedDate(cleaned)

    parsed = _parse_datetime(cleaned)
    if parsed is None:
        return ParsedDate(today_iso(today), defaulted=True)
    return ParsedDate(parsed.date().isoformat())


def _parse_datetime(text: str) -> Optional[datetime]:
    iso_candidate = text[:-1] + "+00:00" if text.endswith("Z") else text
    try:
        return datetime.fromisoformat(iso_candidate)
    except ValueError:
        pass

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def is_ongoing_marker(value: Any) -> bool:
    """Whether an end-date value means the entry is still running."""
    if not isinstance(value, str):
        return False
    words = re.findall(r"[a-z]+", value.lower())
    return any(word in ONGOING_MARKERS for word in words)


def _as_text(value: Any) -> str:
    if value is None or isinstance(value, bool):
        return ""
    return str(value).strip()


def _month_year(month: Any, year: Any) -> str:
    month_text = _as_text(month)
    year_text = _as_text(year)
    if not month_text or not year_text:
        return ""
    return f"{month_text.zfill(2)}/{year_text}"


def _join_period(start: str, end: str, ongoing: bool) -> str:
    if ongoing:
        return f"{start} - {PRESENT_LABEL}" if start else ""
    if start and end:
        return f"{start} - {end}"
    return start


def format_period(
    start_month: Any = None,
    start_year: Any = None,
    end_month: Any = None,
    end_year: Any = None,
    ongoing: bool = False,
) -> str:
    """Format a display period from month/year parts.

    Months are zero-padded to two digits and are not range checked, so a
    month of "13" passes through unchanged. A start needs both month and
    year; an ongoing entry without a start yields "".

    Example:
        >>> format_period("3", "2020", "11", "2022")
        '03/2020 - 11/2022'
        >>> format_period("03", "2020", ongoing=True)
        '03/2020 - Present'
    """
    start = _month_year(start_month, start_year)
    end = _month_year(end_month, end_year)
    return _join_period(start, end, bool(ongoing))


def _period_token(value: Any) -> str:
    text = _as_text(value)
    if not text:
        return ""
    if YEAR_ONLY_PATTERN.match(text):
        return text

    parsed = parse_date(text)
    if parsed.defaulted:
        return ""
    year, month = parsed.value[:4], parsed.value[5:7]
    return f"{month}/{year}"


def period_from_dates(start: Any = None, end: Any = None, ongoing: bool = False) -> str:
    """Build a display period from free-text start/end dates.

    Bare years stay bare ("2019 - 2021"). An end date such as "Present" or
    "Current" marks the entry as ongoing. Unparseable dates count as missing
    rather than being replaced by today's date.

    Example:
        >>> period_from_dates("2020-03-01", "Present")
        '03/2020 - Present'
    """
    if is_ongoing_marker(end):
        ongoing = True
        end = None
    return _join_period(_period_token(start), _period_token(end), bool(ongoing))
