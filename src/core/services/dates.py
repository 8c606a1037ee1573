"""Lenient date parsing for form input and day-index computation."""

import re
from datetime import date, datetime

from dateutil import parser as dateparser

_ISO_DATE = re.compile(r"^\s*(\d{4})-(\d{1,2})-(\d{1,2})")

# Fills fields the text leaves out, so results never depend on today's date
_PARSE_DEFAULT = datetime(2001, 1, 1)


def parse_date(value: date | str | None) -> date | None:
    """Parse ``yyyy-mm-dd`` or ``mm/dd/yyyy`` (anything else goes through dateutil).

    Returns None for empty or unparseable input instead of raising.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None

    value = value.strip()
    try:
        # HTML date inputs
        if "-" in value:
            match = _ISO_DATE.match(value)
            if not match:
                return None
            year, month, day = (int(part) for part in match.groups())
            return date(year, month, day)

        # Typed form dates
        if "/" in value:
            parts = value.split("/")
            if len(parts) != 3:
                return None
            month, day, year = (int(part) for part in parts)
            return date(year, month, day)

        return dateparser.parse(value, default=_PARSE_DEFAULT).date()
    except (ValueError, OverflowError):
        return None


def compute_day_index(trip_start: date | str | None, item_date: date | str | None) -> int:
    """1-based day offset of ``item_date`` from ``trip_start``.

    Unparseable dates and items dated before the trip both land on day 1.
    """
    start = parse_date(trip_start)
    item = parse_date(item_date)
    if start is None or item is None:
        return 1

    offset = (item - start).days
    return 1 if offset < 0 else offset + 1
