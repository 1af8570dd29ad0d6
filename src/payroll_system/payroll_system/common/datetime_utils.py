from __future__ import annotations

import re
from datetime import date, datetime

_LOOSE_ISO = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD (or YYYY-M-D) string into date."""
    m = _LOOSE_ISO.match((value or "").strip())
    if not m:
        raise ValueError(f"Invalid date {value!r}, expected YYYY-MM-DD")
    year, month, day = (int(g) for g in m.groups())
    return date(year, month, day)


def full_years_between(start: date, end: date) -> int:
    """Whole years elapsed from start to end (negative if end is earlier)."""
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years


def today() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()
