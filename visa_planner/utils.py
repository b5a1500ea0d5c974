"""Utility helpers."""

from datetime import date, datetime, timedelta
from typing import List, Optional

FRIENDLY_DATE_FMT = "%A %b %d %Y"


def parse_iso_date(value: str) -> Optional[date]:
    if not value:
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return None


def make_date_list(start_date_str: str, days: int) -> List[str]:
    """Return ``days`` consecutive ISO dates starting at ``start_date_str``."""

    start = datetime.strptime(start_date_str, "%Y-%m-%d").date()
    return [(start + timedelta(days=offset)).isoformat() for offset in range(days)]


def format_friendly_date(value: str) -> str:
    """Return a user-friendly date like 'Monday Nov 24 2025'."""

    parsed = parse_iso_date(value)
    if not parsed:
        return value
    return parsed.strftime(FRIENDLY_DATE_FMT)
