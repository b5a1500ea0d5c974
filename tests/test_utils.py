"""Unit tests for visa_planner.utils."""

from datetime import date

from visa_planner.utils import format_friendly_date, make_date_list, parse_iso_date


def test_make_date_list_counts_from_start():
    dates = make_date_list("2025-01-30", 3)
    assert dates == ["2025-01-30", "2025-01-31", "2025-02-01"]


def test_parse_iso_date_rejects_garbage():
    assert parse_iso_date("2025-06-01") == date(2025, 6, 1)
    assert parse_iso_date("06/01/2025") is None
    assert parse_iso_date("") is None


def test_format_friendly_date_passes_through_unparseable():
    assert format_friendly_date("2025-06-01") == "Sunday Jun 01 2025"
    assert format_friendly_date("soon") == "soon"
