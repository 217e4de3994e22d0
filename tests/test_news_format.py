from datetime import datetime, timedelta, timezone

import pytest

from app.services.news_format import (
    format_display_date,
    format_distance,
    format_distance_to_now,
    parse_timestamp,
)

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def test_parse_timestamp_assumes_utc_for_naive_values():
    """Naive ISO strings are taken as UTC"""
    parsed = parse_timestamp("2025-03-07T14:30:00")

    assert parsed == datetime(2025, 3, 7, 14, 30, tzinfo=timezone.utc)


def test_parse_timestamp_keeps_offset():
    """Offsets are preserved and comparable"""
    parsed = parse_timestamp("2025-03-07T14:30:00+02:00")

    assert parsed == datetime(2025, 3, 7, 12, 30, tzinfo=timezone.utc)


@pytest.mark.parametrize("value", [None, "", "unknown", "Monday", "March", "5"])
def test_parse_timestamp_returns_none_for_bad_input(value):
    """Empty and unparsable values give None instead of raising"""
    assert parse_timestamp(value) is None


def test_format_display_date():
    """Dates render as 'dd MMM yyyy'"""
    assert format_display_date("2025-03-07T14:30:00Z") == "07 Mar 2025"


def test_format_display_date_falls_back_to_raw_string():
    """A malformed date is displayed unchanged"""
    assert format_display_date("unknown") == "unknown"


@pytest.mark.parametrize(
    "delta, expected",
    [
        (timedelta(seconds=20), "less than a minute"),
        (timedelta(seconds=75), "1 minute"),
        (timedelta(minutes=10), "10 minutes"),
        (timedelta(minutes=50), "about 1 hour"),
        (timedelta(hours=5), "about 5 hours"),
        (timedelta(hours=30), "1 day"),
        (timedelta(days=3), "3 days"),
        (timedelta(days=40), "about 1 month"),
        (timedelta(days=70), "2 months"),
    ],
)
def test_format_distance_buckets(delta, expected):
    """Wording follows the date-fns distance buckets"""
    assert format_distance(NOW - delta, NOW, add_suffix=False) == expected


def test_format_distance_years():
    """Year buckets use about / over / almost"""
    assert format_distance(datetime(2025, 9, 19, tzinfo=timezone.utc), NOW, add_suffix=False) == "about 1 year"
    assert format_distance(datetime(2025, 4, 1, tzinfo=timezone.utc), NOW, add_suffix=False) == "over 1 year"
    assert format_distance(datetime(2024, 12, 1, tzinfo=timezone.utc), NOW, add_suffix=False) == "almost 2 years"


def test_format_distance_suffixes():
    """Past distances end with 'ago', future ones start with 'in'"""
    assert format_distance(NOW - timedelta(days=2), NOW) == "2 days ago"
    assert format_distance(NOW + timedelta(days=2), NOW) == "in 2 days"


def test_format_distance_to_now_falls_back_to_raw_string():
    """Unparsable timestamps are returned as-is"""
    assert format_distance_to_now("unknown", NOW) == "unknown"


def test_format_distance_to_now_with_iso_string():
    """ISO strings are parsed before measuring"""
    assert format_distance_to_now("2026-10-19T07:00:00Z", NOW) == "about 5 hours ago"


@pytest.mark.parametrize("value", ["March", "Monday", "5"])
def test_partial_dates_are_not_completed_from_today(value):
    """Partial dates display verbatim and have no relative age"""
    assert format_display_date(value) == value
    assert format_distance_to_now(value, NOW) == value


def test_format_distance_accepts_naive_now():
    """A naive reference time is taken as UTC"""
    naive_now = datetime(2026, 10, 19, 12, 0)

    assert format_distance_to_now("2026-10-17T12:00:00Z", naive_now) == "2 days ago"
