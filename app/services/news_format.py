"""Date helpers for the dashboard: display dates and relative ages.

Relative ages follow the date-fns ``formatDistance`` buckets so the wording
matches the web dashboard ("about 2 hours ago", "3 days ago", ...).
"""
from __future__ import annotations

import math
from datetime import datetime, timezone

from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta

DISPLAY_DATE_FORMAT = "%d %b %Y"

_MINUTES_IN_DAY = 1440
_MINUTES_IN_ALMOST_TWO_DAYS = 2520
_MINUTES_IN_MONTH = 43200
_MINUTES_IN_TWO_MONTHS = 86400


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO-8601 timestamp to an aware datetime; naive values are taken as UTC.

    Returns None for empty or non-ISO input. Partial values such as "March" are
    rejected rather than completed from today's date.
    """
    if not value:
        return None
    try:
        parsed = isoparse(value)
    except (ValueError, OverflowError):
        return None
    return as_utc(parsed)


def as_utc(value: datetime | None) -> datetime:
    """Attach UTC to naive datetimes; None means the current time."""
    if value is None:
        return datetime.now(timezone.utc)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def format_display_date(value: str) -> str:
    """Format as ``07 Mar 2025``, falling back to the raw string."""
    parsed = parse_timestamp(value)
    if parsed is None:
        return value
    try:
        return parsed.strftime(DISPLAY_DATE_FORMAT)
    except ValueError:
        return value


def _js_round(x: float) -> int:
    # Math.round: halves go up
    return math.floor(x + 0.5)


def _plural(count: int, one: str, other: str) -> str:
    return one if count == 1 else other.format(count=count)


def _full_months_between(later: datetime, earlier: datetime) -> int:
    delta = relativedelta(later, earlier)
    return delta.years * 12 + delta.months


def format_distance(then: datetime, now: datetime, *, add_suffix: bool = True) -> str:
    """Describe the distance between *then* and *now* in words."""
    then, now = as_utc(then), as_utc(now)
    in_future = then > now
    earlier, later = (now, then) if in_future else (then, now)

    seconds = math.trunc((later - earlier).total_seconds())
    minutes = _js_round(seconds / 60)

    if minutes == 0:
        text = "less than a minute"
    elif minutes == 1:
        text = "1 minute"
    elif minutes < 45:
        text = f"{minutes} minutes"
    elif minutes < 90:
        text = "about 1 hour"
    elif minutes < _MINUTES_IN_DAY:
        hours = _js_round(minutes / 60)
        text = _plural(hours, "about 1 hour", "about {count} hours")
    elif minutes < _MINUTES_IN_ALMOST_TWO_DAYS:
        text = "1 day"
    elif minutes < _MINUTES_IN_MONTH:
        days = _js_round(minutes / _MINUTES_IN_DAY)
        text = _plural(days, "1 day", "{count} days")
    elif minutes < _MINUTES_IN_TWO_MONTHS:
        months = _js_round(minutes / _MINUTES_IN_MONTH)
        text = _plural(months, "about 1 month", "about {count} months")
    else:
        months = _full_months_between(later, earlier)
        if months < 12:
            nearest = _js_round(minutes / _MINUTES_IN_MONTH)
            text = _plural(nearest, "1 month", "{count} months")
        else:
            remainder = months % 12
            years = months // 12
            if remainder < 3:
                text = _plural(years, "about 1 year", "about {count} years")
            elif remainder < 9:
                text = _plural(years, "over 1 year", "over {count} years")
            else:
                text = _plural(years + 1, "almost 1 year", "almost {count} years")

    if not add_suffix:
        return text
    return f"in {text}" if in_future else f"{text} ago"


def format_distance_to_now(value: str, now: datetime | None = None) -> str:
    """Relative age of a raw timestamp, or the raw string when it can't be parsed."""
    parsed = parse_timestamp(value)
    if parsed is None:
        return value
    return format_distance(parsed, as_utc(now))
