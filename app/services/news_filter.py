"""Filtering and aggregation over a loaded news collection.

All functions are pure: they never mutate items and never re-sort. The input
collection is expected newest-first (guaranteed by the loader), so the head of
any filtered subset is its newest item.
"""
from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from datetime import datetime

from app.schemas.news import (
    DashboardMetrics,
    FilterCriteria,
    NewsItem,
    SopStage,
    SourceOption,
)
from app.services.news_format import as_utc, format_distance_to_now, parse_timestamp

SECONDS_PER_DAY = 86400

DAY_WINDOWS: tuple[int, ...] = (7, 14, 30, 60, 90)

NOT_AVAILABLE = "n/a"


def age_in_days(item: NewsItem, now: datetime) -> float:
    """Elapsed days since publication; ``math.inf`` when the timestamp is unparsable."""
    published = parse_timestamp(item.published_at)
    if published is None:
        return math.inf
    return (now - published).total_seconds() / SECONDS_PER_DAY


def search_haystack(item: NewsItem) -> str:
    return f"{item.title} {item.summary} {' '.join(item.keywords)}".lower()


def matches_criteria(item: NewsItem, criteria: FilterCriteria, now: datetime) -> bool:
    """True when *item* passes every active filter in *criteria*."""
    if criteria.day_window and age_in_days(item, now) > criteria.day_window:
        return False

    if criteria.stage is not None and item.sop_stage != criteria.stage:
        return False

    if criteria.focus is not None and item.focus != criteria.focus:
        return False

    if criteria.source_ids and item.source_id not in criteria.source_ids:
        return False

    term = criteria.search_term.strip().lower()
    if term:
        return term in search_haystack(item)

    return True


def filter_items(
    items: Iterable[NewsItem],
    criteria: FilterCriteria,
    now: datetime | None = None,
) -> list[NewsItem]:
    """Return the items matching *criteria*, preserving their relative order."""
    now = as_utc(now)
    return [item for item in items if matches_criteria(item, criteria, now)]


def empty_stage_counts() -> dict[SopStage, int]:
    return {stage: 0 for stage in SopStage}


def compute_metrics(items: Sequence[NewsItem], now: datetime | None = None) -> DashboardMetrics:
    """Totals per lane plus the relative age of the head item."""
    per_stage = empty_stage_counts()
    for item in items:
        per_stage[item.sop_stage] += 1

    if items and items[0].published_at:
        newest = format_distance_to_now(items[0].published_at, now)
    else:
        newest = NOT_AVAILABLE

    return DashboardMetrics(total=len(items), per_stage=per_stage, newest=newest)


def group_by_stage(items: Iterable[NewsItem]) -> dict[SopStage, list[NewsItem]]:
    """Stable partition into the three SOP lanes; every lane is present."""
    groups: dict[SopStage, list[NewsItem]] = {stage: [] for stage in SopStage}
    for item in items:
        groups[item.sop_stage].append(item)
    return groups


def source_options(items: Iterable[NewsItem]) -> list[SourceOption]:
    """Distinct sources by ``source_id`` in first-occurrence order."""
    seen: set[str] = set()
    options: list[SourceOption] = []
    for item in items:
        if item.source_id in seen:
            continue
        seen.add(item.source_id)
        options.append(SourceOption(id=item.source_id, label=item.source_name))
    return options
