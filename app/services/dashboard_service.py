"""Dashboard view assembly: filtered items, metrics, lanes and filter options."""
from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime
from functools import cached_property

from app.config import settings
from app.schemas.news import (
    DashboardMetrics,
    DashboardView,
    FilterCriteria,
    FilterOptions,
    NewsCard,
    NewsItem,
    SopStage,
    SourceOption,
    StageLane,
    StrategicFocus,
)
from app.services.news_card import build_card
from app.services.news_format import as_utc
from app.services.news_filter import (
    DAY_WINDOWS,
    compute_metrics,
    filter_items,
    group_by_stage,
    source_options,
)

logger = logging.getLogger(__name__)

ALL_OPTION = "All"
ALL_SOURCES = "all"
EMPTY_LANE_MESSAGE = "No records match the current filters."


class NewsDashboard:
    """Owns one loaded collection and derives views from filter criteria.

    The last derivation is memoized on the criteria and the ``now`` argument,
    so repeated renders with unchanged filters reuse it. With ``now=None`` the
    reused view keeps the ages computed at its first render.
    """

    def __init__(self, items: Iterable[NewsItem]) -> None:
        self.items: tuple[NewsItem, ...] = tuple(items)
        self._last: tuple[tuple[FilterCriteria, datetime | None], DashboardView] | None = None

    @cached_property
    def sources(self) -> list[SourceOption]:
        return source_options(self.items)

    def filtered(self, criteria: FilterCriteria, now: datetime | None = None) -> list[NewsItem]:
        return filter_items(self.items, criteria, now)

    def metrics(self, criteria: FilterCriteria, now: datetime | None = None) -> DashboardMetrics:
        return compute_metrics(self.filtered(criteria, now), now)

    def derive(self, criteria: FilterCriteria, now: datetime | None = None) -> DashboardView:
        key = (criteria, now)
        if self._last is not None and self._last[0] == key:
            return self._last[1]

        now = as_utc(now)
        matched = self.filtered(criteria, now)
        grouped = group_by_stage(matched)

        lanes = []
        for stage in SopStage:
            cards = [build_card(item) for item in grouped[stage]]
            lanes.append(
                StageLane(
                    stage=stage,
                    count=len(cards),
                    cards=cards,
                    placeholder=None if cards else EMPTY_LANE_MESSAGE,
                )
            )

        view = DashboardView(
            criteria=criteria,
            metrics=compute_metrics(matched, now),
            lanes=lanes,
            sources=self.sources,
            source_count=len(self.sources),
            coverage_window_days=criteria.day_window,
        )
        logger.debug(
            "Derived dashboard: %d of %d items match", view.metrics.total, len(self.items)
        )
        self._last = (key, view)
        return view

    def card(self, item_id: str) -> NewsCard | None:
        for item in self.items:
            if item.id == item_id:
                return build_card(item)
        return None


def filter_options(sources: list[SourceOption]) -> FilterOptions:
    """Option lists for the search, lane, focus, recency and source controls."""
    return FilterOptions(
        stages=[ALL_OPTION, *(stage.value for stage in SopStage)],
        focuses=[ALL_OPTION, *(focus.value for focus in StrategicFocus)],
        day_windows=list(DAY_WINDOWS),
        default_day_window=settings.DEFAULT_DAY_WINDOW,
        sources=[SourceOption(id=ALL_SOURCES, label="All sources"), *sources],
    )

