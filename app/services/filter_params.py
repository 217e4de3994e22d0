"""Parse raw control values (query params, CLI flags) into FilterCriteria fields."""
from __future__ import annotations

from app.schemas.news import SopStage, StrategicFocus
from app.services.news_filter import DAY_WINDOWS

ALL_VALUES = {"all", ""}


def parse_stage(value: str | None) -> SopStage | None:
    """``All`` (any case) or empty means no lane filter.

    Raises ValueError for unknown lanes.
    """
    if value is None or value.strip().lower() in ALL_VALUES:
        return None
    try:
        return SopStage(value.strip())
    except ValueError:
        allowed = ", ".join(s.value for s in SopStage)
        raise ValueError(f"Unknown SOP lane '{value}'. Expected All or one of: {allowed}") from None


def parse_focus(value: str | None) -> StrategicFocus | None:
    if value is None or value.strip().lower() in ALL_VALUES:
        return None
    try:
        return StrategicFocus(value.strip())
    except ValueError:
        allowed = ", ".join(f.value for f in StrategicFocus)
        raise ValueError(f"Unknown focus '{value}'. Expected All or one of: {allowed}") from None


def parse_day_window(value: int) -> int:
    if value not in DAY_WINDOWS:
        allowed = ", ".join(str(d) for d in DAY_WINDOWS)
        raise ValueError(f"Unsupported recency window {value}. Expected one of: {allowed}")
    return value


def parse_source_ids(source_id: str | None, source_ids: str | None) -> frozenset[str]:
    """Merge a single source ID and a comma-separated list into one set.

    ``all`` and blank entries are ignored; an empty result means all sources.
    """
    result: set[str] = set()

    if source_id and source_id.strip().lower() not in ALL_VALUES:
        result.add(source_id.strip())
    if source_ids:
        for s in source_ids.split(","):
            if s.strip() and s.strip().lower() not in ALL_VALUES:
                result.add(s.strip())

    return frozenset(result)
