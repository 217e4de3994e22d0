import logging

from fastapi import HTTPException, Query

from app.config import settings
from app.schemas.news import FilterCriteria
from app.services.dashboard_service import NewsDashboard
from app.services.filter_params import (
    parse_day_window,
    parse_focus,
    parse_source_ids,
    parse_stage,
)
from app.services.news_loader import NewsDataUnavailable, load_news

logger = logging.getLogger(__name__)


async def get_news_dashboard() -> NewsDashboard:
    try:
        items = await load_news()
    except NewsDataUnavailable as e:
        logger.error("News data unavailable: %s", e)
        raise HTTPException(status_code=503, detail="News data unavailable") from e
    return NewsDashboard(items)


def get_filter_criteria(
    q: str = Query("", description="Search title, summary and keywords (case-insensitive)"),
    stage: str = Query("All", description="SOP lane: All / Monitor / Assess / Follow-up"),
    focus: str = Query(
        "All",
        description="Focus: All / Regulatory / Commercial / Clinical / Manufacturing / "
        "Partnerships / Corporate",
    ),
    days: int | None = Query(None, description="Recency window in days: 7 / 14 / 30 / 60 / 90"),
    source_id: str | None = Query(None, description="Single source ID, 'all' for every source"),
    source_ids: str | None = Query(None, description="Comma-separated source IDs"),
) -> FilterCriteria:
    try:
        return FilterCriteria(
            search_term=q,
            stage=parse_stage(stage),
            focus=parse_focus(focus),
            source_ids=parse_source_ids(source_id, source_ids),
            day_window=parse_day_window(days if days is not None else settings.DEFAULT_DAY_WINDOW),
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
