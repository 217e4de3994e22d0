from __future__ import annotations

from decimal import Decimal

from app.schemas.news import NewsCard, NewsItem, SopStage, StrategicFocus
from app.services.news_format import format_display_date

MAX_KEYWORD_CHIPS = 4

_FOCUS_BADGES = {
    StrategicFocus.REGULATORY: "badge regulatory",
    StrategicFocus.COMMERCIAL: "badge commercial",
    StrategicFocus.CLINICAL: "badge clinical",
    StrategicFocus.MANUFACTURING: "badge manufacturing",
    StrategicFocus.PARTNERSHIPS: "badge partnerships",
}
NEUTRAL_BADGE = "badge neutral"


def focus_badge(focus: StrategicFocus | str) -> str:
    """CSS badge class for a focus; Corporate and unknown values get the neutral style."""
    try:
        return _FOCUS_BADGES.get(StrategicFocus(focus), NEUTRAL_BADGE)
    except ValueError:
        return NEUTRAL_BADGE


def format_confidence(value: float) -> str:
    """Plain decimal rendering: ``0.82``, ``1``, ``0.00001``; never exponent notation."""
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def stage_badge(stage: SopStage) -> str:
    return f"badge stage stage-{stage.value.lower()}"


def build_card(item: NewsItem) -> NewsCard:
    """Render one item for display."""
    return NewsCard(
        id=item.id,
        title=item.title,
        url=item.url,
        summary=item.summary,
        stage=item.sop_stage,
        stage_badge=stage_badge(item.sop_stage),
        focus=item.focus,
        focus_badge=focus_badge(item.focus),
        display_date=format_display_date(item.published_at),
        keywords=list(item.keywords[:MAX_KEYWORD_CHIPS]),
        source_name=item.source_name,
        confidence_label=f"Confidence: {format_confidence(item.confidence)}",
        follow_up_action=item.follow_up_action,
    )
