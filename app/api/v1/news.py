"""Biosimilar news dashboard endpoints."""
from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_filter_criteria, get_news_dashboard
from app.schemas.common import ErrorResponse
from app.schemas.news import (
    DashboardMetrics,
    DashboardView,
    FilterCriteria,
    FilterOptions,
    NewsCard,
    NewsListResponse,
    SourceOption,
)
from app.services.dashboard_service import NewsDashboard, filter_options

router = APIRouter()

_UNAVAILABLE = {503: {"model": ErrorResponse, "description": "News snapshot unavailable"}}
_BAD_FILTER = {422: {"model": ErrorResponse, "description": "Invalid filter value"}}


@router.get(
    "/",
    response_model=NewsListResponse,
    summary="Filtered news",
    description="News items matching the search term, SOP lane, focus, source and recency "
    "window, newest first.",
    responses={**_UNAVAILABLE, **_BAD_FILTER},
)
async def list_news(
    criteria: FilterCriteria = Depends(get_filter_criteria),
    dashboard: NewsDashboard = Depends(get_news_dashboard),
):
    items = dashboard.filtered(criteria)
    return NewsListResponse(item_count=len(items), items=items)


@router.get(
    "/dashboard",
    response_model=DashboardView,
    summary="Dashboard view",
    description="Metrics, SOP lanes with rendered cards, and source options for the current "
    "filters. Empty lanes carry a placeholder message.",
    responses={**_UNAVAILABLE, **_BAD_FILTER},
)
async def get_dashboard(
    criteria: FilterCriteria = Depends(get_filter_criteria),
    dashboard: NewsDashboard = Depends(get_news_dashboard),
):
    return dashboard.derive(criteria)


@router.get(
    "/metrics",
    response_model=DashboardMetrics,
    summary="Dashboard metrics",
    description="Qualified update count, per-lane counts and latest update for the filters.",
    responses={**_UNAVAILABLE, **_BAD_FILTER},
)
async def get_metrics(
    criteria: FilterCriteria = Depends(get_filter_criteria),
    dashboard: NewsDashboard = Depends(get_news_dashboard),
):
    return dashboard.metrics(criteria)


@router.get(
    "/sources",
    response_model=list[SourceOption],
    summary="Sources",
    description="Distinct sources across the whole collection, in first-seen order.",
    responses=_UNAVAILABLE,
)
async def list_sources(dashboard: NewsDashboard = Depends(get_news_dashboard)):
    return dashboard.sources


@router.get(
    "/filters",
    response_model=FilterOptions,
    summary="Filter options",
    description="Option lists for the lane, focus, recency and source selectors.",
    responses=_UNAVAILABLE,
)
async def get_filter_options(dashboard: NewsDashboard = Depends(get_news_dashboard)):
    return filter_options(dashboard.sources)


@router.get(
    "/{item_id}",
    response_model=NewsCard,
    summary="News card",
    description="A single item rendered as a dashboard card.",
    responses={404: {"model": ErrorResponse, "description": "Item not found"}, **_UNAVAILABLE},
)
async def get_news_card(
    item_id: str,
    dashboard: NewsDashboard = Depends(get_news_dashboard),
):
    card = dashboard.card(item_id)
    if card is None:
        raise HTTPException(status_code=404, detail="News item not found")
    return card
