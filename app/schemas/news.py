"""Pydantic schemas for the biosimilar news dashboard."""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SopStage(str, Enum):
    MONITOR = "Monitor"
    ASSESS = "Assess"
    FOLLOW_UP = "Follow-up"


class StrategicFocus(str, Enum):
    REGULATORY = "Regulatory"
    COMMERCIAL = "Commercial"
    CLINICAL = "Clinical"
    MANUFACTURING = "Manufacturing"
    PARTNERSHIPS = "Partnerships"
    CORPORATE = "Corporate"


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class NewsItem(_CamelModel):
    """A single qualified news item as delivered by the news pipeline."""

    id: str = Field(description="Stable item ID", examples=["amgen-2025-03-07-wezlana"])
    title: str = Field(
        description="Headline",
        examples=["FDA approves interchangeable ustekinumab biosimilar"],
    )
    summary: str = Field(default="", description="Short summary of the release")
    url: str = Field(description="Link to the original statement")
    published_at: str = Field(
        description="Publication timestamp (ISO 8601), kept as delivered",
        examples=["2025-03-07T14:30:00Z"],
    )
    sop_stage: SopStage = Field(description="SOP triage lane")
    focus: StrategicFocus = Field(description="Strategic focus")
    keywords: list[str] = Field(
        default=[], description="Matched keywords", examples=[["Stelara", "interchangeable"]]
    )
    source_id: str = Field(description="Source ID", examples=["amgen_newsroom"])
    source_name: str = Field(description="Source display name", examples=["Amgen Newsroom"])
    confidence: float = Field(default=0.0, description="Pipeline confidence score", examples=[0.82])
    follow_up_action: str = Field(
        default="", description="Suggested follow-up for the SOP owner"
    )


class FilterCriteria(_CamelModel):
    """Dashboard filter state. ``None`` stage/focus and empty source_ids mean "All"."""

    search_term: str = ""
    stage: SopStage | None = None
    focus: StrategicFocus | None = None
    source_ids: frozenset[str] = frozenset()
    day_window: int = Field(default=30, ge=0)


class SourceOption(_CamelModel):
    id: str = Field(description="Source ID", examples=["amgen_newsroom"])
    label: str = Field(description="Source display name", examples=["Amgen Newsroom"])


class DashboardMetrics(_CamelModel):
    """Summary metrics over the filtered items."""

    total: int = Field(description="Number of qualified updates", examples=[12])
    per_stage: dict[SopStage, int] = Field(
        description="Item count per SOP lane (all lanes present)",
        examples=[{"Monitor": 7, "Assess": 3, "Follow-up": 2}],
    )
    newest: str = Field(
        description="Relative age of the newest item, 'n/a' when empty",
        examples=["3 days ago"],
    )


class NewsCard(_CamelModel):
    """Display-ready rendering of one news item."""

    id: str
    title: str
    url: str
    summary: str
    stage: SopStage
    stage_badge: str = Field(examples=["badge stage stage-follow-up"])
    focus: StrategicFocus
    focus_badge: str = Field(examples=["badge regulatory"])
    display_date: str = Field(examples=["07 Mar 2025"])
    keywords: list[str] = Field(description="At most four keyword chips")
    source_name: str
    confidence_label: str = Field(examples=["Confidence: 0.82"])
    follow_up_action: str


class StageLane(_CamelModel):
    stage: SopStage
    count: int
    cards: list[NewsCard]
    placeholder: str | None = Field(
        default=None, description="Shown instead of cards when the lane is empty"
    )


class DashboardView(_CamelModel):
    """Everything the dashboard page renders for one filter state."""

    criteria: FilterCriteria
    metrics: DashboardMetrics
    lanes: list[StageLane]
    sources: list[SourceOption]
    source_count: int
    coverage_window_days: int


class FilterOptions(_CamelModel):
    """Option lists for the five dashboard controls."""

    stages: list[str] = Field(examples=[["All", "Monitor", "Assess", "Follow-up"]])
    focuses: list[str]
    day_windows: list[int] = Field(examples=[[7, 14, 30, 60, 90]])
    default_day_window: int
    sources: list[SourceOption]


class NewsListResponse(_CamelModel):
    item_count: int = Field(description="Number of items after filtering", examples=[12])
    items: list[NewsItem]
