"""Print the biosimilar news dashboard for one set of filters.

Usage:
    python scripts/news_digest.py                          # Last 30 days, all lanes
    python scripts/news_digest.py --days 7 --stage Assess  # One lane, last week
    python scripts/news_digest.py --search keytruda        # Free-text search
    python scripts/news_digest.py --source amgen_newsroom  # One source
    python scripts/news_digest.py --file path/to/news.json # Alternate snapshot
"""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.config import settings  # noqa: E402
from app.schemas.news import DashboardView, FilterCriteria  # noqa: E402
from app.services.dashboard_service import NewsDashboard  # noqa: E402
from app.services.filter_params import (  # noqa: E402
    parse_focus,
    parse_source_ids,
    parse_stage,
)
from app.services.news_filter import DAY_WINDOWS  # noqa: E402
from app.services.news_loader import NewsDataUnavailable, load_news  # noqa: E402

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("news_digest")


def render(view: DashboardView) -> str:
    lines = [
        f"Sources: {view.source_count} | Coverage window: {view.coverage_window_days} days",
        f"Qualified updates: {view.metrics.total} | Latest update: {view.metrics.newest}",
        "",
    ]
    for lane in view.lanes:
        lines.append(f"== {lane.stage.value} ({lane.count} items)")
        if lane.placeholder:
            lines.append(f"   {lane.placeholder}")
        for card in lane.cards:
            lines.append(f" - [{card.display_date}] {card.title} ({card.focus.value})")
            lines.append(f"   {card.source_name} | {card.confidence_label}")
            if card.follow_up_action:
                lines.append(f"   -> {card.follow_up_action}")
        lines.append("")
    return "\n".join(lines)


async def main() -> int:
    parser = argparse.ArgumentParser(description="Print the biosimilar news dashboard")
    parser.add_argument("--search", default="", help="Search title, summary and keywords")
    parser.add_argument("--stage", default="All", help="SOP lane (All/Monitor/Assess/Follow-up)")
    parser.add_argument("--focus", default="All", help="Strategic focus or All")
    parser.add_argument(
        "--days",
        type=int,
        choices=DAY_WINDOWS,
        default=settings.DEFAULT_DAY_WINDOW,
        help="Recency window in days",
    )
    parser.add_argument("--source", default=None, help="Source ID, or 'all'")
    parser.add_argument("--file", type=Path, default=None, help="News snapshot JSON")
    args = parser.parse_args()

    try:
        criteria = FilterCriteria(
            search_term=args.search,
            stage=parse_stage(args.stage),
            focus=parse_focus(args.focus),
            source_ids=parse_source_ids(args.source, None),
            day_window=args.days,
        )
    except ValueError as e:
        parser.error(str(e))

    try:
        items = await load_news(args.file)
    except NewsDataUnavailable as e:
        logger.error("%s", e)
        return 1

    print(render(NewsDashboard(items).derive(criteria)))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
