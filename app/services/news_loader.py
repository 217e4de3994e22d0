"""Load the processed news snapshot written by the upstream pipeline."""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from app.config import settings
from app.schemas.news import NewsItem
from app.services.news_format import parse_timestamp

logger = logging.getLogger(__name__)

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


class NewsDataUnavailable(RuntimeError):
    """Raised when the news snapshot cannot be read or has the wrong shape."""


def _read_snapshot(path: Path) -> list[Any]:
    if not path.exists():
        raise NewsDataUnavailable(f"News snapshot not found: {path}")
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    # ValueError covers both JSONDecodeError and UnicodeDecodeError
    except (ValueError, OSError) as e:
        raise NewsDataUnavailable(f"Failed to read news snapshot {path}: {e}") from e

    # Either a bare list or {"generated_at": ..., "item_count": ..., "items": [...]}
    if isinstance(data, dict):
        data = data.get("items")
    if not isinstance(data, list):
        raise NewsDataUnavailable(f"News snapshot has no item list: {path}")
    return data


def _to_items(rows: list[Any]) -> list[NewsItem]:
    items: list[NewsItem] = []
    seen: set[str] = set()
    for index, row in enumerate(rows):
        try:
            item = NewsItem.model_validate(row)
        except ValidationError as e:
            logger.warning("Skipping malformed news row #%d: %s", index, e.error_count())
            continue
        if item.id in seen:
            logger.debug("Dropping duplicate news item %s", item.id)
            continue
        seen.add(item.id)
        items.append(item)
    return items


def _newest_first_key(item: NewsItem) -> datetime:
    return parse_timestamp(item.published_at) or _OLDEST


async def load_news(path: Path | None = None) -> list[NewsItem]:
    """Return the snapshot's items, newest first.

    Unparsable timestamps sort last. Raises NewsDataUnavailable when the
    snapshot is missing or unreadable.
    """
    path = path or settings.NEWS_DATA_FILE
    rows = _read_snapshot(path)
    items = _to_items(rows)
    items.sort(key=_newest_first_key, reverse=True)
    logger.info("Loaded %d news items from %s", len(items), path)
    return items
