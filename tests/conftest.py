from datetime import datetime, timedelta, timezone

import pytest

from app.schemas.news import NewsItem

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def days_ago(days: float, now: datetime = NOW) -> str:
    return (now - timedelta(days=days)).isoformat().replace("+00:00", "Z")


@pytest.fixture
def make_item():
    counter = {"n": 0}

    def _make(**overrides) -> NewsItem:
        counter["n"] += 1
        data = {
            "id": f"item-{counter['n']}",
            "title": "Biosimilar update",
            "summary": "",
            "url": "https://example.com/news",
            "publishedAt": days_ago(1),
            "sopStage": "Monitor",
            "focus": "Regulatory",
            "keywords": [],
            "sourceId": "s1",
            "sourceName": "Source One",
            "confidence": 0.5,
            "followUpAction": "",
        }
        data.update(overrides)
        return NewsItem.model_validate(data)

    return _make
