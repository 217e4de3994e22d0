import json
from unittest.mock import patch

import pytest

from app.services.news_loader import NewsDataUnavailable, load_news


def _row(item_id, published_at, **overrides):
    row = {
        "id": item_id,
        "title": f"Title {item_id}",
        "summary": "",
        "url": "https://example.com",
        "publishedAt": published_at,
        "sopStage": "Monitor",
        "focus": "Commercial",
        "keywords": [],
        "sourceId": "s1",
        "sourceName": "Source One",
        "confidence": 0.5,
        "followUpAction": "",
    }
    row.update(overrides)
    return row


def _write(tmp_path, data):
    path = tmp_path / "news.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.mark.asyncio
async def test_load_news_from_envelope_sorted_newest_first(tmp_path):
    """Items from {'items': [...]} come back newest first"""
    path = _write(tmp_path, {
        "generated_at": "2026-10-18T06:00:00+00:00",
        "item_count": 3,
        "items": [
            _row("old", "2026-09-01T00:00:00Z"),
            _row("new", "2026-10-15T00:00:00Z"),
            _row("mid", "2026-10-01T00:00:00Z"),
        ],
    })

    items = await load_news(path)

    assert [i.id for i in items] == ["new", "mid", "old"]


@pytest.mark.asyncio
async def test_load_news_accepts_bare_list(tmp_path):
    """A top-level JSON array is also accepted"""
    path = _write(tmp_path, [_row("a", "2026-10-15T00:00:00Z")])

    items = await load_news(path)

    assert len(items) == 1
    assert items[0].source_name == "Source One"


@pytest.mark.asyncio
async def test_load_news_unparsable_dates_sort_last(tmp_path):
    """Items with malformed timestamps keep their raw value and go to the end"""
    path = _write(tmp_path, [
        _row("broken", "unknown"),
        _row("ok", "2026-10-15T00:00:00Z"),
    ])

    items = await load_news(path)

    assert [i.id for i in items] == ["ok", "broken"]
    assert items[1].published_at == "unknown"


@pytest.mark.asyncio
async def test_load_news_skips_malformed_rows(tmp_path):
    """Rows failing validation are skipped, the rest still load"""
    path = _write(tmp_path, [
        _row("bad-stage", "2026-10-15T00:00:00Z", sopStage="Escalate"),
        {"id": "missing-fields"},
        _row("good", "2026-10-14T00:00:00Z"),
    ])

    items = await load_news(path)

    assert [i.id for i in items] == ["good"]


@pytest.mark.asyncio
async def test_load_news_drops_duplicate_ids(tmp_path):
    """First occurrence of an id wins"""
    path = _write(tmp_path, [
        _row("dup", "2026-10-15T00:00:00Z", title="First"),
        _row("dup", "2026-10-16T00:00:00Z", title="Second"),
    ])

    items = await load_news(path)

    assert len(items) == 1
    assert items[0].title == "First"


@pytest.mark.asyncio
async def test_load_news_missing_file(tmp_path):
    """A missing snapshot raises NewsDataUnavailable"""
    with pytest.raises(NewsDataUnavailable):
        await load_news(tmp_path / "absent.json")


@pytest.mark.asyncio
async def test_load_news_invalid_json(tmp_path):
    """Corrupt JSON raises NewsDataUnavailable"""
    path = tmp_path / "news.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(NewsDataUnavailable):
        await load_news(path)


@pytest.mark.asyncio
async def test_load_news_wrong_shape(tmp_path):
    """An object without an item list raises NewsDataUnavailable"""
    path = _write(tmp_path, {"generated_at": None})

    with pytest.raises(NewsDataUnavailable):
        await load_news(path)


@pytest.mark.asyncio
async def test_load_news_defaults_to_configured_file(tmp_path):
    """Without a path the snapshot location comes from settings"""
    path = _write(tmp_path, [_row("a", "2026-10-15T00:00:00Z")])

    with patch("app.services.news_loader.settings.NEWS_DATA_FILE", path):
        items = await load_news()

    assert [i.id for i in items] == ["a"]


@pytest.mark.asyncio
async def test_load_news_invalid_utf8(tmp_path):
    """Bytes that are not UTF-8 raise NewsDataUnavailable"""
    path = tmp_path / "news.json"
    path.write_bytes(b'[{"id": "\xff\xfe"}]')

    with pytest.raises(NewsDataUnavailable):
        await load_news(path)
