"""Tests for converting YouTube Data API payloads into records."""
from datetime import datetime, timezone

from ytbanger.ingest.youtube_parser import (
    index_channels,
    parse_iso_duration,
    record_from_api_item,
    records_from_api,
)


def _make_item(video_id="test_id_1", channel_id="UC1", **snippet_overrides):
    snippet = {
        "title": "Test Video",
        "channelId": channel_id,
        "channelTitle": "TestCh",
        "description": "desc",
        "publishedAt": "2025-01-01T00:00:00Z",
        "thumbnails": {"high": {"url": "https://i.ytimg.com/vi/test/hqdefault.jpg"}},
    }
    snippet.update(snippet_overrides)
    return {
        "id": video_id,
        "snippet": snippet,
        "statistics": {"viewCount": "1000", "likeCount": "50", "commentCount": "10"},
        "contentDetails": {"duration": "PT10M30S"},
    }


def _make_channel(channel_id="UC1", subscribers="25000", title="TestCh"):
    stats = {"viewCount": "900000"}
    if subscribers is not None:
        stats["subscriberCount"] = subscribers
    return {"id": channel_id, "snippet": {"title": title}, "statistics": stats}


class TestParseIsoDuration:
    def test_parse(self):
        assert parse_iso_duration("PT1H2M3S") == 3723
        assert parse_iso_duration("PT5M30S") == 330
        assert parse_iso_duration("PT45S") == 45
        assert parse_iso_duration("PT1H") == 3600

    def test_missing_or_invalid(self):
        assert parse_iso_duration("") is None
        assert parse_iso_duration(None) is None
        assert parse_iso_duration("P1D") is None


class TestIndexChannels:
    def test_index(self):
        channels = index_channels([_make_channel(), _make_channel("UC2", subscribers=None)])
        assert channels["UC1"]["subscriber_count"] == 25000
        assert channels["UC2"]["subscriber_count"] is None

    def test_skips_without_id(self):
        assert index_channels([{"snippet": {}}]) == {}


class TestRecordFromApiItem:
    def test_full_item(self):
        record = record_from_api_item(_make_item(), {"title": "TestCh", "subscriber_count": 25000})
        assert record.id == "test_id_1"
        assert record.channel_id == "UC1"
        assert record.duration_seconds == 630
        assert record.view_count == 1000
        assert record.like_count == 50
        assert record.comment_count == 10
        assert record.subscriber_count == 25000
        assert record.published_at == datetime(2025, 1, 1, tzinfo=timezone.utc)
        assert record.thumbnail_url == "https://i.ytimg.com/vi/test/hqdefault.jpg"

    def test_thumbnail_fallback(self):
        item = _make_item(thumbnails={"default": {"url": "https://i.ytimg.com/vi/test/default.jpg"}})
        assert record_from_api_item(item).thumbnail_url.endswith("default.jpg")

    def test_hidden_statistics(self):
        item = _make_item()
        item["statistics"] = {}
        record = record_from_api_item(item)
        assert record.view_count is None
        assert record.subscriber_count is None

    def test_missing_channel_id(self):
        item = _make_item()
        del item["snippet"]["channelId"]
        assert record_from_api_item(item) is None


class TestRecordsFromApi:
    def test_joins_channel_stats(self):
        items = [_make_item("a", "UC1"), _make_item("b", "UC2")]
        records = records_from_api(items, [_make_channel("UC1", "1000"), _make_channel("UC2", "2000")])
        assert [r.subscriber_count for r in records] == [1000, 2000]

    def test_channel_title_fallback(self):
        item = _make_item(channelTitle=None)
        records = records_from_api([item], [_make_channel(title="From Channel")])
        assert records[0].channel_title == "From Channel"

    def test_without_channels(self):
        records = records_from_api([_make_item()])
        assert len(records) == 1
        assert records[0].subscriber_count is None

    def test_drops_incomplete_items(self):
        bad = _make_item()
        del bad["id"]
        records = records_from_api([bad, _make_item("ok")])
        assert [r.id for r in records] == ["ok"]
