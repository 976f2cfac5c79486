"""Tests for per-video authority scoring."""
import math
from datetime import datetime, timedelta, timezone

import pytest

from ytbanger.authority.lexicons import get_lexicons
from ytbanger.authority.models import VideoRecord
from ytbanger.authority.video_scorer import (
    CLICKBAIT_PENALTY_SCALE,
    VIDEO_WEIGHTS,
    combine_signals,
    extract_signals,
    score_video,
    score_videos,
)

NOW = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


def _make_record(**kwargs):
    """Create a VideoRecord with sensible defaults."""
    defaults = dict(
        id="vid1",
        title="Notas de la semana",
        channel_id="ch1",
        description=None,
        published_at=NOW,
        duration_seconds=900,
        view_count=20_000,
        channel_title="Canal Uno",
        subscriber_count=10_000,
        thumbnail_url="https://i.ytimg.com/vi/vid1/hqdefault.jpg",
    )
    defaults.update(kwargs)
    return VideoRecord(**defaults)


class TestWeights:
    def test_positive_weights_sum_to_one(self):
        positive = (VIDEO_WEIGHTS["depth"] + VIDEO_WEIGHTS["methodology"]
                    + VIDEO_WEIGHTS["engagement"] + VIDEO_WEIGHTS["recency"])
        assert positive == pytest.approx(1.0)


class TestCombineSignals:
    def test_clamps_negative(self):
        signals = dict(depth=0.0, methodology=0.0, engagement=0.0, recency=0.0, clickbait_penalty=0.6)
        assert combine_signals(signals) == 0.0

    def test_max_signals(self):
        signals = dict(depth=1.0, methodology=1.0, engagement=1.0, recency=1.0, clickbait_penalty=0.0)
        assert combine_signals(signals) == pytest.approx(1.0)


class TestScoreVideo:
    def test_known_score(self):
        record = _make_record(
            title="Arquitectura y metodología: benchmark de un pipeline",
            duration_seconds=2400,
            view_count=5000,
            subscriber_count=None,
        )
        scored = score_video(record, NOW)

        engagement = math.log10(11) / 2
        expected = 0.35 + 0.25 + 0.2 * engagement + 0.2
        assert scored.score == round(expected * 100)
        assert scored.signals.depth == 1.0
        assert scored.signals.methodology == 1.0
        assert scored.signals.engagement == 0.52
        assert scored.signals.recency == 1.0
        assert scored.signals.clickbait_penalty == 0.0

    def test_carries_display_fields(self):
        record = _make_record()
        scored = score_video(record, NOW)
        assert scored.id == "vid1"
        assert scored.channel_id == "ch1"
        assert scored.channel_title == "Canal Uno"
        assert scored.thumbnail_url == record.thumbnail_url
        assert scored.published_at == NOW
        assert scored.duration_seconds == 900
        assert scored.view_count == 20_000

    def test_missing_optional_fields(self):
        record = VideoRecord(id="v1", title="Video", channel_id="c1")
        scored = score_video(record, NOW)
        # depth 0.2, engagement 0.2, recency 0.4, no keywords
        assert scored.score == 19
        assert scored.signals.recency == 0.4
        assert 0 <= scored.score <= 100

    def test_implausible_values_use_defaults(self):
        record = _make_record(duration_seconds=-100, view_count=-5, subscriber_count=-1)
        scored = score_video(record, NOW)
        assert scored.signals.depth == 0.2
        assert scored.signals.engagement == 0.2

    def test_clickbait_lowers_score(self):
        base = _make_record(title="Notas de la semana")
        bait = _make_record(title="Truco secreto increíble, brutal locura")
        base_scored = score_video(base, NOW)
        bait_scored = score_video(bait, NOW)

        assert bait_scored.signals.methodology == 0.0
        assert bait_scored.signals.clickbait_penalty == CLICKBAIT_PENALTY_SCALE
        assert bait_scored.score < base_scored.score

    def test_score_floors_at_zero(self):
        record = _make_record(
            title="Truco secreto increíble, brutal locura",
            duration_seconds=60,
            view_count=1,
            subscriber_count=10**9,
            published_at=datetime(1970, 1, 1, tzinfo=timezone.utc),
        )
        assert score_video(record, NOW).score == 0

    def test_description_counts_for_keywords(self):
        without = score_video(_make_record(description=None), NOW)
        with_desc = score_video(
            _make_record(description="Patrones de diseño y testing con métricas"), NOW
        )
        assert with_desc.signals.methodology == 1.0
        assert with_desc.score > without.score

    def test_english_lexicons(self):
        record = _make_record(title="Observability and testing: a real-world case study")
        es = score_video(record, NOW)
        en = score_video(record, NOW, lexicons=get_lexicons("en"))
        assert en.signals.methodology == 1.0
        assert en.score > es.score

    def test_older_video_scores_lower(self):
        fresh = score_video(_make_record(published_at=NOW), NOW)
        old = score_video(_make_record(published_at=NOW - timedelta(days=720)), NOW)
        assert old.score < fresh.score

    def test_deterministic(self):
        record = _make_record(title="Pipeline de evaluación")
        assert score_video(record, NOW) == score_video(record, NOW)

    def test_bounds_over_varied_records(self):
        for duration in (None, 10, 400, 1000, 1500, 5000):
            for views in (None, 1, 10_000, 10**9):
                scored = score_video(_make_record(duration_seconds=duration, view_count=views), NOW)
                assert isinstance(scored.score, int)
                assert 0 <= scored.score <= 100


class TestExtractSignals:
    def test_penalty_scaled(self):
        _, clickbait = get_lexicons("es")
        record = _make_record(title="hack viral")
        signals = extract_signals(record, NOW, (), clickbait)
        assert signals["clickbait_penalty"] == pytest.approx(0.5 * CLICKBAIT_PENALTY_SCALE)


class TestScoreVideos:
    def test_preserves_order(self):
        records = [_make_record(id=f"v{i}") for i in range(5)]
        scored = score_videos(records, NOW)
        assert [v.id for v in scored] == ["v0", "v1", "v2", "v3", "v4"]

    def test_empty(self):
        assert score_videos([], NOW) == []
