"""
Per-video authority scoring.

Combines the five video signals with fixed weights:

  raw = 0.35*depth + 0.25*methodology + 0.20*engagement + 0.20*recency
        - 0.15*clickbait_penalty

then clamps to [0, 1] and scales to an integer 0-100.
"""
import logging
from datetime import datetime
from typing import List, Optional, Sequence, Tuple

from .lexicons import DEFAULT_LOCALE, get_lexicons
from .models import ScoredVideo, SignalBreakdown, VideoRecord
from .signals import (
    clamp,
    round_half_up,
    round_signal,
    score_depth,
    score_engagement,
    score_keyword_density,
    score_recency,
)

logger = logging.getLogger(__name__)

VIDEO_WEIGHTS = {
    "depth": 0.35,
    "methodology": 0.25,
    "engagement": 0.20,
    "recency": 0.20,
    "clickbait_penalty": 0.15,  # subtracted
}

# Clickbait keyword density is damped before it becomes a penalty
CLICKBAIT_PENALTY_SCALE = 0.6


def extract_signals(
    record: VideoRecord,
    now: Optional[datetime] = None,
    authority_keywords: Sequence[str] = (),
    clickbait_keywords: Sequence[str] = (),
) -> dict:
    """Compute the unrounded video signals for one record."""
    text = record.text
    return {
        "depth": score_depth(record.duration_seconds),
        "methodology": score_keyword_density(text, authority_keywords),
        "clickbait_penalty": score_keyword_density(text, clickbait_keywords) * CLICKBAIT_PENALTY_SCALE,
        "engagement": score_engagement(record.view_count, record.subscriber_count),
        "recency": score_recency(record.published_at, now),
    }


def combine_signals(signals: dict) -> float:
    """Weighted sum of video signals, clamped to [0, 1]."""
    raw = (
        VIDEO_WEIGHTS["depth"] * signals["depth"]
        + VIDEO_WEIGHTS["methodology"] * signals["methodology"]
        + VIDEO_WEIGHTS["engagement"] * signals["engagement"]
        + VIDEO_WEIGHTS["recency"] * signals["recency"]
        - VIDEO_WEIGHTS["clickbait_penalty"] * signals["clickbait_penalty"]
    )
    return clamp(raw)


def score_video(
    record: VideoRecord,
    now: Optional[datetime] = None,
    lexicons: Optional[Tuple[Sequence[str], Sequence[str]]] = None,
) -> ScoredVideo:
    """Score a single video.

    Args:
        record: Input video row. Any optional field may be None.
        now: Reference time for recency decay (default: current UTC time).
        lexicons: (authority, clickbait) keyword lists. Defaults to the
            DEFAULT_LOCALE lexicons.

    Returns:
        ScoredVideo with an integer score in [0, 100].
    """
    authority_keywords, clickbait_keywords = lexicons or get_lexicons(DEFAULT_LOCALE)
    signals = extract_signals(record, now, authority_keywords, clickbait_keywords)
    score = round_half_up(combine_signals(signals) * 100)

    return ScoredVideo(
        id=record.id,
        title=record.title,
        channel_id=record.channel_id,
        channel_title=record.channel_title,
        thumbnail_url=record.thumbnail_url,
        published_at=record.published_at,
        duration_seconds=record.duration_seconds,
        view_count=record.view_count,
        score=score,
        signals=SignalBreakdown(**{name: round_signal(value) for name, value in signals.items()}),
    )


def score_videos(
    records: Sequence[VideoRecord],
    now: Optional[datetime] = None,
    lexicons: Optional[Tuple[Sequence[str], Sequence[str]]] = None,
) -> List[ScoredVideo]:
    """Score every record, preserving input order."""
    lexicons = lexicons or get_lexicons(DEFAULT_LOCALE)
    scored = [score_video(record, now, lexicons) for record in records]
    logger.debug("Scored %d videos", len(scored))
    return scored
