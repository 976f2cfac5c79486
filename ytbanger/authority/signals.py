"""
Signal extractors for authority scoring.

Each extractor maps one raw attribute (or a pair) to a value in [0, 1] and is
total: missing or implausible inputs take a fixed neutral default instead of
raising.

Video signals (5):
  depth, methodology (authority keyword density), clickbait (clickbait keyword
  density), engagement (views relative to audience size), recency

Channel signal (1):
  scale (subscriber count)
"""
import math
from datetime import datetime, timezone
from typing import Iterable, Optional

# Neutral values for unknown inputs
UNKNOWN_DEPTH = 0.2
UNKNOWN_ENGAGEMENT = 0.2
UNKNOWN_RECENCY = 0.4
UNKNOWN_SUBSCRIBERS = 0.2

# (upper bound in seconds, score); durations past the last bound score 1.0
DEPTH_BUCKETS = (
    (300, 0.2),
    (720, 0.45),
    (1200, 0.7),
    (2100, 0.9),
)

# Distinct keyword hits treated as a full-strength signal
KEYWORD_SATURATION = 4

# Audience size assumed when the subscriber count is unknown
SUBSCRIBER_FLOOR = 5000

RECENCY_DECAY_DAYS = 240

# log10(subs + 1) / 6 saturates around one million subscribers
SUBSCRIBER_LOG_SCALE = 6


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    """Clamp value to [low, high]."""
    return min(max(value, low), high)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def round_signal(value: float) -> float:
    """Round a signal to 2 decimals for reporting."""
    return math.floor(value * 100 + 0.5) / 100


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def score_depth(duration_seconds: Optional[int]) -> float:
    """Score content depth from video length.

    Stepwise on purpose: <5 min, <12 min, <20 min, <35 min, longer.
    """
    if not duration_seconds or duration_seconds <= 0:
        return UNKNOWN_DEPTH
    for upper, score in DEPTH_BUCKETS:
        if duration_seconds < upper:
            return score
    return 1.0


def score_keyword_density(text: Optional[str], keywords: Iterable[str]) -> float:
    """Fraction of KEYWORD_SATURATION distinct lexicon keywords found in text.

    Naive substring containment: a keyword inside a longer word still counts.
    """
    if not text:
        return 0.0
    lowered = text.lower()
    hits = sum(1 for keyword in set(keywords) if keyword in lowered)
    return clamp(hits / KEYWORD_SATURATION)


def score_engagement(view_count: Optional[int], subscriber_count: Optional[int]) -> float:
    """Score views relative to the channel's audience size.

    A small channel with disproportionate views scores higher than a large
    channel with the same views. log10 keeps viral outliers from saturating.
    """
    if not view_count or view_count <= 0:
        return UNKNOWN_ENGAGEMENT
    denominator = subscriber_count if subscriber_count and subscriber_count > 0 else SUBSCRIBER_FLOOR
    ratio = view_count / denominator
    return clamp(math.log10(1 + ratio * 10) / 2)


def score_recency(published_at: Optional[datetime], now: Optional[datetime] = None) -> float:
    """Exponential decay with age: exp(-age_days / 240).

    Future timestamps count as published now.
    """
    if published_at is None:
        return UNKNOWN_RECENCY
    if now is None:
        now = datetime.now(timezone.utc)
    age_days = (as_utc(now) - as_utc(published_at)).total_seconds() / 86400
    return math.exp(-max(age_days, 0.0) / RECENCY_DECAY_DAYS)


def score_subscribers(subscriber_count: Optional[int]) -> float:
    """Score channel scale from its subscriber count (log scale)."""
    if not subscriber_count or subscriber_count <= 0:
        return UNKNOWN_SUBSCRIBERS
    return clamp(math.log10(subscriber_count + 1) / SUBSCRIBER_LOG_SCALE)
