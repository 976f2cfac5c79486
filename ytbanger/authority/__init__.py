"""
Authority scoring engine.

Scores videos by depth and credibility versus clickbait engagement, then
aggregates per channel and reports corpus benchmarks.
"""
from .benchmarks import (
    build_report,
    compute_authority,
    compute_benchmarks,
    DEFAULT_CHANNEL_LIMIT,
    DEFAULT_VIDEO_LIMIT,
)
from .channel_aggregator import aggregate_channels, CHANNEL_WEIGHTS
from .lexicons import DEFAULT_LOCALE, get_lexicons, SUPPORTED_LOCALES
from .models import (
    AuthorityReport,
    Benchmarks,
    ChannelSignals,
    ScoredChannel,
    ScoredVideo,
    SignalBreakdown,
    VideoRecord,
)
from .signals import (
    score_depth,
    score_engagement,
    score_keyword_density,
    score_recency,
    score_subscribers,
)
from .video_scorer import score_video, score_videos, VIDEO_WEIGHTS

__all__ = [
    "build_report",
    "compute_authority",
    "compute_benchmarks",
    "DEFAULT_CHANNEL_LIMIT",
    "DEFAULT_VIDEO_LIMIT",
    "aggregate_channels",
    "CHANNEL_WEIGHTS",
    "DEFAULT_LOCALE",
    "get_lexicons",
    "SUPPORTED_LOCALES",
    "AuthorityReport",
    "Benchmarks",
    "ChannelSignals",
    "ScoredChannel",
    "ScoredVideo",
    "SignalBreakdown",
    "VideoRecord",
    "score_depth",
    "score_engagement",
    "score_keyword_density",
    "score_recency",
    "score_subscribers",
    "score_video",
    "score_videos",
    "VIDEO_WEIGHTS",
]
