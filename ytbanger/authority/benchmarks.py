"""
Benchmark statistics and the final authority report.

Benchmarks are computed over the full scored batch; only afterwards are the
video and channel lists sorted and truncated for display.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional, Sequence

import numpy as np

from .channel_aggregator import aggregate_channels
from .lexicons import DEFAULT_LOCALE, get_lexicons
from .models import AuthorityReport, Benchmarks, ScoredChannel, ScoredVideo, VideoRecord
from .signals import round_half_up
from .video_scorer import score_videos

logger = logging.getLogger(__name__)

DEFAULT_VIDEO_LIMIT = 20
DEFAULT_CHANNEL_LIMIT = 12


def _mean_score(scores: List[int]) -> int:
    if not scores:
        return 0
    return round_half_up(float(np.mean(scores)))


def _top_score(scores: List[int]) -> int:
    return max([0] + scores)


def compute_benchmarks(
    videos: Sequence[ScoredVideo],
    channels: Sequence[ScoredChannel],
) -> Benchmarks:
    """Averages and maxima over all videos and channels (0 when empty)."""
    video_scores = [v.score for v in videos]
    channel_scores = [c.score for c in channels]
    return Benchmarks(
        avg_video_score=_mean_score(video_scores),
        avg_channel_score=_mean_score(channel_scores),
        top_video_score=_top_score(video_scores),
        top_channel_score=_top_score(channel_scores),
    )


def build_report(
    videos: Sequence[ScoredVideo],
    channels: Sequence[ScoredChannel],
    video_limit: int = DEFAULT_VIDEO_LIMIT,
    channel_limit: int = DEFAULT_CHANNEL_LIMIT,
) -> AuthorityReport:
    """Assemble the report: benchmarks first, then sorted top-N lists.

    Sorting is stable, so equal scores keep input order.
    """
    benchmarks = compute_benchmarks(videos, channels)
    top_videos = sorted(videos, key=lambda v: v.score, reverse=True)[:video_limit]
    top_channels = sorted(channels, key=lambda c: c.score, reverse=True)[:channel_limit]
    return AuthorityReport(benchmarks=benchmarks, videos=top_videos, channels=top_channels)


def compute_authority(
    records: Sequence[VideoRecord],
    now: Optional[datetime] = None,
    locale: str = DEFAULT_LOCALE,
    video_limit: int = DEFAULT_VIDEO_LIMIT,
    channel_limit: int = DEFAULT_CHANNEL_LIMIT,
) -> AuthorityReport:
    """Run the full authority scoring over a batch of video records.

    Steps:
        1. Score each video from its five signals
        2. Group by channel and score each channel
        3. Compute benchmarks over the full sets
        4. Sort and truncate for display

    Args:
        records: Video rows for one topic run. May be empty.
        now: Reference time for recency decay. Read once per call when omitted
            so every video and channel shares the same clock.
        locale: Lexicon locale for keyword signals ("es" or "en").
        video_limit: Number of top videos to keep.
        channel_limit: Number of top channels to keep.

    Returns:
        AuthorityReport.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    lexicons = get_lexicons(locale)

    videos = score_videos(records, now=now, lexicons=lexicons)
    channels = aggregate_channels(records, videos, now=now)
    report = build_report(videos, channels, video_limit=video_limit, channel_limit=channel_limit)

    logger.info(
        "Authority report: %d videos, %d channels (avg video %d, avg channel %d)",
        len(videos),
        len(channels),
        report.benchmarks.avg_video_score,
        report.benchmarks.avg_channel_score,
    )
    return report
