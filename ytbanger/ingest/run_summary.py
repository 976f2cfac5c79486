"""
Raw metadata summary for one topic run.

Plain view/duration statistics shown next to the authority report: how big
the sample is, which videos have the most views and which channels dominate
it by total views.
"""
import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import pandas as pd

from ..authority.models import VideoRecord

logger = logging.getLogger(__name__)

SUMMARY_CHANNEL_LIMIT = 12
SUMMARY_VIDEO_LIMIT = 30


@dataclass
class ChannelTotals:
    """View totals for one channel within a run."""
    channel_id: str
    title: Optional[str]
    thumbnail_url: Optional[str]
    subscriber_count: Optional[int]
    videos_count: int
    total_views: Optional[int]


@dataclass
class RunSummary:
    video_count: int
    avg_views: Optional[float]
    avg_duration: Optional[float]
    channels: List[ChannelTotals] = field(default_factory=list)
    videos: List[VideoRecord] = field(default_factory=list)


def _optional_float(value) -> Optional[float]:
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return None
    return float(value)


def _optional_int(value) -> Optional[int]:
    value = _optional_float(value)
    return int(value) if value is not None else None


def _optional_str(value) -> Optional[str]:
    return value if isinstance(value, str) else None


def summarize_run(
    records: Sequence[VideoRecord],
    channel_limit: int = SUMMARY_CHANNEL_LIMIT,
    video_limit: int = SUMMARY_VIDEO_LIMIT,
) -> RunSummary:
    """Summarize a batch of video records.

    Averages skip unknown values (None when nothing is known). Channels are
    ranked by total views and videos by view count, unknown views last in
    both; ties keep input order.
    """
    if not records:
        return RunSummary(video_count=0, avg_views=None, avg_duration=None)

    df = pd.DataFrame(
        [
            {
                "channel_id": r.channel_id,
                "channel_title": r.channel_title,
                "thumbnail_url": r.thumbnail_url,
                "subscriber_count": r.subscriber_count,
                "view_count": r.view_count,
                "duration_seconds": r.duration_seconds,
            }
            for r in records
        ]
    )
    for col in ("subscriber_count", "view_count", "duration_seconds"):
        df[col] = pd.to_numeric(df[col], errors="coerce")

    grouped = (
        df.groupby("channel_id", sort=False)
        .agg(
            title=("channel_title", "first"),
            thumbnail_url=("thumbnail_url", "first"),
            subscriber_count=("subscriber_count", "first"),
            videos_count=("view_count", "size"),
            total_views=("view_count", lambda s: s.sum(min_count=1)),
        )
        .sort_values("total_views", ascending=False, na_position="last", kind="stable")
        .head(channel_limit)
    )

    channels = [
        ChannelTotals(
            channel_id=channel_id,
            title=_optional_str(row["title"]),
            thumbnail_url=_optional_str(row["thumbnail_url"]),
            subscriber_count=_optional_int(row["subscriber_count"]),
            videos_count=int(row["videos_count"]),
            total_views=_optional_int(row["total_views"]),
        )
        for channel_id, row in grouped.iterrows()
    ]

    # Positional index into records
    top_rows = (
        df["view_count"]
        .sort_values(ascending=False, na_position="last", kind="stable")
        .head(video_limit)
        .index
    )

    summary = RunSummary(
        video_count=len(df),
        avg_views=_optional_float(df["view_count"].mean()),
        avg_duration=_optional_float(df["duration_seconds"].mean()),
        channels=channels,
        videos=[records[i] for i in top_rows],
    )
    logger.debug(
        "Run summary: %d videos across %d channels", summary.video_count, df["channel_id"].nunique()
    )
    return summary
