"""
Channel-level aggregation of scored videos.

A channel's score leans on the quality of its sampled videos (consistency)
with audience size (scale) and freshness (recency) as secondary modifiers:

  score = 0.70*(avg_video_score/100) + 0.15*scale + 0.15*recency
"""
import logging
from collections import defaultdict
from datetime import datetime
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from .models import ChannelSignals, ScoredChannel, ScoredVideo, VideoRecord
from .signals import as_utc, clamp, round_half_up, round_signal, score_recency, score_subscribers

logger = logging.getLogger(__name__)

CHANNEL_WEIGHTS = {
    "consistency": 0.70,
    "scale": 0.15,
    "recency": 0.15,
}


def latest_published(records: Sequence[VideoRecord]) -> Optional[datetime]:
    """Most recent non-null publish time among records, or None. Naive times count as UTC."""
    dates = [as_utc(r.published_at) for r in records if r.published_at is not None]
    return max(dates) if dates else None


def group_by_channel(
    records: Sequence[VideoRecord],
    scored_videos: Sequence[ScoredVideo],
) -> Dict[str, List[Tuple[VideoRecord, ScoredVideo]]]:
    """Pair records with their scores and group by channel id, first-seen order."""
    groups: Dict[str, List[Tuple[VideoRecord, ScoredVideo]]] = defaultdict(list)
    for record, video in zip(records, scored_videos):
        groups[record.channel_id].append((record, video))
    return groups


def score_channel(
    channel_id: str,
    items: Sequence[Tuple[VideoRecord, ScoredVideo]],
    now: Optional[datetime] = None,
) -> ScoredChannel:
    """Score one channel from its (record, scored video) pairs.

    Title, thumbnail and subscriber count come from the first-seen record.
    """
    first = items[0][0]
    avg_video_score = float(np.mean([video.score for _, video in items]))
    consistency = avg_video_score / 100
    scale = score_subscribers(first.subscriber_count)
    recency = score_recency(latest_published([record for record, _ in items]), now)

    raw = (
        CHANNEL_WEIGHTS["consistency"] * consistency
        + CHANNEL_WEIGHTS["scale"] * scale
        + CHANNEL_WEIGHTS["recency"] * recency
    )

    return ScoredChannel(
        channel_id=channel_id,
        title=first.channel_title,
        thumbnail_url=first.thumbnail_url,
        subscriber_count=first.subscriber_count,
        avg_video_score=round_half_up(avg_video_score),
        score=round_half_up(clamp(raw) * 100),
        signals=ChannelSignals(
            consistency=round_signal(consistency),
            scale=round_signal(scale),
            recency=round_signal(recency),
        ),
    )


def aggregate_channels(
    records: Sequence[VideoRecord],
    scored_videos: Sequence[ScoredVideo],
    now: Optional[datetime] = None,
) -> List[ScoredChannel]:
    """Build one ScoredChannel per distinct channel id in the batch.

    Args:
        records: Input records, in the same order as scored_videos.
        scored_videos: Output of score_videos for those records.
        now: Reference time for recency decay.

    Returns:
        Scored channels in first-seen order (unsorted).
    """
    if len(records) != len(scored_videos):
        raise ValueError(
            f"records ({len(records)}) and scored_videos ({len(scored_videos)}) must align"
        )
    groups = group_by_channel(records, scored_videos)
    channels = [score_channel(channel_id, items, now) for channel_id, items in groups.items()]
    logger.debug("Aggregated %d videos into %d channels", len(records), len(channels))
    return channels
