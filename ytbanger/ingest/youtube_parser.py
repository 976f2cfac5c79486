"""
Convert YouTube Data API v3 payloads into VideoRecords.

Works on already-fetched ``videos.list`` items (snippet, statistics,
contentDetails) and ``channels.list`` items (snippet, statistics). Fetching is
left to the caller.
"""
import logging
import re
from typing import Dict, List, Optional

from ..authority.models import VideoRecord, coerce_int, parse_timestamp

logger = logging.getLogger(__name__)


def parse_iso_duration(duration_str: Optional[str]) -> Optional[int]:
    """Parse ISO 8601 duration (PT1H2M3S) to seconds. None if missing or invalid."""
    if not duration_str:
        return None
    match = re.match(r"PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?", duration_str)
    if not match:
        return None
    hours = int(match.group(1) or 0)
    minutes = int(match.group(2) or 0)
    seconds = int(match.group(3) or 0)
    return hours * 3600 + minutes * 60 + seconds


def _thumbnail_url(snippet: Dict) -> Optional[str]:
    thumbnails = snippet.get("thumbnails") or {}
    return (
        thumbnails.get("high", {}).get("url")
        or thumbnails.get("medium", {}).get("url")
        or thumbnails.get("default", {}).get("url")
    )


def index_channels(channel_items: List[Dict]) -> Dict[str, Dict]:
    """Map channel id -> {title, subscriber_count} from channels.list items."""
    channels = {}
    for item in channel_items:
        channel_id = item.get("id")
        if not channel_id:
            continue
        snippet = item.get("snippet", {})
        stats = item.get("statistics", {})
        channels[channel_id] = {
            "title": snippet.get("title"),
            # Hidden subscriber counts come back without the field
            "subscriber_count": coerce_int(stats.get("subscriberCount")),
        }
    return channels


def record_from_api_item(item: Dict, channel: Optional[Dict] = None) -> Optional[VideoRecord]:
    """Build one VideoRecord from a videos.list item, or None if ids are missing."""
    snippet = item.get("snippet", {})
    stats = item.get("statistics", {})
    content = item.get("contentDetails", {})

    video_id = item.get("id")
    channel_id = snippet.get("channelId")
    if not video_id or not channel_id:
        return None

    channel = channel or {}
    return VideoRecord(
        id=video_id,
        title=snippet.get("title", ""),
        channel_id=channel_id,
        description=snippet.get("description"),
        published_at=parse_timestamp(snippet.get("publishedAt")),
        duration_seconds=parse_iso_duration(content.get("duration")),
        view_count=coerce_int(stats.get("viewCount")),
        like_count=coerce_int(stats.get("likeCount")),
        comment_count=coerce_int(stats.get("commentCount")),
        channel_title=snippet.get("channelTitle") or channel.get("title"),
        subscriber_count=channel.get("subscriber_count"),
        thumbnail_url=_thumbnail_url(snippet),
    )


def records_from_api(
    video_items: List[Dict],
    channel_items: Optional[List[Dict]] = None,
) -> List[VideoRecord]:
    """Convert videos.list items into VideoRecords, joining channel statistics.

    Args:
        video_items: ``items`` from one or more videos.list responses.
        channel_items: ``items`` from channels.list for the same channels.

    Returns:
        VideoRecords in input order; items lacking an id or channelId are dropped.
    """
    channels = index_channels(channel_items or [])
    records = []
    for item in video_items:
        channel_id = item.get("snippet", {}).get("channelId")
        record = record_from_api_item(item, channels.get(channel_id))
        if record is None:
            logger.debug("Skipping API item without id/channelId: %s", item.get("id"))
            continue
        records.append(record)

    missing = {r.channel_id for r in records if r.channel_id not in channels}
    if channel_items is not None and missing:
        logger.warning("No channel statistics for %d channels", len(missing))
    logger.info("Converted %d API items into video records", len(records))
    return records
