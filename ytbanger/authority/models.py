"""
Data models for the authority scoring engine.

Input records are plain frozen dataclasses. Derived report types are frozen
pydantic models that serialize with camelCase keys (``channelId``,
``avgVideoScore``) for the presentation layer.
"""
import math
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def _pick(row: Mapping[str, Any], *keys: str) -> Any:
    """Return the first non-None value among keys (snake_case or camelCase)."""
    for key in keys:
        value = row.get(key)
        if value is not None:
            return value
    return None


def coerce_int(value: Any) -> Optional[int]:
    """Coerce API/CSV numerics ("1200", 1200.0) to int; None when unparseable."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return int(number)


def _to_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    return str(value)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp (``Z`` suffix allowed) to an aware datetime.

    Naive values are taken as UTC. Returns None when missing or unparseable.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        text = _to_str(value)
        if not text:
            return None
        try:
            parsed = datetime.fromisoformat(text.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass(frozen=True)
class VideoRecord:
    """One video row from the metadata provider.

    Channel fields (title, subscriber count) are denormalized per video.
    Optional numerics are None when unknown, never 0.
    """
    id: str
    title: str
    channel_id: str
    description: Optional[str] = None
    published_at: Optional[datetime] = None
    duration_seconds: Optional[int] = None
    view_count: Optional[int] = None
    like_count: Optional[int] = None  # not used by scoring
    comment_count: Optional[int] = None  # not used by scoring
    channel_title: Optional[str] = None
    subscriber_count: Optional[int] = None
    thumbnail_url: Optional[str] = None

    @property
    def text(self) -> str:
        """Title and description joined, the text searched for keywords."""
        return f"{self.title or ''} {self.description or ''}"

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "VideoRecord":
        """Build a record from a loosely-typed row (database or API style keys)."""
        return cls(
            id=_to_str(_pick(row, "id", "video_id", "videoId")) or "",
            title=_to_str(_pick(row, "title")) or "",
            channel_id=_to_str(_pick(row, "channel_id", "channelId")) or "",
            description=_to_str(_pick(row, "description")),
            published_at=parse_timestamp(_pick(row, "published_at", "publishedAt")),
            duration_seconds=coerce_int(_pick(row, "duration_seconds", "durationSeconds")),
            view_count=coerce_int(_pick(row, "view_count", "viewCount")),
            like_count=coerce_int(_pick(row, "like_count", "likeCount")),
            comment_count=coerce_int(_pick(row, "comment_count", "commentCount")),
            channel_title=_to_str(_pick(row, "channel_title", "channelTitle")),
            subscriber_count=coerce_int(_pick(row, "subscriber_count", "subscriberCount")),
            thumbnail_url=_to_str(_pick(row, "thumbnail_url", "thumbnailUrl")),
        )

    def to_row(self) -> dict:
        """JSON-ready snake_case row, readable back with from_row."""
        row = asdict(self)
        if self.published_at is not None:
            row["published_at"] = self.published_at.isoformat()
        return row


class _ReportModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class SignalBreakdown(_ReportModel):
    """Pre-weight video signals, each in [0, 1] rounded to 2 decimals."""
    depth: float
    methodology: float
    clickbait_penalty: float
    engagement: float
    recency: float


class ScoredVideo(_ReportModel):
    """A video with its authority score (0-100) and signal breakdown."""
    id: str
    title: str
    channel_id: str
    channel_title: Optional[str] = None
    thumbnail_url: Optional[str] = None
    published_at: Optional[datetime] = None
    duration_seconds: Optional[int] = None
    view_count: Optional[int] = None
    score: int
    signals: SignalBreakdown


class ChannelSignals(_ReportModel):
    consistency: float
    scale: float
    recency: float


class ScoredChannel(_ReportModel):
    """A channel with its aggregated authority score (0-100)."""
    channel_id: str
    title: Optional[str] = None
    thumbnail_url: Optional[str] = None
    subscriber_count: Optional[int] = None
    avg_video_score: int
    score: int
    signals: ChannelSignals


class Benchmarks(_ReportModel):
    """Averages and maxima over the full scored batch (before truncation)."""
    avg_video_score: int = 0
    avg_channel_score: int = 0
    top_video_score: int = 0
    top_channel_score: int = 0


class AuthorityReport(_ReportModel):
    benchmarks: Benchmarks
    videos: List[ScoredVideo]
    channels: List[ScoredChannel]
