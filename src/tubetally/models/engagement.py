"""
Engagement models for per-video like observations and per-channel totals.

Models
------
VideoRecord
    One like-count observation for a single video.
ChannelAggregate
    Running per-channel total folded from many VideoRecords.
ExtractionOutcome
    Tagged result of analyzing one page: success with data, or failure.

All models serialize with camelCase aliases (``channelId``, ``likeCount``,
...) and accept either the alias or the field name on input, so aggregates
stored by a caller load back through ``model_validate_json`` with their
invariants re-checked.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from .enums import FailureReason

UNKNOWN_CHANNEL_NAME = "Unknown Channel"
"""Display name used when no strategy could resolve the channel name."""


class VideoRecord(BaseModel):
    """
    A single like-count observation for one video.

    Records are immutable. A later analysis of the same video yields a new
    record that replaces this one by ``id`` during a merge.

    Attributes
    ----------
    id : str
        Stable video identifier, unique within a channel's video set.
    title : str
        Page title with the site suffix removed.
    source_url : str
        URL the observation was made on.
    like_count : int
        Observed like count. ``0`` means "unknown or not found" and is not
        distinguished from a genuinely unliked video.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str = Field(..., min_length=1, description="Video identifier")
    title: str = Field(default="", description="Video title")
    source_url: str = Field(default="", description="URL the video was observed on")
    like_count: int = Field(default=0, ge=0, description="Observed like count")


class ChannelAggregate(BaseModel):
    """
    Accumulated like totals for one channel.

    ``total_likes`` and ``video_count`` are always derivable from ``videos``;
    the model refuses any combination where they disagree, or where two
    records share an ``id``.

    Attributes
    ----------
    channel_id : str
        Channel identity. Falls back to the video id when the URL carries
        no channel path.
    channel_name : str
        Display name, ``"Unknown Channel"`` when unresolved.
    total_likes : int
        Sum of ``like_count`` over ``videos``.
    video_count : int
        Number of records in ``videos``.
    videos : tuple[VideoRecord, ...]
        Observed videos, at most one record per id.
    last_updated : datetime
        When this aggregate value was produced (UTC).
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    channel_id: str = Field(..., min_length=1, description="Channel identifier")
    channel_name: str = Field(
        default=UNKNOWN_CHANNEL_NAME, description="Channel display name"
    )
    total_likes: int = Field(default=0, ge=0, description="Sum of video likes")
    video_count: int = Field(default=0, ge=0, description="Number of videos")
    videos: tuple[VideoRecord, ...] = Field(default=())
    last_updated: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When this aggregate was produced",
    )

    @field_validator("last_updated")
    @classmethod
    def ensure_timezone(cls, v: datetime) -> datetime:
        """Treat naive timestamps as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @model_validator(mode="after")
    def totals_match_videos(self) -> ChannelAggregate:
        """Validate that the derived totals agree with the video set."""
        seen: set[str] = set()
        for video in self.videos:
            if video.id in seen:
                raise ValueError(f"Duplicate video id in aggregate: {video.id}")
            seen.add(video.id)

        if self.video_count != len(self.videos):
            raise ValueError(
                f"video_count {self.video_count} does not match "
                f"{len(self.videos)} videos"
            )

        expected = sum(video.like_count for video in self.videos)
        if self.total_likes != expected:
            raise ValueError(
                f"total_likes {self.total_likes} does not match "
                f"sum of video likes {expected}"
            )
        return self

    @classmethod
    def from_videos(
        cls,
        channel_id: str,
        channel_name: str,
        videos: Iterable[VideoRecord],
        last_updated: datetime,
    ) -> ChannelAggregate:
        """
        Build an aggregate whose totals are computed from ``videos``.

        Parameters
        ----------
        channel_id : str
            Channel identity.
        channel_name : str
            Display name.
        videos : Iterable[VideoRecord]
            Video records, already unique by id.
        last_updated : datetime
            Production time of the aggregate.

        Returns
        -------
        ChannelAggregate
            A validated aggregate.
        """
        records = tuple(videos)
        return cls(
            channel_id=channel_id,
            channel_name=channel_name,
            total_likes=sum(video.like_count for video in records),
            video_count=len(records),
            videos=records,
            last_updated=last_updated,
        )


class ExtractionOutcome(BaseModel):
    """
    Result of analyzing one page.

    Exactly one of ``data`` (on success) or ``error`` (on failure) is set.
    Consumers branch on ``success``: a failure means "nothing to show, try
    again later"; a success with ``like_count == 0`` means "no signal found".
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    data: Optional[ChannelAggregate] = None
    error: Optional[str] = None
    reason: Optional[FailureReason] = None

    @model_validator(mode="after")
    def exactly_one_branch(self) -> ExtractionOutcome:
        """Validate that success carries data and failure carries an error."""
        if self.success:
            if self.data is None or self.error is not None or self.reason is not None:
                raise ValueError("A successful outcome carries data and no error")
        elif self.data is not None or not self.error:
            raise ValueError("A failed outcome carries an error and no data")
        return self

    @classmethod
    def succeeded(cls, data: ChannelAggregate) -> ExtractionOutcome:
        """Wrap an analyzed aggregate as a successful outcome."""
        return cls(success=True, data=data)

    @classmethod
    def failed(cls, reason: FailureReason, message: str) -> ExtractionOutcome:
        """Build a failed outcome; ``message`` falls back to the reason value."""
        return cls(success=False, error=message or reason.value, reason=reason)
