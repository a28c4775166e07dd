"""
Aggregator: folds a freshly analyzed channel record into a stored one.

``merge`` is pure. It never mutates its inputs and recomputes every derived
total from the merged video set, so merging the same observation twice is
harmless.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone

from tubetally.config.settings import settings as default_settings
from tubetally.models.engagement import ChannelAggregate, VideoRecord


def calculate_total_likes(videos: Iterable[VideoRecord]) -> int:
    """Sum of ``like_count`` over ``videos``."""
    return sum(video.like_count for video in videos)


def merge(
    existing: ChannelAggregate,
    incoming: ChannelAggregate,
    *,
    now: datetime | None = None,
    unknown_name: str | None = None,
) -> ChannelAggregate:
    """
    Merge ``incoming`` into ``existing`` and return the new aggregate.

    Videos are keyed by id: an incoming record replaces the existing record
    with the same id in its original position, and unseen ids are appended
    in incoming order. Totals are recomputed from the result.

    Parameters
    ----------
    existing : ChannelAggregate
        The stored aggregate. Its ``channel_id`` is kept.
    incoming : ChannelAggregate
        The freshly analyzed aggregate.
    now : datetime | None, optional
        Merge time (default: current UTC time). The result's
        ``last_updated`` never precedes either input's.
    unknown_name : str | None, optional
        Placeholder name that must not overwrite a known channel name
        (default: the configured ``unknown_channel_name``).

    Returns
    -------
    ChannelAggregate
        The merged aggregate.

    Examples
    --------
    >>> merged = merge(stored, fresh)
    >>> merged.total_likes == calculate_total_likes(merged.videos)
    True
    """
    videos: dict[str, VideoRecord] = {video.id: video for video in existing.videos}
    for video in incoming.videos:
        videos[video.id] = video

    if unknown_name is None:
        unknown_name = default_settings.unknown_channel_name

    channel_name = incoming.channel_name
    if not channel_name or (
        channel_name == unknown_name and existing.channel_name
    ):
        channel_name = existing.channel_name

    merged_at = now or datetime.now(timezone.utc)
    if merged_at.tzinfo is None:
        merged_at = merged_at.replace(tzinfo=timezone.utc)
    last_updated = max(merged_at, existing.last_updated, incoming.last_updated)

    return ChannelAggregate.from_videos(
        channel_id=existing.channel_id,
        channel_name=channel_name,
        videos=videos.values(),
        last_updated=last_updated,
    )
