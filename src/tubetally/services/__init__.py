"""
Service layer for tubetally.

Exposes the function surface used by callers that watch the browser:
page analysis, aggregate merging, and the standalone parsers.
"""

from tubetally.parsers import extract_channel_id, extract_video_id, parse_count
from tubetally.services.aggregator import calculate_total_likes, merge
from tubetally.services.extraction import PageSnapshot, analyze

__all__ = [
    "PageSnapshot",
    "analyze",
    "calculate_total_likes",
    "extract_channel_id",
    "extract_video_id",
    "merge",
    "parse_count",
]
