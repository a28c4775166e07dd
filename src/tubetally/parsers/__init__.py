"""
Parsers for human-formatted counts and YouTube URLs.
"""

from __future__ import annotations

from tubetally.parsers.count_parser import parse_count
from tubetally.parsers.url_parser import extract_channel_id, extract_video_id

__all__ = ["parse_count", "extract_channel_id", "extract_video_id"]
