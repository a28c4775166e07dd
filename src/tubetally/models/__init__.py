"""
Data models module for tubetally.

Defines Pydantic models for per-video like observations, per-channel
aggregates, and the outcome of a page analysis.
"""

from __future__ import annotations

from .engagement import (
    UNKNOWN_CHANNEL_NAME,
    ChannelAggregate,
    ExtractionOutcome,
    VideoRecord,
)
from .enums import FailureReason

__all__ = [
    "UNKNOWN_CHANNEL_NAME",
    "ChannelAggregate",
    "ExtractionOutcome",
    "FailureReason",
    "VideoRecord",
]
