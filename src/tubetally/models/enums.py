"""
Enums for tubetally models.

Defines enumeration types used across the application for consistent
type safety and validation.
"""

from __future__ import annotations

from enum import Enum


class FailureReason(str, Enum):
    """Why a page analysis produced no channel record."""

    NOT_A_VIDEO_PAGE = "NotAVideoPage"
    MALFORMED_INPUT = "MalformedInput"
    INTERNAL_ERROR = "InternalError"
