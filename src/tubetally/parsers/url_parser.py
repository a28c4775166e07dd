"""
Video and channel identifier extraction from YouTube URLs.

Functions
---------
extract_video_id
    Pull the video id out of ``/watch?v=`` or ``youtu.be/`` URLs.
extract_channel_id
    Pull the channel id out of ``/channel/``, ``/c/`` or ``/@`` paths.
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from tubetally.exceptions import MalformedInputError

# Matches both canonical watch URL shapes; the id stops at &, newline, ? or #.
_VIDEO_ID_RE = re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/)([^&\n?#]+)")

_CHANNEL_PATH_PATTERNS: list[re.Pattern[str]] = [
    re.compile(r"^/channel/([^/]+)"),
    re.compile(r"^/c/([^/]+)"),
    re.compile(r"^/@([^/]+)"),
]


def extract_video_id(url: str) -> str | None:
    """
    Extract the video id from a watch or short-link URL.

    Parameters
    ----------
    url : str
        Page address.

    Returns
    -------
    str | None
        The video id, or None when the URL is not a single-video address.

    Examples
    --------
    >>> extract_video_id("https://www.youtube.com/watch?v=abc123&t=5")
    'abc123'
    >>> extract_video_id("https://youtu.be/xyz789")
    'xyz789'
    >>> extract_video_id("https://example.com/") is None
    True
    """
    match = _VIDEO_ID_RE.search(url)
    return match.group(1) if match else None


def extract_channel_id(url: str) -> str | None:
    """
    Extract the channel id from a channel-scoped URL path.

    Parameters
    ----------
    url : str
        Page address. Must be an absolute web URL.

    Returns
    -------
    str | None
        The first path segment after ``/channel/``, ``/c/`` or ``/@``, or
        None when the path carries no channel.

    Raises
    ------
    MalformedInputError
        If the URL cannot be parsed or lacks a scheme or host.

    Examples
    --------
    >>> extract_channel_id("https://www.youtube.com/@somechannel")
    'somechannel'
    >>> extract_channel_id("https://www.youtube.com/watch?v=abc123") is None
    True
    """
    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise MalformedInputError(f"Invalid URL: {url!r} ({e})", url=url) from e

    if not parts.scheme or not parts.netloc:
        raise MalformedInputError(f"Invalid URL: {url!r}", url=url)

    for pattern in _CHANNEL_PATH_PATTERNS:
        match = pattern.match(parts.path)
        if match:
            return match.group(1)

    return None
