"""
Channel-name locator.

Strategies in priority order:

1. Owner title run in ``ytInitialData`` (``videoSecondaryInfoRenderer``)
2. ``videoDetails.author`` in ``ytInitialPlayerResponse``
3. Owner / channel-name elements in the DOM

Returns None when nothing is found; substituting a display default is the
page analyzer's job.
"""

from __future__ import annotations

from typing import Any

from tubetally.services.extraction.page_snapshot import PageSnapshot
from tubetally.services.extraction.strategies import (
    Strategy,
    dig,
    run_strategies,
    watch_contents,
)

CHANNEL_NAME_SELECTORS: tuple[str, ...] = (
    "ytd-video-owner-renderer yt-formatted-string a",
    "ytd-channel-name yt-formatted-string a",
    "ytd-video-owner-renderer yt-formatted-string",
    "ytd-channel-name yt-formatted-string",
    "ytd-video-owner-renderer #channel-name a",
    "ytd-video-owner-renderer #channel-name",
    '[id="owner-name"] a',
    '[id="owner-name"]',
)


def _non_empty(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


def channel_name_from_initial_data(page: PageSnapshot) -> str | None:
    """First owner title run under ``videoSecondaryInfoRenderer``, verbatim."""
    for content in watch_contents(page.initial_data):
        name = _non_empty(
            dig(
                content,
                "videoSecondaryInfoRenderer",
                "owner",
                "videoOwnerRenderer",
                "title",
                "runs",
                0,
                "text",
            )
        )
        if name is not None:
            return name
    return None


def channel_name_from_player_response(page: PageSnapshot) -> str | None:
    """The ``author`` field of the player metadata."""
    return _non_empty(dig(page.player_response, "videoDetails", "author"))


def channel_name_from_dom(page: PageSnapshot) -> str | None:
    """First non-empty trimmed text among the owner selectors, in order."""
    for selector in CHANNEL_NAME_SELECTORS:
        for element in page.document.select(selector):
            text = element.get_text().strip()
            if text:
                return text
    return None


CHANNEL_NAME_STRATEGIES: tuple[Strategy[str], ...] = (
    channel_name_from_initial_data,
    channel_name_from_player_response,
    channel_name_from_dom,
)


def locate_channel_name(page: PageSnapshot) -> str | None:
    """
    Locate the display name of the channel that owns the video on ``page``.

    Parameters
    ----------
    page : PageSnapshot
        The page to search.

    Returns
    -------
    str | None
        The channel name, or None if no strategy found one.
    """
    return run_strategies(CHANNEL_NAME_STRATEGIES, page, "channel name")
