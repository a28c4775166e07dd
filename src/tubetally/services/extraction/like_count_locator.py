"""
Like-count locator.

Finds a video's like count using independent strategies in priority order,
specific state lookups first and full-DOM scans last:

1. Rendered like-button text in ``ytInitialData``
2. Any string under a "like" key anywhere in ``ytInitialData``
3. ``likeCount`` in the ``ytcfg`` config blob
4. ``videoDetails.likeCount`` in ``ytInitialPlayerResponse``
5. DOM scan: labelled count elements, like buttons, text near "like"

Every strategy returns a positive count or None. When all of them miss,
``locate_like_count`` returns ``0``, which callers must read as "no signal
found" rather than "no likes".
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Any

from bs4 import BeautifulSoup, Tag

from tubetally.parsers.count_parser import parse_count
from tubetally.services.extraction.page_snapshot import PageSnapshot
from tubetally.services.extraction.strategies import (
    BARE_COUNT_RE,
    Strategy,
    dig,
    run_strategies,
    watch_contents,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 32
DEFAULT_BUTTON_SCAN_LIMIT = 20
DEFAULT_NEARBY_SCAN_LIMIT = 5
NEARBY_TEXT_MAX_LEN = 10

NOT_FOUND = 0

_LIKE_BUTTON_TEXT_PATH: tuple[str | int, ...] = (
    "videoActions",
    "menuRenderer",
    "topLevelButtons",
    0,
    "segmentedLikeDislikeButtonRenderer",
    "likeButton",
    "toggleButtonRenderer",
    "defaultText",
    "simpleText",
)


def _positive(count: int) -> int | None:
    return count if count > 0 else None


def _coerce_count(value: Any) -> int | None:
    """Accept an int or a string of digits; anything else is not a count."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return _positive(value)
    if isinstance(value, str) and value.strip().isdecimal():
        return _positive(int(value.strip()))
    return None


def _own_text(element: Tag) -> str:
    return element.get_text().strip()


def _mentions_like(label: Any) -> bool:
    return isinstance(label, str) and "like" in label.lower()


# ---------------------------------------------------------------------------
# State-blob strategies
# ---------------------------------------------------------------------------


def like_count_from_initial_data(page: PageSnapshot) -> int | None:
    """Read the like button's rendered text from ``videoPrimaryInfoRenderer``."""
    for content in watch_contents(page.initial_data):
        renderer = dig(content, "videoPrimaryInfoRenderer")
        if renderer is None:
            continue
        like_text = dig(renderer, *_LIKE_BUTTON_TEXT_PATH)
        if isinstance(like_text, str):
            count = _positive(parse_count(like_text))
            if count is not None:
                return count
    return None


def _search_like_strings(
    value: Any,
    depth: int,
    max_depth: int,
    visited: set[int],
) -> int | None:
    if depth > max_depth or not isinstance(value, (dict, list)):
        return None
    if id(value) in visited:
        return None
    visited.add(id(value))

    if isinstance(value, list):
        for item in value:
            found = _search_like_strings(item, depth + 1, max_depth, visited)
            if found is not None:
                return found
        return None

    for key, child in value.items():
        if isinstance(child, str) and "like" in str(key).lower():
            count = parse_count(child)
            if count > 0:
                return count
        elif isinstance(child, (dict, list)):
            found = _search_like_strings(child, depth + 1, max_depth, visited)
            if found is not None:
                return found
    return None


def like_count_from_initial_data_search(
    page: PageSnapshot, max_depth: int = DEFAULT_MAX_DEPTH
) -> int | None:
    """
    Depth-first search of ``ytInitialData`` for any "like" key with text.

    Visits mappings in insertion order and accepts the first string value
    under a key containing "like" (any case) that parses to a positive
    count. Containers already visited are skipped, and nothing deeper than
    ``max_depth`` levels is examined.
    """
    if page.initial_data is None:
        return None
    return _search_like_strings(page.initial_data, 0, max_depth, set())


def like_count_from_config(page: PageSnapshot) -> int | None:
    """Read ``data_.likeCount`` or ``data_.videoDetails.likeCount`` from ytcfg."""
    data = dig(page.config, "data_")
    if not isinstance(data, dict):
        return None
    count = _coerce_count(data.get("likeCount"))
    if count is not None:
        return count
    return _coerce_count(dig(data, "videoDetails", "likeCount"))


def like_count_from_player_response(page: PageSnapshot) -> int | None:
    """Read ``videoDetails.likeCount`` from the player metadata."""
    return _coerce_count(dig(page.player_response, "videoDetails", "likeCount"))


# ---------------------------------------------------------------------------
# DOM strategies
# ---------------------------------------------------------------------------


def _dom_labelled_count(document: BeautifulSoup) -> int | None:
    for element in document.find_all(attrs={"aria-label": True}):
        if not _mentions_like(element.get("aria-label")):
            continue
        text = _own_text(element)
        if text and BARE_COUNT_RE.match(text):
            count = _positive(parse_count(text))
            if count is not None:
                return count
    return None


def _dom_like_button_count(document: BeautifulSoup, limit: int) -> int | None:
    buttons = document.select('button, [role="button"]')
    for button in buttons[:limit]:
        if not _mentions_like(button.get("aria-label")):
            continue
        for child in button.find_all(True):
            text = _own_text(child)
            if text and BARE_COUNT_RE.match(text):
                count = _positive(parse_count(text))
                if count is not None:
                    return count
    return None


def _dom_nearby_count(document: BeautifulSoup, limit: int) -> int | None:
    candidates: list[str] = []
    for element in document.find_all(True):
        text = _own_text(element)
        if not text or len(text) >= NEARBY_TEXT_MAX_LEN or not BARE_COUNT_RE.match(text):
            continue
        parent = element.parent
        # The document object itself is not an element.
        if parent is None or isinstance(parent, BeautifulSoup):
            continue
        parent_text = parent.get_text().lower()
        if "like" in parent_text or "thumb" in parent_text:
            candidates.append(text)

    logger.debug("Found %d potential like count elements", len(candidates))
    for text in candidates[:limit]:
        count = _positive(parse_count(text))
        if count is not None:
            return count
    return None


def like_count_from_dom(
    page: PageSnapshot,
    button_scan_limit: int = DEFAULT_BUTTON_SCAN_LIMIT,
    nearby_scan_limit: int = DEFAULT_NEARBY_SCAN_LIMIT,
) -> int | None:
    """
    Scan the live page structure for a like count.

    Tries, in order: any element labelled with "like" whose own text is a
    bare count; descendants of the first ``button_scan_limit`` buttons
    labelled with "like"; short bare counts whose parent mentions "like" or
    "thumb" (first ``nearby_scan_limit`` candidates).
    """
    document = page.document
    count = _dom_labelled_count(document)
    if count is not None:
        return count
    count = _dom_like_button_count(document, button_scan_limit)
    if count is not None:
        return count
    return _dom_nearby_count(document, nearby_scan_limit)


def like_count_strategies(
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    button_scan_limit: int = DEFAULT_BUTTON_SCAN_LIMIT,
    nearby_scan_limit: int = DEFAULT_NEARBY_SCAN_LIMIT,
) -> tuple[Strategy[int], ...]:
    """The like-count strategy chain, in priority order."""
    return (
        like_count_from_initial_data,
        partial(like_count_from_initial_data_search, max_depth=max_depth),
        like_count_from_config,
        like_count_from_player_response,
        partial(
            like_count_from_dom,
            button_scan_limit=button_scan_limit,
            nearby_scan_limit=nearby_scan_limit,
        ),
    )


def locate_like_count(
    page: PageSnapshot,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    button_scan_limit: int = DEFAULT_BUTTON_SCAN_LIMIT,
    nearby_scan_limit: int = DEFAULT_NEARBY_SCAN_LIMIT,
) -> int:
    """
    Locate the like count of the video shown on ``page``.

    Parameters
    ----------
    page : PageSnapshot
        The page to search.
    max_depth : int, optional
        Depth cap for the recursive ``ytInitialData`` search (default: 32).
    button_scan_limit : int, optional
        Number of buttons examined by the DOM scan (default: 20).
    nearby_scan_limit : int, optional
        Number of near-"like" text candidates tried (default: 5).

    Returns
    -------
    int
        The like count, or ``0`` if no strategy found one.
    """
    strategies = like_count_strategies(
        max_depth=max_depth,
        button_scan_limit=button_scan_limit,
        nearby_scan_limit=nearby_scan_limit,
    )
    count = run_strategies(strategies, page, "like count")
    return count if count is not None else NOT_FOUND
