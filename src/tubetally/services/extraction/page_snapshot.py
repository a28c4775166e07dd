"""
Immutable page representation consumed by the extraction strategies.

A ``PageSnapshot`` bundles everything a strategy may look at: the parsed
DOM, the document title, and up to three embedded state blobs that YouTube
ships with a watch page:

- ``ytInitialData`` (page-initial-state): renderer tree of the watch page
- ``ytcfg`` (page-config): client configuration, stored as ``{"data_": {...}}``
- ``ytInitialPlayerResponse`` (player-metadata): ``videoDetails`` et al.

Any blob may be missing; that is a normal condition. The snapshot is built
once by the caller and never mutated by the core.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Any

from bs4 import BeautifulSoup
from pydantic import JsonValue

logger = logging.getLogger(__name__)

# Regex to locate the START of an embedded JSON assignment. The JSON body is
# extracted via brace-counting in _extract_json_object().
# Handles: var ytInitialData = {...};
#          ytInitialData = {...};
#          window["ytInitialData"] = {...};
_YT_INITIAL_DATA_RE = re.compile(
    r'(?:var\s+|window\["|)ytInitialData(?:"\])?\s*=\s*',
)
_YT_INITIAL_PLAYER_RE = re.compile(
    r'(?:var\s+|window\["|)ytInitialPlayerResponse(?:"\])?\s*=\s*',
)
_YTCFG_SET_RE = re.compile(r"ytcfg\.set\(\s*")

_MAX_JSON_SCAN_CHARS = 5_000_000


def _extract_json_object(html: str, start: int) -> str | None:
    """
    Extract a balanced JSON object from HTML starting at the given position.

    Uses brace-counting to handle arbitrarily nested ``{...}`` structures
    that would break a simple non-greedy regex.

    Parameters
    ----------
    html : str
        Raw HTML source.
    start : int
        Position of the opening ``{`` in the HTML string.

    Returns
    -------
    str | None
        The balanced JSON string, or None if no opening brace at start
        or braces are unbalanced within the first 5MB of text.
    """
    if start >= len(html) or html[start] != "{":
        return None

    depth = 0
    in_string = False
    escape = False
    limit = min(len(html), start + _MAX_JSON_SCAN_CHARS)

    for i in range(start, limit):
        ch = html[i]

        if escape:
            escape = False
            continue

        if ch == "\\":
            if in_string:
                escape = True
            continue

        if ch == '"':
            in_string = not in_string
            continue

        if in_string:
            continue

        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return html[start : i + 1]

    return None


def _load_json_at(html: str, start: int, name: str) -> Any:
    """Decode the JSON object starting at ``start``; None if absent or malformed."""
    json_str = _extract_json_object(html, start)
    if not json_str:
        return None
    try:
        return json.loads(json_str)
    except (json.JSONDecodeError, ValueError, RecursionError):
        logger.warning("Malformed %s JSON in page source", name)
        return None


def _find_assigned_blob(html: str, pattern: re.Pattern[str], name: str) -> JsonValue:
    match = pattern.search(html)
    if not match:
        return None
    return _load_json_at(html, match.end(), name)


def _find_config_blob(html: str) -> JsonValue:
    """Merge every ``ytcfg.set({...})`` call into a single ``data_`` mapping."""
    merged: dict[str, Any] = {}
    for match in _YTCFG_SET_RE.finditer(html):
        value = _load_json_at(html, match.end(), "ytcfg")
        if isinstance(value, dict):
            merged.update(value)
    if not merged:
        return None
    return {"data_": merged}


@dataclass(frozen=True)
class PageSnapshot:
    """
    Read-only view of one loaded video page.

    Attributes
    ----------
    document : BeautifulSoup
        Parsed DOM of the page.
    title : str
        Document title as shown in the browser tab.
    initial_data : JsonValue
        ``ytInitialData`` blob, or None.
    config : JsonValue
        ``ytcfg`` blob (``{"data_": {...}}``), or None.
    player_response : JsonValue
        ``ytInitialPlayerResponse`` blob, or None.
    """

    document: BeautifulSoup
    title: str = ""
    initial_data: JsonValue = None
    config: JsonValue = None
    player_response: JsonValue = None

    @classmethod
    def from_html(cls, html: str, *, parser: str = "html.parser") -> PageSnapshot:
        """
        Build a snapshot from raw page source.

        Parameters
        ----------
        html : str
            Full page source, as saved from a browser or fetched.
        parser : str, optional
            BeautifulSoup tree builder (default: "html.parser").

        Returns
        -------
        PageSnapshot
            Snapshot with the DOM parsed and every embedded blob that could
            be found and decoded.
        """
        document = BeautifulSoup(html, parser)
        title_tag = document.find("title")
        title = title_tag.get_text() if title_tag is not None else ""

        snapshot = cls(
            document=document,
            title=title,
            initial_data=_find_assigned_blob(html, _YT_INITIAL_DATA_RE, "ytInitialData"),
            config=_find_config_blob(html),
            player_response=_find_assigned_blob(
                html, _YT_INITIAL_PLAYER_RE, "ytInitialPlayerResponse"
            ),
        )
        logger.debug(
            "Built page snapshot: title=%r initial_data=%s config=%s player_response=%s",
            title,
            snapshot.initial_data is not None,
            snapshot.config is not None,
            snapshot.player_response is not None,
        )
        return snapshot

    @classmethod
    def empty(cls) -> PageSnapshot:
        """Snapshot of a blank page with no blobs."""
        return cls(document=BeautifulSoup("", "html.parser"))
