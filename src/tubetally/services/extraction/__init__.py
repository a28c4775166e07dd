"""
Page extraction services.

Turns a loaded YouTube watch page into a single-video channel record by
running layered fallback strategies over the page's embedded state blobs
and DOM.

Modules
-------
page_snapshot
    Immutable page representation, buildable from raw HTML
strategies
    Strategy-chain runner and safe JSON navigation helpers
like_count_locator
    Ordered strategies for the like count
channel_name_locator
    Ordered strategies for the channel display name
page_analyzer
    ``analyze(page, url)`` entry point
"""

from tubetally.services.extraction.channel_name_locator import locate_channel_name
from tubetally.services.extraction.like_count_locator import locate_like_count
from tubetally.services.extraction.page_analyzer import analyze
from tubetally.services.extraction.page_snapshot import PageSnapshot

__all__ = [
    "PageSnapshot",
    "analyze",
    "locate_channel_name",
    "locate_like_count",
]
