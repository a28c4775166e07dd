"""
Builders for page snapshots and embedded state blobs.

Produces ytInitialData and ytInitialPlayerResponse dicts in the shapes
YouTube ships them, and wraps HTML fragments into PageSnapshots.
"""

from __future__ import annotations

from typing import Any

from bs4 import BeautifulSoup

from tubetally.services.extraction.page_snapshot import PageSnapshot


def make_initial_data(
    like_text: str | None = None,
    owner_name: str | None = None,
) -> dict[str, Any]:
    """
    Build a ytInitialData dict with a primary and a secondary info renderer.

    Parameters
    ----------
    like_text : str | None
        simpleText of the like button, omitted when None.
    owner_name : str | None
        First title run of the video owner, omitted when None.
    """
    primary: dict[str, Any] = {"title": {"runs": [{"text": "Some Video"}]}}
    if like_text is not None:
        primary["videoActions"] = {
            "menuRenderer": {
                "topLevelButtons": [
                    {
                        "segmentedLikeDislikeButtonRenderer": {
                            "likeButton": {
                                "toggleButtonRenderer": {
                                    "defaultText": {"simpleText": like_text}
                                }
                            }
                        }
                    }
                ]
            }
        }

    secondary: dict[str, Any] = {"owner": {"videoOwnerRenderer": {}}}
    if owner_name is not None:
        secondary["owner"]["videoOwnerRenderer"]["title"] = {
            "runs": [{"text": owner_name}]
        }

    return {
        "contents": {
            "twoColumnWatchNextResults": {
                "results": {
                    "results": {
                        "contents": [
                            {"videoPrimaryInfoRenderer": primary},
                            {"videoSecondaryInfoRenderer": secondary},
                        ]
                    }
                }
            }
        }
    }


def make_player_response(
    like_count: Any = None, author: str | None = None
) -> dict[str, Any]:
    """Build a ytInitialPlayerResponse dict with videoDetails."""
    details: dict[str, Any] = {"videoId": "dQw4w9WgXcQ", "title": "Some Video"}
    if like_count is not None:
        details["likeCount"] = like_count
    if author is not None:
        details["author"] = author
    return {"videoDetails": details}


def snapshot_from_body(body: str, **blobs: Any) -> PageSnapshot:
    """Wrap an HTML body fragment into a snapshot with optional blobs."""
    document = BeautifulSoup(
        f"<html><head><title>Some Video - YouTube</title></head><body>{body}</body></html>",
        "html.parser",
    )
    return PageSnapshot(document=document, title="Some Video - YouTube", **blobs)
