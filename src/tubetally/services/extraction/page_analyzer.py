"""
Page analyzer: one page + URL in, one single-video channel record out.

``analyze`` is the entry point used by whatever watches the browser. It
never raises: every problem is reported through a failed
``ExtractionOutcome``.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from tubetally.config.settings import Settings, settings as default_settings
from tubetally.exceptions import MalformedInputError, NotAVideoPageError
from tubetally.models.engagement import ChannelAggregate, ExtractionOutcome, VideoRecord
from tubetally.models.enums import FailureReason
from tubetally.parsers.url_parser import extract_channel_id, extract_video_id
from tubetally.services.extraction.channel_name_locator import locate_channel_name
from tubetally.services.extraction.like_count_locator import locate_like_count
from tubetally.services.extraction.page_snapshot import PageSnapshot

logger = logging.getLogger(__name__)

TITLE_SUFFIX = " - YouTube"


def clean_title(title: str) -> str:
    """Strip the site suffix from a document title."""
    title = title.strip()
    if title.endswith(TITLE_SUFFIX):
        return title[: -len(TITLE_SUFFIX)]
    return title


def analyze(
    page: PageSnapshot,
    url: str,
    *,
    settings: Settings | None = None,
    now: datetime | None = None,
) -> ExtractionOutcome:
    """
    Analyze one video page into a single-video channel aggregate.

    Parameters
    ----------
    page : PageSnapshot
        Snapshot of the loaded page.
    url : str
        Address of the page.
    settings : Settings | None, optional
        Scan limits and the unknown-channel default (default: global
        settings).
    now : datetime | None, optional
        Timestamp for ``last_updated`` (default: current UTC time).

    Returns
    -------
    ExtractionOutcome
        Success with a one-video ChannelAggregate, or a failure with reason
        ``NotAVideoPage``, ``MalformedInput`` or ``InternalError``.
    """
    config = settings or default_settings
    try:
        video_id = extract_video_id(url)
        if not video_id:
            raise NotAVideoPageError(url=url)

        like_count = locate_like_count(
            page,
            max_depth=config.max_state_depth,
            button_scan_limit=config.button_scan_limit,
            nearby_scan_limit=config.nearby_scan_limit,
        )
        channel_name = locate_channel_name(page)
        channel_id = extract_channel_id(url) or video_id

        logger.info(
            "Analyzed %s: video_id=%s like_count=%d channel_name=%r channel_id=%s",
            url,
            video_id,
            like_count,
            channel_name,
            channel_id,
        )

        video = VideoRecord(
            id=video_id,
            title=clean_title(page.title),
            source_url=url,
            like_count=like_count,
        )
        aggregate = ChannelAggregate.from_videos(
            channel_id=channel_id,
            channel_name=channel_name or config.unknown_channel_name,
            videos=[video],
            last_updated=now or datetime.now(timezone.utc),
        )
        return ExtractionOutcome.succeeded(aggregate)

    except NotAVideoPageError as e:
        logger.info("%s: %s", e.message, url)
        return ExtractionOutcome.failed(FailureReason.NOT_A_VIDEO_PAGE, e.message)
    except MalformedInputError as e:
        logger.warning("Malformed input while analyzing %r: %s", url, e.message)
        return ExtractionOutcome.failed(FailureReason.MALFORMED_INPUT, e.message)
    except Exception as e:
        logger.exception("Error analyzing page %r", url)
        return ExtractionOutcome.failed(
            FailureReason.INTERNAL_ERROR, str(e) or type(e).__name__
        )
