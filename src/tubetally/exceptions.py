"""
Custom exceptions for the tubetally application.

This module defines domain-specific exceptions raised while turning a page
and its URL into engagement records. Most of them never reach a caller of
``analyze``: the page analyzer converts them into failed outcomes.
"""

from __future__ import annotations


class TubetallyError(Exception):
    """Base exception for all tubetally errors."""

    def __init__(self, message: str) -> None:
        """
        Initialize TubetallyError.

        Parameters
        ----------
        message : str
            Human-readable error message.
        """
        self.message = message
        super().__init__(message)


class MalformedInputError(TubetallyError):
    """
    Exception raised when a URL cannot be parsed structurally.

    Raised by ``extract_channel_id`` for strings that are not absolute web
    URLs. The page analyzer reports it as a ``MalformedInput`` failure
    instead of treating the channel as absent.

    Attributes
    ----------
    message : str
        Human-readable error message.
    url : str | None
        The offending URL, if known.

    Examples
    --------
    >>> try:
    ...     extract_channel_id("not a url")
    ... except MalformedInputError as e:
    ...     print(f"Cannot parse {e.url!r}: {e.message}")
    """

    def __init__(
        self,
        message: str = "Malformed URL",
        url: str | None = None,
    ) -> None:
        """
        Initialize MalformedInputError.

        Parameters
        ----------
        message : str, optional
            Human-readable error message (default: "Malformed URL").
        url : str | None, optional
            The URL that failed to parse (default: None).
        """
        self.url = url
        super().__init__(message)


class NotAVideoPageError(TubetallyError):
    """
    Exception raised when a URL does not address a single-video page.

    Attributes
    ----------
    message : str
        Human-readable error message.
    url : str | None
        The URL that was rejected.
    """

    def __init__(
        self,
        message: str = "Not a video page",
        url: str | None = None,
    ) -> None:
        """
        Initialize NotAVideoPageError.

        Parameters
        ----------
        message : str, optional
            Human-readable error message (default: "Not a video page").
        url : str | None, optional
            The URL that was rejected (default: None).
        """
        self.url = url
        super().__init__(message)


class PageSnapshotError(TubetallyError):
    """
    Exception raised when saved page source cannot be read into a snapshot.

    Attributes
    ----------
    message : str
        Human-readable error message.
    source : str | None
        Where the page source came from (usually a file path).
    """

    def __init__(
        self,
        message: str = "Unable to read page source",
        source: str | None = None,
    ) -> None:
        self.source = source
        super().__init__(message)


# Exit codes for CLI commands
EXIT_CODE_SUCCESS = 0
EXIT_CODE_GENERAL_ERROR = 1
EXIT_CODE_INVALID_ARGS = 2
