"""
Tests for video and channel identifier extraction.
"""

from __future__ import annotations

import pytest

from tubetally.exceptions import MalformedInputError
from tubetally.parsers.url_parser import extract_channel_id, extract_video_id


class TestExtractVideoId:
    """Tests for extract_video_id."""

    def test_watch_url_with_extra_params(self) -> None:
        assert extract_video_id("https://www.youtube.com/watch?v=abc123&t=5") == "abc123"

    def test_short_url(self) -> None:
        assert extract_video_id("https://youtu.be/xyz789") == "xyz789"

    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("https://youtu.be/xyz789?si=share", "xyz789"),
            ("https://www.youtube.com/watch?v=dQw4w9WgXcQ#comments", "dQw4w9WgXcQ"),
            ("https://m.youtube.com/watch?v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
            ("youtube.com/watch?v=noscheme", "noscheme"),
        ],
    )
    def test_id_terminators(self, url: str, expected: str) -> None:
        """Test that the id stops at ?, # or end of string."""
        assert extract_video_id(url) == expected

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com/",
            "https://www.youtube.com/",
            "https://www.youtube.com/@somechannel",
            "https://www.youtube.com/watch?list=PL123",
            "",
        ],
    )
    def test_non_video_urls(self, url: str) -> None:
        assert extract_video_id(url) is None


class TestExtractChannelId:
    """Tests for extract_channel_id."""

    def test_handle_url(self) -> None:
        assert extract_channel_id("https://www.youtube.com/@somechannel") == "somechannel"

    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("https://www.youtube.com/channel/UCuAXFkgsw1L7xaCfnd5JJOw", "UCuAXFkgsw1L7xaCfnd5JJOw"),
            ("https://www.youtube.com/c/RickAstleyVEVO/videos", "RickAstleyVEVO"),
            ("https://www.youtube.com/@somechannel/shorts", "somechannel"),
        ],
    )
    def test_channel_path_prefixes(self, url: str, expected: str) -> None:
        """Test that only the first segment after the prefix is taken."""
        assert extract_channel_id(url) == expected

    def test_watch_url_has_no_channel(self) -> None:
        assert extract_channel_id("https://www.youtube.com/watch?v=abc123") is None

    def test_prefix_must_start_path(self) -> None:
        assert extract_channel_id("https://www.youtube.com/user/channel/abc") is None

    @pytest.mark.parametrize(
        "url",
        ["not a url", "youtube.com/watch?v=abc", "http://[::1"],
    )
    def test_malformed_url_raises(self, url: str) -> None:
        with pytest.raises(MalformedInputError) as exc_info:
            extract_channel_id(url)
        assert exc_info.value.url == url
