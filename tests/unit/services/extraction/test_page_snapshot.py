"""
Unit tests for building PageSnapshots from raw page source.

Tests cover:
- ytInitialData / ytInitialPlayerResponse assignment forms
- ytcfg.set() calls merged into a single config blob
- Malformed or missing blobs left as None
- Title and DOM parsing
"""

from __future__ import annotations

import json
import logging

import pytest

from tests.factories.page_factory import make_initial_data, make_player_response
from tubetally.services.extraction.page_snapshot import PageSnapshot, _extract_json_object

INITIAL_DATA = make_initial_data(like_text="1.2K", owner_name="Rick Astley")
PLAYER_RESPONSE = make_player_response(like_count="1500", author="Rick Astley")

FULL_PAGE = f"""
<html><head><title>Never Gonna Give You Up - YouTube</title>
<script>ytcfg.set({{"INNERTUBE_CONTEXT_CLIENT_NAME": 1}}); ytcfg.set({{"likeCount": "42"}});</script>
</head><body>
<script>var ytInitialPlayerResponse = {json.dumps(PLAYER_RESPONSE)};</script>
<script>var ytInitialData = {json.dumps(INITIAL_DATA)};</script>
<div aria-label="1,234 likes">1.2K</div>
</body></html>
"""

EMPTY_PAGE = "<html><head></head><body></body></html>"

PAGE_WITH_MALFORMED_JSON = """
<html><head></head><body>
<script>var ytInitialData = {invalid json here, missing quotes};</script>
</body></html>
"""


class TestFromHtml:
    def test_extracts_all_blobs(self) -> None:
        page = PageSnapshot.from_html(FULL_PAGE)

        assert page.initial_data == INITIAL_DATA
        assert page.player_response == PLAYER_RESPONSE
        assert page.config == {
            "data_": {"INNERTUBE_CONTEXT_CLIENT_NAME": 1, "likeCount": "42"}
        }

    def test_title_and_dom(self) -> None:
        page = PageSnapshot.from_html(FULL_PAGE)

        assert page.title == "Never Gonna Give You Up - YouTube"
        element = page.document.find(attrs={"aria-label": "1,234 likes"})
        assert element is not None
        assert element.get_text() == "1.2K"

    @pytest.mark.parametrize(
        "assignment",
        [
            'var ytInitialData = {"a": 1};',
            'ytInitialData = {"a": 1};',
            'window["ytInitialData"] = {"a": 1};',
            'window.ytInitialData={"a": 1};',
        ],
    )
    def test_assignment_forms(self, assignment: str) -> None:
        page = PageSnapshot.from_html(f"<script>{assignment}</script>")
        assert page.initial_data == {"a": 1}

    def test_player_response_not_mistaken_for_initial_data(self) -> None:
        html = '<script>var ytInitialPlayerResponse = {"videoDetails": {}};</script>'
        page = PageSnapshot.from_html(html)

        assert page.initial_data is None
        assert page.player_response == {"videoDetails": {}}

    def test_empty_page(self) -> None:
        page = PageSnapshot.from_html(EMPTY_PAGE)

        assert page.title == ""
        assert page.initial_data is None
        assert page.config is None
        assert page.player_response is None

    def test_malformed_json_leaves_blob_absent(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            page = PageSnapshot.from_html(PAGE_WITH_MALFORMED_JSON)

        assert page.initial_data is None
        assert "Malformed ytInitialData JSON" in caplog.text

    def test_deeply_nested_json_leaves_blob_absent(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        nested = '{"a":' * 5000 + "1" + "}" * 5000
        html = f"<script>var ytInitialData = {nested};</script>"

        with caplog.at_level(logging.WARNING):
            page = PageSnapshot.from_html(html)

        assert page.initial_data is None
        assert "Malformed ytInitialData JSON" in caplog.text

    def test_snapshot_is_frozen(self) -> None:
        page = PageSnapshot.empty()
        with pytest.raises(AttributeError):
            page.title = "changed"  # type: ignore[misc]


class TestExtractJsonObject:
    def test_handles_braces_inside_strings(self) -> None:
        html = 'x = {"a": "}{", "b": {"c": "\\"}"}}; trailing'
        start = html.index("{")
        assert json.loads(_extract_json_object(html, start) or "") == {
            "a": "}{",
            "b": {"c": '"}'},
        }

    def test_requires_opening_brace(self) -> None:
        assert _extract_json_object("abc", 0) is None

    def test_unbalanced(self) -> None:
        assert _extract_json_object('{"a": {"b": 1}', 0) is None
