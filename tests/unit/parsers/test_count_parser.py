"""
Tests for the abbreviated count parser.
"""

from __future__ import annotations

import pytest

from tubetally.parsers.count_parser import parse_count


class TestSuffixes:
    """Magnitude suffixes scale the numeric prefix."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("1.2K", 1200),
            ("3.4M", 3400000),
            ("2.5B", 2500000000),
            ("15K", 15000),
            (".5K", 500),
            ("1.0005K", 1001),
        ],
    )
    def test_suffix_multiplies(self, text: str, expected: int) -> None:
        """Test K, M and B multipliers with decimals."""
        assert parse_count(text) == expected

    def test_rounds_to_nearest_integer(self) -> None:
        """Test that fractional results round half up."""
        assert parse_count("1.2345K") == 1235
        assert parse_count("1.2344K") == 1234

    def test_suffix_is_case_sensitive(self) -> None:
        """Test that a lowercase k is not a multiplier."""
        assert parse_count("12k") == 12

    def test_suffix_followed_by_words(self) -> None:
        """Test that a label after the suffix does not break parsing."""
        assert parse_count("1.2K likes") == 1200


class TestPlainNumbers:
    """Text without a suffix parses as a base-10 integer."""

    def test_plain_integer(self) -> None:
        assert parse_count("500") == 500

    def test_thousands_separators_removed(self) -> None:
        """Test that commas and spaces are stripped before parsing."""
        assert parse_count("1,234,567") == 1234567
        assert parse_count(" 1 234 ") == 1234

    def test_label_text(self) -> None:
        """Test an accessibility label like '1,234 likes'."""
        assert parse_count("1,234 likes") == 1234

    def test_decimal_without_suffix_truncates(self) -> None:
        assert parse_count("12.9") == 12


class TestNeverRaises:
    """Unreadable text yields 0 instead of an error."""

    @pytest.mark.parametrize(
        "text",
        ["", "garbage", "...", ",,,", "—", "👍", "K", "likes 12", "​​"],
    )
    def test_unreadable_returns_zero(self, text: str) -> None:
        assert parse_count(text) == 0

    def test_non_string_returns_zero(self) -> None:
        assert parse_count(None) == 0  # type: ignore[arg-type]
        assert parse_count(1200) == 0  # type: ignore[arg-type]
