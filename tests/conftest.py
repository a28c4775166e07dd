"""
Pytest configuration and fixtures for tubetally tests.
"""

from __future__ import annotations

import pytest

from tubetally.config.settings import Settings


@pytest.fixture
def mock_settings() -> Settings:
    """Settings with defaults, independent of the environment."""
    return Settings(
        debug=False,
        log_level="INFO",
        unknown_channel_name="Unknown Channel",
        max_state_depth=32,
        button_scan_limit=20,
        nearby_scan_limit=5,
    )
