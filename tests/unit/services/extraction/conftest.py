"""
Pytest fixtures for page extraction unit tests.
"""

from __future__ import annotations

from typing import Callable

import pytest

from tests.factories.page_factory import snapshot_from_body
from tubetally.services.extraction.page_snapshot import PageSnapshot


@pytest.fixture
def page_from_body() -> Callable[..., PageSnapshot]:
    """Factory fixture building snapshots from HTML body fragments."""
    return snapshot_from_body


@pytest.fixture
def empty_page() -> PageSnapshot:
    """A blank page with no DOM content and no blobs."""
    return PageSnapshot.empty()
