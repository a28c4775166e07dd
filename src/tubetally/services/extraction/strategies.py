"""
Shared plumbing for the signal locators.

A strategy is a plain function ``(PageSnapshot) -> T | None``. A locator is
a fixed tuple of strategies tried in order until one returns a value. A
strategy that raises counts as "not found" for that strategy only.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from typing import Any, Optional, TypeVar

from tubetally.services.extraction.page_snapshot import PageSnapshot

logger = logging.getLogger(__name__)

T = TypeVar("T")

Strategy = Callable[[PageSnapshot], Optional[T]]

# Display text that is nothing but a count: "1,234", "1.2K", "15M".
BARE_COUNT_RE = re.compile(r"^[\d.,]+[KMB]?$")

# Path shared by both locators into ytInitialData's watch-page renderers.
WATCH_CONTENTS_PATH: tuple[str, ...] = (
    "contents",
    "twoColumnWatchNextResults",
    "results",
    "results",
    "contents",
)


def strategy_name(strategy: Callable[..., Any]) -> str:
    """Readable name for log lines, unwrapping ``functools.partial``."""
    func = getattr(strategy, "func", strategy)
    return getattr(func, "__name__", repr(func))


def run_strategies(
    strategies: Sequence[Strategy[T]],
    page: PageSnapshot,
    signal: str,
) -> T | None:
    """
    Return the first value produced by ``strategies`` against ``page``.

    Parameters
    ----------
    strategies : Sequence[Strategy[T]]
        Strategies in priority order.
    page : PageSnapshot
        The page being analyzed.
    signal : str
        Name of the signal, for logging only.

    Returns
    -------
    T | None
        The first non-None strategy result, or None if every strategy
        missed or raised.
    """
    for strategy in strategies:
        name = strategy_name(strategy)
        try:
            value = strategy(page)
        except Exception as e:
            logger.warning(
                "Strategy %s for %s failed (%s: %s), trying next",
                name,
                signal,
                type(e).__name__,
                e,
            )
            continue

        if value is not None:
            logger.info("Found %s via %s: %r", signal, name, value)
            return value
        logger.debug("Strategy %s found no %s", name, signal)

    logger.debug("No strategy found %s", signal)
    return None


def dig(value: Any, *path: str | int) -> Any:
    """
    Follow ``path`` through nested mappings and lists.

    String steps index mappings, integer steps index lists. Any missing key,
    out-of-range index, or type mismatch yields None.

    Examples
    --------
    >>> dig({"a": [{"b": 1}]}, "a", 0, "b")
    1
    >>> dig({"a": []}, "a", 0, "b") is None
    True
    """
    current = value
    for step in path:
        if isinstance(step, int):
            if not isinstance(current, list) or not -len(current) <= step < len(current):
                return None
            current = current[step]
        else:
            if not isinstance(current, dict):
                return None
            current = current.get(step)
        if current is None:
            return None
    return current


def watch_contents(initial_data: Any) -> list[Any]:
    """Renderer entries of the watch page, or an empty list."""
    contents = dig(initial_data, *WATCH_CONTENTS_PATH)
    return contents if isinstance(contents, list) else []
