"""
Tolerant parser for abbreviated count text ("1.2K", "3.4M", "500").

Counts on video pages are rendered for humans: abbreviated with a
magnitude suffix, padded with separators, or embedded in a label such as
``"1,234 likes"``. ``parse_count`` turns any of these into an exact integer
and never raises. Anything it cannot read becomes ``0``.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Final

# Case-sensitive magnitude suffixes.
SUFFIX_MULTIPLIERS: Final[dict[str, int]] = {
    "K": 1_000,
    "M": 1_000_000,
    "B": 1_000_000_000,
}

# Leading number of the cleaned text, with the suffix that directly follows it.
_LEADING_NUMBER_RE = re.compile(r"^(?P<number>[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?P<suffix>[KMB])?")


def _clean(text: str) -> str:
    """Drop everything except alphanumerics and dots."""
    return "".join(ch for ch in text if ch.isalnum() or ch == ".")


def parse_count(text: str) -> int:
    """
    Convert an abbreviated count string into a non-negative integer.

    Separators, whitespace, and any other punctuation are removed before
    interpretation. A ``K``, ``M`` or ``B`` directly after the number scales
    it (decimals allowed, rounded half up); without a suffix the integer
    part is taken.

    Parameters
    ----------
    text : str
        Display text such as ``"1.2K"``, ``"3,456"`` or ``"1,234 likes"``.

    Returns
    -------
    int
        The parsed count, or ``0`` when no number can be read.

    Examples
    --------
    >>> parse_count("1.2K")
    1200
    >>> parse_count("3.4M")
    3400000
    >>> parse_count("1,234 likes")
    1234
    >>> parse_count("garbage")
    0
    """
    if not isinstance(text, str):
        return 0

    match = _LEADING_NUMBER_RE.match(_clean(text))
    if match is None:
        return 0

    try:
        number = Decimal(match.group("number"))
    except InvalidOperation:
        return 0
    if not number.is_finite():
        return 0

    suffix = match.group("suffix")
    if suffix is None:
        return int(number)

    scaled = number * SUFFIX_MULTIPLIERS[suffix]
    return int(scaled.quantize(Decimal(1), rounding=ROUND_HALF_UP))
