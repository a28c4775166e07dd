"""
tubetally - Like-count extraction and per-channel aggregation for YouTube pages.

Reads a loaded video page (DOM plus embedded state blobs), locates the like
count and channel identity through layered fallback strategies, and folds
the per-video observations into running per-channel totals.
"""

from __future__ import annotations

__version__ = "0.3.0"
__author__ = "tubetally"
__email__ = "noreply@tubetally.dev"
__license__ = "AGPL-3.0-or-later"

__all__ = ["__version__", "__author__", "__email__", "__license__"]
