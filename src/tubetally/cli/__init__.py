"""
CLI interface module for tubetally.

Provides a Typer-based command-line interface for analyzing saved video
pages and merging stored channel aggregates.
"""

from __future__ import annotations

__all__: list[str] = []
