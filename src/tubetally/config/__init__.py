"""
Configuration management module for tubetally.

Handles application settings, environment variables, and the scan limits
used by the extraction strategies.
"""

from __future__ import annotations

from tubetally.config.settings import Settings, get_settings, settings

__all__: list[str] = ["Settings", "get_settings", "settings"]
