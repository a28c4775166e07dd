"""
Application settings and configuration management.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from tubetally import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = Field(default="tubetally")
    app_version: str = Field(default=__version__)
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # Extraction
    unknown_channel_name: str = Field(default="Unknown Channel", min_length=1)
    max_state_depth: int = Field(default=32, ge=1)
    button_scan_limit: int = Field(default=20, ge=1)
    nearby_scan_limit: int = Field(default=5, ge=1)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "TUBETALLY_",
        "case_sensitive": False,
    }


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()


# Global settings instance
settings = get_settings()
