"""Settings used by the changelog package."""

from typing import Literal

from pydantic import BaseModel, Field


class ChangelogSettings(BaseModel):
    """Settings for how the changelog package logs."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    """Level of the `sheepit_changelog` logger."""

    log_format: Literal["console", "json"] = "console"
    """Render events for a terminal or as one JSON object per line."""

    max_logged_line_length: int = Field(default=120, gt=0)
    """Raw changelog lines in events are clipped to this many characters."""


settings = ChangelogSettings()


def get_settings() -> ChangelogSettings:
    """Returns the package settings."""
    return settings
