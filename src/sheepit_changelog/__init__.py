"""Parse and render single changeset entries of a project changelog."""

from .config import ChangelogSettings, get_settings, settings
from .exceptions import (
    ChangesetDecodeError,
    MalformedChangeLineError,
    MalformedHeaderError,
)
from .logging import get_logger, setup_logging
from .models import Change, Changeset

__all__ = [
    "Change",
    "ChangelogSettings",
    "Changeset",
    "ChangesetDecodeError",
    "MalformedChangeLineError",
    "MalformedHeaderError",
    "get_logger",
    "get_settings",
    "settings",
    "setup_logging",
]
