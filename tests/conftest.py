"""Root configuration for pytest."""

import logging
from collections.abc import Generator

import pytest
import structlog

from sheepit_changelog.config import ChangelogSettings


@pytest.fixture
def raw_block() -> str:
    """Returns a well-formed changeset block with two changes."""
    return (
        "v1.2.0 (2015-03-01)\n"
        "-------------------\n"
        "* Added feature X\n"
        "* Fixed bug Y"
    )


@pytest.fixture
def json_settings() -> ChangelogSettings:
    """Returns settings that render logs as JSON."""
    return ChangelogSettings(log_level="DEBUG", log_format="json")


@pytest.fixture
def reset_structlog() -> Generator[None]:
    """Restores the default structlog configuration after a test."""
    yield
    structlog.reset_defaults()
    logging.getLogger("sheepit_changelog").setLevel(logging.NOTSET)
