"""Structured logging for changeset decoding.

Events are emitted through structlog. Decoding binds the version and date of
the block being read into the logging context, so a warning about a bad
change line says which changeset it belongs to.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import structlog

from sheepit_changelog.config import ChangelogSettings, get_settings

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

CLIPPED_KEYS = ("line",)


def clip_lines(max_length: int) -> Callable[..., Any]:
    """Create a processor that shortens long changelog lines in events."""

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        """Clip the raw text of logged lines to `max_length` characters."""
        for key in CLIPPED_KEYS:
            value = event_dict.get(key)
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = value[:max_length] + "..."
        return event_dict

    return processor


@contextmanager
def changeset_context(**values: Any) -> Iterator[None]:
    """Bind changeset fields to every event logged inside the block."""
    with structlog.contextvars.bound_contextvars(**values):
        yield


def setup_logging(settings: ChangelogSettings | None = None) -> None:
    """Route changelog events through the stdlib logging module."""
    if settings is None:
        settings = get_settings()

    logging.basicConfig(format="%(message)s", stream=sys.stdout)
    logging.getLogger("sheepit_changelog").setLevel(settings.log_level)

    renderer: Callable[..., Any] = (
        structlog.processors.JSONRenderer()
        if settings.log_format == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            clip_lines(settings.max_logged_line_length),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
