"""Model for a versioned, dated group of changes."""

from collections.abc import Iterable, Mapping
from datetime import date as dt_date
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sheepit_changelog import parsing
from sheepit_changelog.logging import changeset_context, get_logger

from .change import Change

logger = get_logger(__name__)


def _today() -> str:
    return dt_date.today().isoformat()


class Changeset(BaseModel):
    """A single changelog entry: a version, a date and its changes."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    version: str = Field(examples=["1.2.3"])
    """The version string, without its leading 'v'."""

    date: str = Field(default_factory=_today, examples=["2015-04-01"])
    """The release date string. Defaults to today in ISO format."""

    changes: tuple[Change, ...] = ()
    """The changes in document order."""

    @field_validator("changes", mode="before")
    @classmethod
    def wrap_change_lines(cls, value: Any) -> Any:
        """Wrap plain strings in Change objects."""
        if isinstance(value, str):
            raise ValueError("changes must be a sequence of strings, not a string")
        if isinstance(value, Iterable):
            return tuple(
                Change.from_text(item) if isinstance(item, str) else item
                for item in value
            )
        return value

    @classmethod
    def create(
        cls: type[Self],
        version: str,
        date: str | None = None,
        change_lines: Iterable[str] = (),
    ) -> Self:
        """Build a changeset from a version, a date and raw change strings.

        The change strings are wrapped as-is; no bullet is stripped.
        """
        if date is None:
            return cls(version=version, changes=tuple(change_lines))
        return cls(version=version, date=date, changes=tuple(change_lines))

    @classmethod
    def decode(cls: type[Self], raw: str) -> Self:
        """Parse one changeset block.

        Raises:
            MalformedHeaderError: The header line is missing or malformed.
            MalformedChangeLineError: A change line is shorter than its bullet.
        """
        lines = parsing.split_block(raw)
        version, date = parsing.parse_header(lines[0] if lines else "")
        with changeset_context(version=version, date=date):
            changes = [
                parsing.strip_change_prefix(line, line_number)
                for line_number, line in enumerate(lines[2:], start=2)
            ]
            logger.debug("changeset_decoded", change_count=len(changes))
        return cls.create(version, date, changes)

    def replace(self, **update: Any) -> Self:
        """Return a new changeset with some fields replaced.

        The result is validated like a freshly constructed one, so plain
        strings given for `changes` are wrapped in Change objects.
        """
        return self.model_validate({**dict(self), **update})

    def model_copy(
        self, *, update: Mapping[str, Any] | None = None, deep: bool = False
    ) -> Self:
        """Copy the changeset, validating any updated fields."""
        if update:
            return self.replace(**update)
        return super().model_copy(deep=deep)

    @property
    def header(self) -> str:
        """The header line of the rendered block."""
        return parsing.render_header(self.version, self.date)

    def encode(self) -> str:
        """Render the changeset as a block of text."""
        header = self.header
        lines = [header, parsing.render_separator(header)]
        lines.extend(parsing.render_change_line(c.render()) for c in self.changes)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.encode()
