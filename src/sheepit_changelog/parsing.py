"""The line grammar shared by changeset decoding and encoding.

A changeset block looks like::

    v1.2.0 (2015-03-01)
    -------------------
    * Added feature X
    * Fixed bug Y

The first line carries the version and date, the second is an underline as
long as the first, and every following line is a change behind a
two-character bullet.
"""

from sheepit_changelog.exceptions import MalformedChangeLineError, MalformedHeaderError
from sheepit_changelog.logging import get_logger

logger = get_logger(__name__)

VERSION_MARKER = "v"
DATE_OPEN = "("
DATE_CLOSE = ")"
SEPARATOR_CHAR = "-"
CHANGE_PREFIX = "* "


def split_block(raw: str) -> list[str]:
    """Split a block into lines, dropping trailing empty lines."""
    lines = raw.split("\n")
    while lines and lines[-1] == "":
        lines.pop()
    return lines


def parse_header(line: str) -> tuple[str, str]:
    """Return the version and date held by a header line.

    Tokens after the date are ignored.
    """
    tokens = line.split()
    if len(tokens) < 2:  # noqa: PLR2004
        logger.warning("changeset_header_malformed", line=line, tokens=len(tokens))
        raise MalformedHeaderError(
            f"Header '{line}' must contain a version and a date", line
        )

    version_token, date_token = tokens[0], tokens[1]
    if not version_token.startswith(VERSION_MARKER):
        logger.warning("changeset_header_malformed", line=line, token=version_token)
        raise MalformedHeaderError(
            f"Version '{version_token}' must start with '{VERSION_MARKER}'", line
        )
    if (
        len(date_token) < 2  # noqa: PLR2004
        or not date_token.startswith(DATE_OPEN)
        or not date_token.endswith(DATE_CLOSE)
    ):
        logger.warning("changeset_header_malformed", line=line, token=date_token)
        raise MalformedHeaderError(
            f"Date '{date_token}' must be wrapped in '{DATE_OPEN}{DATE_CLOSE}'", line
        )

    return version_token[len(VERSION_MARKER) :], date_token[1:-1]


def strip_change_prefix(line: str, line_number: int) -> str:
    """Return the change text behind a line's bullet.

    The bullet's characters are not checked, only its width.
    """
    if len(line) < len(CHANGE_PREFIX):
        logger.warning(
            "changeset_change_line_malformed", line=line, line_number=line_number
        )
        raise MalformedChangeLineError(
            f"Change line {line_number} is shorter than the "
            f"'{CHANGE_PREFIX}' prefix",
            line,
            line_number,
        )
    return line[len(CHANGE_PREFIX) :]


def render_header(version: str, date: str) -> str:
    """Render the header line for a version and date."""
    return f"{VERSION_MARKER}{version} {DATE_OPEN}{date}{DATE_CLOSE}"


def render_separator(header: str) -> str:
    """Render the underline for a header line."""
    return SEPARATOR_CHAR * len(header)


def render_change_line(text: str) -> str:
    """Render one change behind its bullet."""
    return f"{CHANGE_PREFIX}{text}"
