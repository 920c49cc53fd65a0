"""Tests for the changeset line grammar."""

import pytest

from sheepit_changelog.exceptions import MalformedChangeLineError, MalformedHeaderError
from sheepit_changelog.parsing import (
    parse_header,
    render_change_line,
    render_header,
    render_separator,
    split_block,
    strip_change_prefix,
)


def test_split_block_drops_trailing_empty_lines() -> None:
    """Tests that a final newline does not add an empty change line."""
    assert split_block("a\nb\n\n") == ["a", "b"]
    assert split_block("a\n\nb") == ["a", "", "b"]
    assert split_block("") == []


def test_parse_header() -> None:
    """Tests that the version and date decorations are stripped."""
    assert parse_header("v1.2.0 (2015-03-01)") == ("1.2.0", "2015-03-01")


def test_parse_header_splits_on_any_whitespace() -> None:
    """Tests that tabs and repeated spaces separate header tokens."""
    assert parse_header("  v1.0\t\t(today)  ") == ("1.0", "today")


def test_parse_header_allows_empty_values() -> None:
    """Tests that bare decorations decode to empty strings."""
    assert parse_header("v ()") == ("", "")


def test_parse_header_single_token() -> None:
    """Tests that a header without a date is rejected."""
    with pytest.raises(MalformedHeaderError, match="must contain a version"):
        parse_header("malformed")


def test_parse_header_missing_version_marker() -> None:
    """Tests that a version token without a 'v' is rejected."""
    with pytest.raises(MalformedHeaderError, match="must start with 'v'"):
        parse_header("1.0 (2015-01-01)")


@pytest.mark.parametrize("date_token", ["2015-01-01", "(2015-01-01", "2015)", ")"])
def test_parse_header_unwrapped_date(date_token: str) -> None:
    """Tests that a date token not wrapped in parentheses is rejected."""
    with pytest.raises(MalformedHeaderError, match="must be wrapped"):
        parse_header(f"v1.0 {date_token}")


def test_strip_change_prefix() -> None:
    """Tests that exactly the bullet width is removed."""
    assert strip_change_prefix("* Added feature X", 2) == "Added feature X"
    assert strip_change_prefix("*  spaced ", 2) == " spaced "
    assert strip_change_prefix("* ", 2) == ""


def test_strip_change_prefix_short_line() -> None:
    """Tests that a line shorter than the bullet is rejected."""
    with pytest.raises(MalformedChangeLineError) as exc_info:
        strip_change_prefix("*", 5)
    assert exc_info.value.line == "*"
    assert exc_info.value.line_number == 5  # noqa: PLR2004


def test_render_lines() -> None:
    """Tests rendering the header, underline and a change line."""
    header = render_header("1.0", "2015-01-01")
    assert header == "v1.0 (2015-01-01)"
    assert render_separator(header) == "-" * 17
    assert render_change_line("Fixed bug Y") == "* Fixed bug Y"
