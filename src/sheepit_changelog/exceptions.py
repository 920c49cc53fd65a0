"""Errors raised while decoding a changeset block."""


class ChangesetDecodeError(ValueError):
    """Raised when a raw block does not follow the changeset grammar."""

    def __init__(self, message: str, line: str) -> None:
        """Initialize the error with the offending line."""
        super().__init__(message)
        self.line = line


class MalformedHeaderError(ChangesetDecodeError):
    """Raised when the header line lacks a `v<version> (<date>)` pair."""


class MalformedChangeLineError(ChangesetDecodeError):
    """Raised when a change line is shorter than its bullet prefix."""

    def __init__(self, message: str, line: str, line_number: int) -> None:
        """Initialize the error with the offending line and its index."""
        super().__init__(message, line)
        self.line_number = line_number
