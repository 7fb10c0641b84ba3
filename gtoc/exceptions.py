"""Package-specific exception types."""

from __future__ import annotations


class TocError(ValueError):
    """Base class for table-of-contents build errors."""


class NoHeadingsFoundError(TocError):
    """Raised when a full pass over a document yields no heading line.

    Headings inside fenced code blocks do not count.
    """

    def __init__(self):
        super().__init__("failed to detect heading line from given markdown")


class MalformedHeadingError(TocError):
    """Raised when a line starts with ``#`` but has no space before its text.

    Args:
        line_number: One-based index of the offending line.
        line: The offending line, without its line ending.
    """

    def __init__(self, line_number: int, line: str):
        self.line_number = line_number
        self.line = line
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return (
            f"Line {self.line_number} looks like a heading but has no text "
            f"after its `#` markers: {self.line!r}"
        )
