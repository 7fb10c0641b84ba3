"""Markdown line scanning: fence tracking and heading detection."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from .config import TocConfig, validate_config
from .constants import FENCE_MARKER, HEADING_MARKER
from .exceptions import MalformedHeadingError
from .models import FenceState, Heading


def strip_line_ending(line: str) -> str:
    """Drop a trailing ``\\n`` or ``\\r\\n`` from a line.

    Examples:
        strip_line_ending("# Title\\r\\n")  # "# Title"
    """
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def is_fence_marker(line: str) -> bool:
    """Return True when `line` opens or closes a fenced code block.

    Only the three-backtick prefix matters; the info string, fence length and
    indentation of the opening fence are not tracked.
    """
    return line.startswith(FENCE_MARKER)


def toggle_fence(state: FenceState) -> FenceState:
    if state is FenceState.NORMAL:
        return FenceState.INSIDE_FENCE
    return FenceState.NORMAL


def heading_level(line: str, toc_heading: bool = False) -> int | None:
    """Compute the nesting depth of a heading line.

    The first ``#`` maps to level 0 and each further ``#`` adds one. When
    `toc_heading` is set every level is shifted by one to leave room for the
    synthetic TOC entry.

    Args:
        line: Line without its line ending.
        toc_heading: Whether a synthetic top heading is emitted.

    Returns:
        int | None: The level, or None when the line is not a heading.

    Examples:
        heading_level("## Usage")  # 1
        heading_level("## Usage", toc_heading=True)  # 2
        heading_level("Usage")  # None
    """
    if not line.startswith(HEADING_MARKER):
        return None

    level = len(line) - len(line.lstrip(HEADING_MARKER)) - 1
    if toc_heading:
        level += 1
    return level


def heading_text(line: str) -> str | None:
    """Return the text after the first space of a heading line.

    Returns None when the line has no space at all, which leaves nothing to
    extract.

    Examples:
        heading_text("## Getting started")  # "Getting started"
        heading_text("##NoSpace")  # None
    """
    _, separator, text = line.partition(" ")
    if not separator:
        return None
    return text


def detect_heading(
    line: str,
    line_number: int,
    config: TocConfig,
    warn: Callable[[str], None] | None = None,
) -> Heading | None:
    """Classify a line outside code fences.

    Args:
        line: Line without its line ending.
        line_number: One-based index of the line.
        config: Configuration providing the level shift and malformed-line policy.
        warn: Optional callback receiving a message for each skipped malformed line.

    Returns:
        Heading | None: The heading, or None for ordinary and skipped lines.

    Raises:
        MalformedHeadingError: If the line has no heading text and
            `config.malformed_headings` is ``"error"``.
    """
    level = heading_level(line, config.toc_heading)
    if level is None:
        return None

    text = heading_text(line)
    if text is None:
        error = MalformedHeadingError(line_number, line)
        if config.malformed_headings == "error":
            raise error
        if warn is not None:
            warn(f"Warning: {error} (skipped)")
        return None

    return Heading(level=level, text=text, line_number=line_number)


def iter_headings(
    lines: Iterable[str],
    config: TocConfig | None = None,
    warn: Callable[[str], None] | None = None,
) -> Iterator[Heading]:
    """Yield the headings of a document in order, skipping fenced code.

    Every line starting with three backticks toggles the fence state. An
    unterminated fence hides all headings that follow it.

    Args:
        lines: Document lines, with or without line endings.
        config: Configuration controlling level shift and malformed lines.
            Defaults to a new `TocConfig` when omitted.
        warn: Optional callback for non-fatal diagnostics.

    Yields:
        Heading: Each heading found outside code fences.

    Raises:
        ConfigError: If the configuration fails validation.
        MalformedHeadingError: If a malformed heading is found and the policy
            is ``"error"``.

    Examples:
        list(iter_headings(["# Title", "```", "# code", "```"]))
    """
    config = config or TocConfig()
    validate_config(config)

    state = FenceState.NORMAL
    for line_number, raw_line in enumerate(lines, start=1):
        line = strip_line_ending(raw_line)

        if is_fence_marker(line):
            state = toggle_fence(state)
            continue

        if state is FenceState.INSIDE_FENCE:
            continue

        heading = detect_heading(line, line_number, config, warn)
        if heading is not None:
            yield heading
