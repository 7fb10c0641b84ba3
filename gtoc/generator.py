"""Table of contents generation for Markdown documents."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .canonical import canonical_anchor, canonical_heading
from .config import TocConfig
from .constants import INDENT_PER_LEVEL, LIST_STYLE, TOC_HEADING_TEXT
from .exceptions import NoHeadingsFoundError
from .parser import iter_headings


def render_entry(level: int, text: str, indent_string: str = "  ") -> str:
    """Render one TOC line linking `text` to its anchor.

    Args:
        level: Zero-based nesting depth.
        text: Raw heading text.
        indent_string: Unit repeated three times per level.

    Returns:
        str: The entry, terminated by a newline.

    Examples:
        render_entry(1, "Usage")  # "      * [Usage](#usage)\\n"
    """
    indent = indent_string * (level * INDENT_PER_LEVEL)
    return f"{indent}{LIST_STYLE} [{canonical_heading(text)}](#{canonical_anchor(text)})\n"


def generate_toc_entries(
    lines: Iterable[str],
    config: TocConfig | None = None,
    warn: Callable[[str], None] | None = None,
) -> list[str]:
    """Render table-of-contents lines for a document.

    Args:
        lines: Document lines, with or without line endings.
        config: Configuration for the synthetic heading, indentation and
            malformed-line handling. Defaults to a new `TocConfig` when omitted.
        warn: Optional callback for non-fatal diagnostics.

    Returns:
        list[str]: Lines that compose the TOC, each ending with a newline.

    Raises:
        ConfigError: If the configuration fails validation.
        MalformedHeadingError: If a malformed heading is found and the policy
            is ``"error"``.
        NoHeadingsFoundError: If no heading exists outside code fences. The
            synthetic TOC heading alone does not count.

    Examples:
        generate_toc_entries(["# Title", "## Details"])
        generate_toc_entries(["# Title"], TocConfig(toc_heading=True))
    """
    config = config or TocConfig()

    toc = []
    if config.toc_heading:
        toc.append(render_entry(0, TOC_HEADING_TEXT, config.indent_string))

    headings = [
        render_entry(heading.level, heading.text, config.indent_string)
        for heading in iter_headings(lines, config, warn)
    ]
    if not headings:
        raise NoHeadingsFoundError()

    toc.extend(headings)
    return toc


class TocBuilder:
    """Build a TOC from a line source.

    The builder only holds the source; reading, scanning and rendering all
    happen inside `build`, so one instance may be built repeatedly when the
    source is re-iterable.

    Args:
        source: Iterable of document lines, such as a list or an open file.
        config: Build configuration. Defaults to a new `TocConfig`.
        warn: Optional callback for non-fatal diagnostics.

    Examples:
        with open("README.md", encoding="UTF-8") as handle:
            print(TocBuilder(handle).build(), end="")
    """

    def __init__(
        self,
        source: Iterable[str],
        config: TocConfig | None = None,
        warn: Callable[[str], None] | None = None,
    ):
        self.source = source
        self.config = config or TocConfig()
        self.warn = warn

    def build(self) -> str:
        return "".join(generate_toc_entries(self.source, self.config, self.warn))


def build_toc(lines: Iterable[str], config: TocConfig | None = None) -> str:
    """Return the TOC for `lines` as a single string."""
    return TocBuilder(lines, config).build()
