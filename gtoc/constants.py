"""Constants used across the gtoc package."""

from __future__ import annotations

import re

from .config import TocConfig

DEFAULT_CONFIG = TocConfig()
DEFAULT_FILENAME = "./README.md"
DEFAULT_MAX_FILE_SIZE = DEFAULT_CONFIG.max_file_size

# Markdown patterns
FENCE_MARKER = "```"
HEADING_MARKER = "#"

# Anchor canonicalization
GROUP_PATTERN = re.compile(r"\(([^(]+?)\)")
SPECIAL_CHARS_PATTERN = re.compile(r"[\[\]()':.?><&\"]")

# Rendering
TOC_HEADING_TEXT = "Table Of Content"
INDENT_PER_LEVEL = 3
LIST_STYLE = "*"
