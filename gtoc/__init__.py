"""
gtoc: linked table of contents generator for Markdown files.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    gtoc README.md
    gtoc -d -s "    " docs/guide.md

Library Usage:
    from gtoc import TocBuilder, TocConfig

    with open("README.md", encoding="UTF-8") as handle:
        toc_text = TocBuilder(handle, TocConfig(toc_heading=True)).build()
"""

from .canonical import canonical_anchor, canonical_heading
from .config import ConfigError, TocConfig
from .exceptions import MalformedHeadingError, NoHeadingsFoundError, TocError
from .generator import TocBuilder, build_toc, generate_toc_entries
from .models import FenceState, Heading
from .parser import iter_headings

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "TocBuilder",
    "build_toc",
    "generate_toc_entries",
    "iter_headings",
    "canonical_anchor",
    "canonical_heading",
    # Data models
    "TocConfig",
    "FenceState",
    "Heading",
    # Exceptions
    "ConfigError",
    "MalformedHeadingError",
    "NoHeadingsFoundError",
    "TocError",
    # Version
    "__version__",
]
