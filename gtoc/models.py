"""Data models for gtoc."""

from dataclasses import dataclass
from enum import Enum, auto


class FenceState(Enum):
    """Scanner states for fenced code blocks.

    Attributes:
        NORMAL: Default state; lines may be headings.
        INSIDE_FENCE: Between two fence markers; lines are ignored.
    """

    NORMAL = auto()
    INSIDE_FENCE = auto()


@dataclass(frozen=True)
class Heading:
    """A heading found while scanning a document.

    Attributes:
        level: Zero-based nesting depth, already shifted when a synthetic
            TOC heading is emitted.
        text: Raw heading text following the first space of the line.
        line_number: One-based line index in the source document.
    """

    level: int
    text: str
    line_number: int = 0
