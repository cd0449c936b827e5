"""
Line classification for the SBM format.

Every line of an SBM document falls into exactly one of four kinds. The
checks run in a fixed order: header, comment, blank, then bookmark.
"""

from enum import Enum

HEADER_PREFIX = "#"
COMMENT_PREFIX = "//"


class LineKind(Enum):
    """Classification of a single SBM line."""

    CATEGORY_HEADER = "category_header"
    COMMENT = "comment"
    BLANK = "blank"
    BOOKMARK_ENTRY = "bookmark_entry"


def strip_line_terminator(line: str) -> str:
    """Remove one trailing ``\\n`` and then one trailing ``\\r``."""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def classify_line(line: str) -> LineKind:
    """
    Classify one line of SBM text.

    Args:
        line: A single line; a trailing line terminator is ignored

    Returns:
        The LineKind of the line
    """
    line = strip_line_terminator(line)

    # '#' wins even when the header text contains '//' later on
    if line.startswith(HEADER_PREFIX):
        return LineKind.CATEGORY_HEADER
    if line.startswith(COMMENT_PREFIX):
        return LineKind.COMMENT
    if not line.strip():
        return LineKind.BLANK
    return LineKind.BOOKMARK_ENTRY
