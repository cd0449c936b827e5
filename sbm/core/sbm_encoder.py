"""
Canonical SBM encoder.

Walks a Document and writes one line per category header and one line per
bookmark. Separators are written as `` | `` regardless of the spacing in
the original input (or as a bare ``|`` in compact mode), and no line
carries trailing whitespace.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from .data_models import Bookmark, Category, Document
from .line_classifier import COMMENT_PREFIX, HEADER_PREFIX
from .sbm_parser import FIELD_SEPARATOR, parse

LINE_TERMINATOR = "\n"


@dataclass
class EncoderOptions:
    """
    Output options for the encoder.

    Attributes:
        emit_implicit_header: Write a bare ``#`` header above the
            uncategorized bookmarks instead of leaving them headerless
        compact: Write separators without surrounding spaces
    """

    emit_implicit_header: bool = False
    compact: bool = False

    @property
    def separator(self) -> str:
        if self.compact:
            return FIELD_SEPARATOR
        return f" {FIELD_SEPARATOR} "


class SBMEncoder:
    """
    Encoder producing canonical SBM text.

    Example:
        >>> encoder = SBMEncoder()
        >>> text = encoder.encode(document)
    """

    def __init__(self, options: Optional[EncoderOptions] = None):
        self.options = options or EncoderOptions()
        self.logger = logging.getLogger(__name__)

    def encode(self, document: Document) -> str:
        """
        Encode a document to text.

        Args:
            document: Document to encode

        Returns:
            Text with every line terminated by ``\\n``; "" for an empty document
        """
        lines = self.encode_lines(document)
        self.logger.debug(f"Encoded {document} into {len(lines)} lines")
        return "".join(line + LINE_TERMINATOR for line in lines)

    def encode_lines(self, document: Document) -> List[str]:
        """Encode a document into unterminated lines."""
        lines: List[str] = []

        if document.uncategorized is not None:
            if self.options.emit_implicit_header:
                lines.append(self.encode_header(document.uncategorized))
            lines.extend(self._encode_bookmarks(document.uncategorized))

        for category in document.categories:
            lines.append(self.encode_header(category))
            lines.extend(self._encode_bookmarks(category))

        return lines

    def encode_header(self, category: Category) -> str:
        """
        Encode a category header line.

        Returns:
            ``# name`` or ``# name | icon``; ``#`` alone for an unnamed,
            iconless category
        """
        if self.options.compact:
            line = HEADER_PREFIX + category.name
        elif category.name:
            line = f"{HEADER_PREFIX} {category.name}"
        else:
            line = HEADER_PREFIX

        if category.icon is not None:
            line += self.options.separator + category.icon

        return line.rstrip()

    def encode_bookmark(self, bookmark: Bookmark) -> str:
        """
        Encode a bookmark line as ``name | description | url``.

        A line that would start with ``#`` or ``//`` gets one leading space
        so it reads back as a bookmark rather than a header or comment.
        """
        fields = [bookmark.name, bookmark.description, bookmark.url]
        line = self.options.separator.join(fields).rstrip()
        if line.startswith((HEADER_PREFIX, COMMENT_PREFIX)):
            line = " " + line
        return line

    def _encode_bookmarks(self, category: Category) -> List[str]:
        return [self.encode_bookmark(b) for b in category.bookmarks]


def encode(document: Document, options: Optional[EncoderOptions] = None) -> str:
    """
    Encode a document to canonical SBM text.

    Args:
        document: Document to encode
        options: Output options; defaults to the canonical spaced form

    Returns:
        Encoded text
    """
    return SBMEncoder(options).encode(document)


def normalize(text: str, options: Optional[EncoderOptions] = None) -> str:
    """Parse and re-encode text, returning its canonical form."""
    return encode(parse(text), options)


def is_canonical(text: str, options: Optional[EncoderOptions] = None) -> bool:
    """Check whether text is already in canonical form."""
    return normalize(text, options) == text
