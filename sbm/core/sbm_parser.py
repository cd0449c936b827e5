"""
SBM document parser module.

This module turns SBM text into a Document. The grammar is total: every
line is classified and every missing field defaults to an empty string, so
parsing a ``str`` never fails. The only error surfaced here is invalid
UTF-8 when starting from bytes.
"""

import codecs
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..utils.error_handler import InvalidEncodingError, SBMFileError
from .data_models import Bookmark, Category, Document
from .line_classifier import HEADER_PREFIX, LineKind, classify_line

FIELD_SEPARATOR = "|"
BYTE_ORDER_MARK = "\ufeff"

logger = logging.getLogger(__name__)


def split_pipe(line: str, maxsplit: int = -1) -> List[str]:
    """
    Split a line on the field separator.

    Args:
        line: Text to split
        maxsplit: Maximum number of splits; -1 splits on every separator

    Returns:
        List of raw (untrimmed) segments
    """
    return line.split(FIELD_SEPARATOR, maxsplit)


def parse_header(text: str) -> Category:
    """
    Parse a category header.

    Args:
        text: Header line, with or without its leading ``#``

    Returns:
        An empty Category with the header's name and optional icon
    """
    if text.startswith(HEADER_PREFIX):
        text = text[len(HEADER_PREFIX):]

    parts = split_pipe(text, 1)
    name = parts[0].strip()
    icon = parts[1].strip() if len(parts) > 1 else None
    return Category(name=name, icon=icon)


def parse_bookmark(line: str) -> Bookmark:
    """
    Parse a bookmark entry line.

    Splitting stops after the second separator, so any further ``|``
    characters stay inside the url field.

    Args:
        line: Bookmark line

    Returns:
        Bookmark with missing trailing fields set to ""
    """
    parts = [part.strip() for part in split_pipe(line, 2)]
    parts.extend([""] * (3 - len(parts)))
    return Bookmark(name=parts[0], description=parts[1], url=parts[2])


def split_lines(text: str) -> List[str]:
    """Split text on ``\\n``, dropping one trailing ``\\r`` from each line."""
    lines = text.split("\n")
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def decode_text(data: bytes) -> str:
    """
    Decode an SBM byte buffer.

    A leading UTF-8 byte order mark is removed.

    Raises:
        InvalidEncodingError: If the buffer is not valid UTF-8
    """
    if data.startswith(codecs.BOM_UTF8):
        data = data[len(codecs.BOM_UTF8):]
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidEncodingError(position=e.start, reason=e.reason) from e


def parse(text: str) -> Document:
    """
    Parse SBM text into a Document.

    A leading byte order mark (U+FEFF) is ignored.

    Args:
        text: Complete document text

    Returns:
        Document with categories and bookmarks in source order
    """
    if text.startswith(BYTE_ORDER_MARK):
        text = text[len(BYTE_ORDER_MARK):]

    document = Document()
    # Bookmarks before the first header collect here
    implicit = Category()
    current = implicit
    skipped = 0

    for line in split_lines(text):
        kind = classify_line(line)

        if kind in (LineKind.BLANK, LineKind.COMMENT):
            skipped += 1
        elif kind is LineKind.CATEGORY_HEADER:
            current = document.add_category(parse_header(line))
        else:
            current.add_bookmark(parse_bookmark(line))

    if implicit.bookmarks:
        document.uncategorized = implicit

    logger.debug(
        f"Parsed {len(document.all_categories())} categories and "
        f"{document.bookmark_count} bookmarks ({skipped} lines skipped)"
    )
    return document


def parse_bytes(data: bytes) -> Document:
    """
    Decode a UTF-8 buffer and parse it.

    Raises:
        InvalidEncodingError: If the buffer is not valid UTF-8
    """
    return parse(decode_text(data))


class SBMParser:
    """
    Parser for SBM bookmark files.

    Wraps the module-level parsing functions with file handling for
    callers that start from a path.
    """

    def __init__(self):
        """Initialize the SBM parser."""
        self.logger = logging.getLogger(__name__)

    def parse(self, text: str) -> Document:
        return parse(text)

    def parse_bytes(self, data: bytes) -> Document:
        return parse_bytes(data)

    def parse_file(self, file_path: Union[str, Path]) -> Document:
        """
        Parse an SBM file.

        Args:
            file_path: Path to the SBM file

        Returns:
            Parsed Document

        Raises:
            SBMFileError: If the file cannot be read
            InvalidEncodingError: If the file is not valid UTF-8
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise SBMFileError(f"File not found: {file_path}")

        try:
            data = file_path.read_bytes()
        except OSError as e:
            self.logger.error(f"Error reading SBM file {file_path}: {str(e)}")
            raise SBMFileError(f"Error reading file: {str(e)}") from e

        try:
            document = parse_bytes(data)
        except InvalidEncodingError as e:
            self.logger.error(f"Invalid encoding in {file_path}: {e}")
            raise

        self.logger.info(
            f"Successfully parsed {document.bookmark_count} bookmarks "
            f"in {len(document.all_categories())} categories from {file_path}"
        )
        return document

    def get_file_info(self, file_path: Union[str, Path]) -> Dict[str, Any]:
        """
        Get information about an SBM file.

        Args:
            file_path: Path to the file

        Returns:
            Dictionary with file information
        """
        file_path = Path(file_path)

        info: Dict[str, Any] = {
            "path": str(file_path),
            "exists": file_path.exists(),
            "size_bytes": 0,
            "valid_encoding": False,
            "category_count": 0,
            "bookmark_count": 0,
            "has_uncategorized": False,
        }

        if not info["exists"]:
            return info

        info["size_bytes"] = file_path.stat().st_size
        document: Optional[Document] = None
        try:
            document = self.parse_file(file_path)
        except (SBMFileError, InvalidEncodingError) as e:
            self.logger.warning(f"Error getting file info for {file_path}: {str(e)}")

        if document is not None:
            info["valid_encoding"] = True
            info["category_count"] = len(document.categories)
            info["bookmark_count"] = document.bookmark_count
            info["has_uncategorized"] = document.uncategorized is not None

        return info
