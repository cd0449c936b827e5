"""
JSON document exporter.

Exports documents to JSON, keeping the uncategorized slot and the
absent/empty icon distinction intact.
"""

import json
from typing import Optional

from .base import DocumentExporter
from ..data_models import Document


class JSONExporter(DocumentExporter):
    """
    Export documents to JSON format.

    The output mirrors Document.to_dict() and can be loaded back with
    Document.from_dict().

    Example:
        >>> exporter = JSONExporter(indent=2)
        >>> result = exporter.export(document, Path("bookmarks.json"))
    """

    def __init__(
        self,
        indent: Optional[int] = 2,
        ensure_ascii: bool = False,
        sort_keys: bool = False,
        compact: bool = False
    ):
        """
        Initialize the JSON exporter.

        Args:
            indent: Number of spaces for indentation (None for no formatting)
            ensure_ascii: Whether to escape non-ASCII characters
            sort_keys: Whether to sort dictionary keys
            compact: If True, use minimal formatting (overrides indent)
        """
        super().__init__()
        self.indent = None if compact or not indent else indent
        self.ensure_ascii = ensure_ascii
        self.sort_keys = sort_keys
        self.compact = compact

    @property
    def format_name(self) -> str:
        return "JSON"

    @property
    def file_extension(self) -> str:
        return "json"

    def render(self, document: Document) -> str:
        separators = (",", ":") if self.compact else None
        return json.dumps(
            document.to_dict(),
            indent=self.indent,
            ensure_ascii=self.ensure_ascii,
            sort_keys=self.sort_keys,
            separators=separators
        ) + "\n"
