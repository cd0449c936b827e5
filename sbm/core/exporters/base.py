"""
Base classes for SBM document exporters.

This module provides the abstract base class and common utilities
for all document export formats.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import logging

from ..data_models import Document
from ..sbm_parser import FIELD_SEPARATOR


@dataclass
class ExportResult:
    """
    Result of an export operation.

    Attributes:
        path: Path to the exported file
        count: Number of bookmarks exported
        format_name: Name of the export format used
        exported_at: Timestamp of the export
        additional_info: Any format-specific additional information
        warnings: List of non-fatal warnings during export
    """

    path: Path
    count: int
    format_name: str
    exported_at: datetime = field(default_factory=datetime.now)
    additional_info: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        return (
            f"ExportResult(format={self.format_name}, "
            f"count={self.count}, path={self.path})"
        )


class ExportError(Exception):
    """
    Exception raised when export fails.

    Attributes:
        message: Error description
        format_name: Name of the export format
        path: Target path if available
        original_error: Underlying exception if any
    """

    def __init__(
        self,
        message: str,
        format_name: Optional[str] = None,
        path: Optional[Path] = None,
        original_error: Optional[Exception] = None
    ):
        self.message = message
        self.format_name = format_name
        self.path = path
        self.original_error = original_error
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = []
        if self.format_name:
            parts.append(f"[{self.format_name}]")
        parts.append(self.message)
        if self.path:
            parts.append(f"(path: {self.path})")
        if self.original_error:
            parts.append(f"Caused by: {type(self.original_error).__name__}: {self.original_error}")
        return " ".join(parts)


class DocumentExporter(ABC):
    """
    Abstract base class for document exporters.

    Subclasses implement render() and define format_name and
    file_extension; export() writes the rendered text to disk.

    Example:
        >>> exporter = SBMExporter()
        >>> result = exporter.export(document, Path("bookmarks.sbm"))
        >>> print(f"Exported {result.count} bookmarks to {result.path}")
    """

    def __init__(self):
        """Initialize the exporter."""
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    def render(self, document: Document) -> str:
        """
        Render a document to text in this exporter's format.

        Args:
            document: Document to render

        Returns:
            Rendered text
        """
        pass

    @property
    @abstractmethod
    def format_name(self) -> str:
        """
        Human-readable name of the export format.

        Returns:
            Format name string (e.g., "SBM", "JSON")
        """
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """
        Default file extension for this format.

        Returns:
            Extension string without leading dot (e.g., "sbm", "json")
        """
        pass

    def export(self, document: Document, output_path: Union[str, Path]) -> ExportResult:
        """
        Export a document to the specified path.

        Args:
            document: Document to export
            output_path: Target file path

        Returns:
            ExportResult with details about the export

        Raises:
            ExportError: If export fails
        """
        warnings = self.validate_document(document)
        path = self.prepare_output_path(output_path)

        try:
            content = self.render(document)
            with open(path, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)
        except Exception as e:
            raise ExportError(
                f"Failed to export {self.format_name}: {e}",
                format_name=self.format_name,
                path=path,
                original_error=e
            )

        self.logger.info(f"Exported {document.bookmark_count} bookmarks to {path}")

        return ExportResult(
            path=path,
            count=document.bookmark_count,
            format_name=self.format_name,
            additional_info={
                "categories": len(document.all_categories()),
                "file_size": path.stat().st_size
            },
            warnings=warnings
        )

    def validate_document(self, document: Document) -> List[str]:
        """
        Check a document for content that will not survive a round trip.

        Args:
            document: Document to check

        Returns:
            List of warning messages for any issues found
        """
        warnings = []

        if document.is_empty:
            warnings.append("Document has no categories or bookmarks")
            return warnings

        piped_names = sum(
            1 for c in document.all_categories() if FIELD_SEPARATOR in c.name
        )
        if piped_names > 0:
            warnings.append(
                f"{piped_names} category name(s) contain '{FIELD_SEPARATOR}'"
            )

        piped_fields = sum(
            1
            for b in document.iter_bookmarks()
            if FIELD_SEPARATOR in b.name or FIELD_SEPARATOR in b.description
        )
        if piped_fields > 0:
            warnings.append(
                f"{piped_fields} bookmark(s) have '{FIELD_SEPARATOR}' in name or description"
            )

        no_url_count = sum(1 for b in document.iter_bookmarks() if not b.url)
        if no_url_count > 0:
            warnings.append(f"{no_url_count} bookmark(s) have no URL")

        return warnings

    def prepare_output_path(self, output_path: Union[str, Path]) -> Path:
        """
        Prepare and validate the output path.

        Args:
            output_path: Target path for export

        Returns:
            Validated Path object

        Raises:
            ExportError: If path is invalid or cannot be created
        """
        path = Path(output_path)

        try:
            # Ensure parent directory exists
            path.parent.mkdir(parents=True, exist_ok=True)
        except PermissionError as e:
            raise ExportError(
                f"Permission denied creating path: {path}",
                format_name=self.format_name,
                path=path,
                original_error=e
            )
        except Exception as e:
            raise ExportError(
                f"Failed to prepare output path: {path}",
                format_name=self.format_name,
                path=path,
                original_error=e
            )

        return path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(format={self.format_name})"
