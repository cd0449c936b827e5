"""
Document exporters.

This module provides exporters that write a parsed Document to disk as
canonical SBM text or as JSON.
"""

from .base import DocumentExporter, ExportResult, ExportError
from .json_exporter import JSONExporter
from .sbm_exporter import SBMExporter

__all__ = [
    "DocumentExporter",
    "ExportResult",
    "ExportError",
    "JSONExporter",
    "SBMExporter",
]


# Format registry for easy access
EXPORTERS = {
    "sbm": SBMExporter,
    "json": JSONExporter,
}


def get_exporter(format_name: str) -> type:
    """
    Get an exporter class by format name.

    Args:
        format_name: Name of the format (sbm, json)

    Returns:
        Exporter class for the specified format

    Raises:
        ValueError: If format is not supported
    """
    format_lower = format_name.lower()
    if format_lower not in EXPORTERS:
        supported = ", ".join(sorted(EXPORTERS.keys()))
        raise ValueError(
            f"Unsupported export format: {format_name}. "
            f"Supported formats: {supported}"
        )
    return EXPORTERS[format_lower]
