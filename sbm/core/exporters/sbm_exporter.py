"""
SBM text exporter.

Writes a document back out in canonical SBM form.
"""

from typing import Optional

from .base import DocumentExporter
from ..data_models import Document
from ..sbm_encoder import EncoderOptions, SBMEncoder


class SBMExporter(DocumentExporter):
    """
    Export documents as SBM text.

    Example:
        >>> exporter = SBMExporter(EncoderOptions(emit_implicit_header=True))
        >>> result = exporter.export(document, Path("bookmarks.sbm"))
    """

    def __init__(self, options: Optional[EncoderOptions] = None):
        super().__init__()
        self.encoder = SBMEncoder(options)

    @property
    def format_name(self) -> str:
        return "SBM"

    @property
    def file_extension(self) -> str:
        return "sbm"

    def render(self, document: Document) -> str:
        return self.encoder.encode(document)
