"""
SBM bookmark format toolkit.

Parse SBM text into a Document and encode a Document back into canonical
SBM text.
"""

from .core import (
    Bookmark,
    Category,
    Document,
    EncoderOptions,
    encode,
    normalize,
    parse,
    parse_bytes,
)
from .utils.error_handler import InvalidEncodingError, SBMError

__version__ = "1.0.0"

__all__ = [
    "Bookmark",
    "Category",
    "Document",
    "EncoderOptions",
    "encode",
    "normalize",
    "parse",
    "parse_bytes",
    "InvalidEncodingError",
    "SBMError",
]
