"""
Core SBM modules.

This package contains the data model, the line classifier, the parser and
the canonical encoder, plus file exporters built on top of them.
"""

from .data_models import Bookmark, Category, Document
from .line_classifier import LineKind, classify_line
from .sbm_encoder import EncoderOptions, SBMEncoder, encode, is_canonical, normalize
from .sbm_parser import SBMParser, parse, parse_bookmark, parse_bytes, parse_header

__all__ = [
    'Bookmark',
    'Category',
    'Document',
    'LineKind',
    'classify_line',
    'EncoderOptions',
    'SBMEncoder',
    'encode',
    'is_canonical',
    'normalize',
    'SBMParser',
    'parse',
    'parse_bookmark',
    'parse_bytes',
    'parse_header',
]
