"""
Utility modules for the SBM toolkit.

This package contains the exception hierarchy, logging setup and input
validation helpers.
"""

from .error_handler import (
    ConfigurationError,
    InvalidEncodingError,
    SBMError,
    SBMFileError,
    ValidationError,
)
from .logging_setup import setup_logging

__all__ = [
    "ConfigurationError",
    "InvalidEncodingError",
    "SBMError",
    "SBMFileError",
    "ValidationError",
    "setup_logging",
]
