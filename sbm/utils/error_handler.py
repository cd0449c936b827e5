"""
Exception hierarchy for the SBM toolkit.

All custom exceptions raised outside the exporters are defined here.
Import them from sbm.utils.error_handler.
"""

from typing import Optional


class SBMError(Exception):
    """Base exception for all SBM errors."""

    pass


# ============================================================================
# Input Errors
# ============================================================================


class InvalidEncodingError(SBMError):
    """
    Raised when an input buffer is not valid UTF-8.

    Attributes:
        position: Byte offset of the first undecodable byte, if known
        reason: Decoder's description of the problem
    """

    def __init__(
        self,
        message: str = "Input is not valid UTF-8",
        position: Optional[int] = None,
        reason: Optional[str] = None,
    ):
        self.message = message
        self.position = position
        self.reason = reason
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [self.message]
        if self.position is not None:
            parts.append(f"at byte {self.position}")
        if self.reason:
            parts.append(f"({self.reason})")
        return " ".join(parts)


class SBMFileError(SBMError):
    """Raised when an SBM file cannot be read."""

    pass


# ============================================================================
# Validation Errors
# ============================================================================


class ValidationError(SBMError):
    """Command-line and user input validation errors."""

    pass


# ============================================================================
# Configuration Errors
# ============================================================================


class ConfigurationError(SBMError):
    """Configuration-related errors."""

    pass
