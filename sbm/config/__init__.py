"""Configuration models and loading for the SBM toolkit."""

from .pydantic_config import (
    ConfigurationManager,
    EncoderConfig,
    LoggingConfig,
    OutputConfig,
    SBMConfig,
    format_config_error,
)

__all__ = [
    "ConfigurationManager",
    "EncoderConfig",
    "LoggingConfig",
    "OutputConfig",
    "SBMConfig",
    "format_config_error",
]
