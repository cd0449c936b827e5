"""
Pydantic-based configuration system for the SBM toolkit.

Settings are grouped into encoder, output and logging sections and can be
supplied through a TOML or JSON file, environment variables, or
command-line overrides.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import toml
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..utils.error_handler import ConfigurationError

DEFAULT_CONFIG_NAMES = ["sbm_config.toml", "sbm_config.json"]
LOG_LEVEL_ENV_VAR = "SBM_LOG_LEVEL"


class EncoderConfig(BaseModel):
    """Encoder output settings."""

    emit_implicit_header: bool = Field(
        default=False,
        description="Write a bare '#' header above uncategorized bookmarks",
    )
    compact: bool = Field(
        default=False,
        description="Write '|' separators without surrounding spaces",
    )


class OutputConfig(BaseModel):
    """Output format settings."""

    format: Literal["sbm", "json"] = Field(
        default="sbm",
        description="Output format",
    )
    json_indent: int = Field(
        default=2,
        ge=0,
        le=8,
        description="Indentation for JSON output (0 for a single line)",
    )
    ensure_ascii: bool = Field(
        default=False,
        description="Escape non-ASCII characters in JSON output",
    )


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Log level",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional log file path",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


class SBMConfig(BaseModel):
    """Main configuration model."""

    encoder: EncoderConfig = Field(default_factory=EncoderConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigurationManager:
    """Manages loading and validation of configuration from multiple sources."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to configuration file (TOML or JSON)
        """
        self._config: Optional[SBMConfig] = None
        self._load_configuration(config_path)

    def _get_default_config_paths(self) -> list[Path]:
        """Get list of default configuration file paths to try."""
        return [Path.cwd() / name for name in DEFAULT_CONFIG_NAMES]

    def _load_configuration(self, config_path: Optional[Path] = None) -> None:
        """Load configuration from file or use defaults."""
        config_data: Dict[str, Any] = {}

        # Try to load from specified path or default locations
        if config_path:
            config_data = self._load_config_file(Path(config_path))
        else:
            for path in self._get_default_config_paths():
                if path.exists():
                    config_data = self._load_config_file(path)
                    break

        self._load_log_level_from_env(config_data)

        try:
            self._config = SBMConfig(**config_data)
        except ValidationError as e:
            raise ConfigurationError(format_config_error(e)) from e

    def _load_config_file(self, config_path: Path) -> Dict[str, Any]:
        """Load configuration from TOML or JSON file."""
        if not config_path.exists():
            raise ConfigurationError(
                format_config_error(FileNotFoundError(2, "No such file", str(config_path)))
            )

        suffix = config_path.suffix.lower()
        if suffix not in (".toml", ".json"):
            raise ConfigurationError(
                f"Unsupported configuration file format: {config_path.suffix}"
            )

        try:
            if suffix == ".toml":
                config_data = toml.load(config_path)
            else:
                with open(config_path, "r", encoding="utf-8") as f:
                    config_data = json.load(f)
        except (toml.TomlDecodeError, json.JSONDecodeError, OSError) as e:
            raise ConfigurationError(
                f"Failed to load configuration from {config_path}: {e}"
            ) from e

        if not isinstance(config_data, dict):
            raise ConfigurationError(
                f"Configuration in {config_path} must be a table of settings, "
                f"got {type(config_data).__name__}"
            )
        return config_data

    def _load_log_level_from_env(self, config_data: Dict[str, Any]) -> None:
        """Apply the log level from the environment when the file sets none."""
        level = os.getenv(LOG_LEVEL_ENV_VAR)
        if not level:
            return

        logging_section = config_data.setdefault("logging", {})
        if "level" not in logging_section:
            logging_section["level"] = level

    def update_from_cli_args(self, args: Dict[str, Any]) -> None:
        """Update configuration from command-line arguments."""
        if not self._config:
            raise RuntimeError("Configuration not loaded")

        config_dict = self._config.model_dump()

        if args.get("emit_implicit_header"):
            config_dict["encoder"]["emit_implicit_header"] = True
        if args.get("compact"):
            config_dict["encoder"]["compact"] = True

        if args.get("format"):
            config_dict["output"]["format"] = args["format"]

        if args.get("verbose"):
            config_dict["logging"]["level"] = "DEBUG"
        if args.get("log_file"):
            config_dict["logging"]["log_file"] = args["log_file"]

        try:
            self._config = SBMConfig(**config_dict)
        except ValidationError as e:
            raise ConfigurationError(format_config_error(e)) from e

    @property
    def config(self) -> SBMConfig:
        """Get the current configuration."""
        if not self._config:
            raise RuntimeError("Configuration not loaded")
        return self._config

    @staticmethod
    def create_sample_config(output_path: Path, format: str = "toml") -> None:
        """Create a sample configuration file."""
        sample_config = SBMConfig().model_dump(exclude_none=True)

        if format.lower() == "toml":
            with open(output_path, "w", encoding="utf-8") as f:
                toml.dump(sample_config, f)
        elif format.lower() == "json":
            with open(output_path, "w", encoding="utf-8") as f:
                json.dump(sample_config, f, indent=2)
        else:
            raise ValueError(f"Unsupported format: {format}")


class ConfigurationErrorFormatter:
    """Formats Pydantic validation errors into user-friendly messages."""

    @staticmethod
    def format_validation_error(error: ValidationError) -> str:
        """
        Convert Pydantic ValidationError into a user-friendly error message.

        Args:
            error: Pydantic ValidationError instance

        Returns:
            Formatted error message
        """
        error_messages = []

        for error_detail in error.errors():
            location = ConfigurationErrorFormatter._format_error_location(
                error_detail["loc"]
            )
            error_messages.append(
                ConfigurationErrorFormatter._format_by_error_type(
                    location,
                    error_detail["type"],
                    error_detail,
                    error_detail.get("input", "N/A"),
                )
            )

        header = "Configuration Validation Failed:\n"
        separator = "\n" + "-" * 60 + "\n"
        footer = (
            "\n\nTips:\n"
            "• Check the configuration file format (TOML or JSON)\n"
            "• Valid sections are [encoder], [output] and [logging]"
        )

        return header + separator + "\n".join(error_messages) + footer

    @staticmethod
    def _format_error_location(location: tuple) -> str:
        """Format the error location path."""
        if not location:
            return "Configuration"

        path_parts = []
        for part in location:
            if isinstance(part, str):
                path_parts.append(part)
            else:
                path_parts.append(f"[{part}]")

        return " → ".join(path_parts)

    @staticmethod
    def _format_by_error_type(
        location: str, error_type: str, error_detail: dict, input_value
    ) -> str:
        """Format error message based on Pydantic error type."""

        if error_type == "missing":
            return f"❌ {location}: Required field is missing"

        elif error_type in [
            "greater_than_equal",
            "less_than_equal",
            "greater_than",
            "less_than",
        ]:
            ctx = error_detail.get("ctx", {})
            limit = next(iter(ctx.values()), "limit")
            operator = {
                "greater_than_equal": "≥",
                "less_than_equal": "≤",
                "greater_than": ">",
                "less_than": "<",
            }.get(error_type, "?")
            return (
                f"❌ {location}: Value must be {operator} {limit} (got: {input_value})"
            )

        elif error_type == "literal_error":
            expected = error_detail.get("ctx", {}).get("expected", "valid option")
            return f"❌ {location}: Must be one of {expected} (got: {input_value})"

        else:
            msg = error_detail.get("msg", "Invalid configuration value")
            return f"❌ {location}: {msg} (got: {input_value})"


def format_config_error(error: Exception) -> str:
    """
    Format any configuration-related error into a user-friendly message.

    Args:
        error: Exception that occurred during configuration

    Returns:
        Formatted error message
    """
    if isinstance(error, ValidationError):
        return ConfigurationErrorFormatter.format_validation_error(error)

    elif isinstance(error, FileNotFoundError):
        return (
            f"Configuration File Not Found:\n"
            f"❌ Could not find configuration file: {error.filename}\n\n"
            f"Solutions:\n"
            f"• Omit --config to use the default configuration\n"
            f"• Check the file path is correct and accessible"
        )

    else:
        return f"Unexpected Configuration Error:\n❌ {str(error)}"
