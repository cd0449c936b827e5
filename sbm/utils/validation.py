"""
Input validation utilities for the SBM toolkit.

This module provides validation functions for command-line arguments.
"""

import os
from pathlib import Path
from typing import Optional, Union

from .error_handler import ValidationError

STDIO_MARKER = "-"
CONFIG_EXTENSIONS = [".toml", ".json"]


def validate_input_file(file_path: Union[str, Path, None]) -> Optional[Path]:
    """
    Validate that the input file exists and is readable.

    Args:
        file_path: Path to the input file, or "-" for standard input

    Returns:
        Validated Path object, or None for standard input

    Raises:
        ValidationError: If file doesn't exist or isn't readable
    """
    if file_path is None:
        raise ValidationError("Input file is required (use --input/-i)")

    if str(file_path) == STDIO_MARKER:
        return None

    path = Path(file_path)

    if not path.exists():
        raise ValidationError(f"Input file does not exist: {file_path}")

    if not path.is_file():
        raise ValidationError(f"Input path is not a file: {file_path}")

    if not os.access(path, os.R_OK):
        raise ValidationError(f"Input file is not readable: {file_path}")

    return path.absolute()


def validate_output_file(file_path: Union[str, Path, None]) -> Optional[Path]:
    """
    Validate that output file path is writable.

    Args:
        file_path: Path to the output file; None or "-" for standard output

    Returns:
        Validated Path object, or None for standard output

    Raises:
        ValidationError: If path isn't writable or parent can't be created
    """
    if file_path is None or str(file_path) == STDIO_MARKER:
        return None

    path = Path(file_path)

    # Check if parent directory exists
    parent = path.parent
    if not parent.exists():
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ValidationError(f"Cannot create output directory: {parent}: {e}")

    # Check if we can write to the directory
    if not os.access(parent, os.W_OK):
        raise ValidationError(f"Output directory is not writable: {parent}")

    # Check if file exists and is writable
    if path.exists() and not os.access(path, os.W_OK):
        raise ValidationError(f"Output file exists and is not writable: {file_path}")

    if path.is_dir():
        raise ValidationError(f"Output path is a directory: {file_path}")

    return path.absolute()


def validate_config_file(file_path: Union[str, Path, None]) -> Optional[Path]:
    """
    Validate configuration file if provided.

    Args:
        file_path: Path to the config file or None

    Returns:
        Validated Path object or None

    Raises:
        ValidationError: If file doesn't exist or isn't readable
    """
    if file_path is None:
        return None

    path = Path(file_path)

    if not path.exists():
        raise ValidationError(f"Configuration file does not exist: {file_path}")

    if not path.is_file():
        raise ValidationError(f"Configuration path is not a file: {file_path}")

    if not os.access(path, os.R_OK):
        raise ValidationError(f"Configuration file is not readable: {file_path}")

    if path.suffix.lower() not in CONFIG_EXTENSIONS:
        raise ValidationError(
            f"Configuration file must be a .toml or .json file, got: {path.suffix}"
        )

    return path.absolute()


def validate_conflicting_arguments(check: bool, output: Union[str, Path, None]) -> None:
    """
    Validate that conflicting arguments are not used together.

    Args:
        check: Whether --check was requested
        output: Output path argument

    Raises:
        ValidationError: If conflicting arguments are used
    """
    if check and output is not None and str(output) != STDIO_MARKER:
        raise ValidationError("Cannot use --check together with --output")
