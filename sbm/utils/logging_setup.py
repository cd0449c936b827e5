"""
Logging configuration for the SBM toolkit.

This module sets up logging based on configuration settings. Console
output goes to stderr so that encoded documents written to stdout are
never interleaved with log lines.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(config=None, log_file: Optional[str] = None) -> None:
    """
    Set up logging configuration.

    Args:
        config: SBMConfig instance; defaults apply when omitted
        log_file: Optional log file path override
    """
    log_level = "WARNING"
    if config is not None:
        log_level = config.logging.level
        if log_file is None:
            log_file = config.logging.log_file

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    handlers = []

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    # File handler
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    # Configure root logger
    logging.basicConfig(
        level=getattr(logging, log_level.upper()), handlers=handlers, force=True
    )

    logger = logging.getLogger(__name__)
    logger.debug(f"Log level: {log_level}")
    if log_file:
        logger.debug(f"Log file: {log_file}")
