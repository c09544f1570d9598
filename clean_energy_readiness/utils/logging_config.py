"""Centralized logging configuration."""

import logging
import os
import sys
from pythonjsonlogger.json import JsonFormatter
from typing import Optional

PACKAGE_LOGGER = 'clean_energy_readiness'

def setup_logging(
    level: str = None,
    format_type: str = 'json',
    log_file: Optional[str] = None
) -> logging.Logger:
    """Setup centralized logging configuration."""

    # Determine log level
    level = level or os.getenv('LOG_LEVEL', 'INFO')
    log_level = getattr(logging, level.upper())

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(log_level)

    # Clear existing handlers
    logger.handlers.clear()

    if log_file:
        handler = logging.FileHandler(log_file)
    else:
        handler = logging.StreamHandler(sys.stderr)

    if format_type == 'json':
        formatter = JsonFormatter(
            '%(asctime)s %(name)s %(levelname)s %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
