"""
Logging and configuration helpers for the parsers.

This module provides:
- Logging setup for the ``xsparse`` package logger
- The ParserConfig settings shared by the request and markup parsers
"""

import logging
from dataclasses import dataclass
from typing import Optional


LOGGER_NAME = "xsparse"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def configure_logging(level=logging.INFO, log_file=None):
    """Configure logging for the parsers.

    Args:
        level: Logging level (default: INFO)
        log_file: Optional path to log file

    Returns:
        Configured logger instance

    Calling this more than once replaces the handlers installed by the
    previous call instead of stacking them.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_xsparse_handler", False):
            logger.removeHandler(handler)
            handler.close()

    # Create formatter
    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    # Add console handler
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler._xsparse_handler = True
    logger.addHandler(console_handler)

    # Add file handler if specified
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        file_handler._xsparse_handler = True
        logger.addHandler(file_handler)

    return logger


# Package logger; handlers are only installed by configure_logging()
default_logger = logging.getLogger(LOGGER_NAME)
default_logger.addHandler(logging.NullHandler())


@dataclass
class ParserConfig:
    """Settings shared by RequestMessageParser and SAXParser."""
    default_encoding: Optional[str] = None
    form_content_type: Optional[str] = None
    max_request_size: int = 10485760  # 10MB limit
    max_headers: int = 100            # Maximum number of headers
    coalesce_text: bool = True

    def __post_init__(self):
        # Set defaults if None
        self.default_encoding = self.default_encoding or "utf-8"
        self.form_content_type = (
            self.form_content_type or "application/x-www-form-urlencoded"
        )
        if self.max_request_size <= 0:
            raise ValueError("max_request_size must be positive")
        if self.max_headers <= 0:
            raise ValueError("max_headers must be positive")


DEFAULT_CONFIG = ParserConfig()
