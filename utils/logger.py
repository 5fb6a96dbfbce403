"""
Logging utilities with automatic API key masking for security.
Supports context-aware logging for CLI runs vs library use.
"""

import logging
import re
import os
from typing import Optional
from enum import Enum
from config.settings import settings


class LoggingContext(Enum):
    """Logging context modes for different execution scenarios."""
    STANDALONE = "standalone"          # Library/module use (full logging)
    ORCHESTRATED = "orchestrated"      # Called by run_analysis.py (quiet sub-modules)
    SILENT = "silent"                  # Batch use (minimal output)
    PIPELINE_QUIET = "pipeline_quiet"  # User-facing CLI (clean output)


_env_mode = os.getenv('LOG_MODE', 'standalone').lower()
try:
    _CURRENT_MODE = LoggingContext(_env_mode)
except ValueError:
    _CURRENT_MODE = LoggingContext.STANDALONE

# Loggers that keep INFO level while orchestrated
CONSOLE_LOGGERS = {'run_analysis'}


def set_logging_mode(mode: LoggingContext):
    """Set the global logging mode."""
    global _CURRENT_MODE
    _CURRENT_MODE = mode


def get_logging_mode() -> LoggingContext:
    """Get the current logging mode."""
    return _CURRENT_MODE


class SecureFormatter(logging.Formatter):
    """Custom formatter that masks API keys in log messages."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Long alphanumeric runs are treated as credential tokens
        self.api_key_pattern = re.compile(r'\b[A-Za-z0-9]{16,}\b')

    def format(self, record):
        message = super().format(record)
        return self.api_key_pattern.sub(
            lambda match: settings.mask_api_key(match.group(0)),
            message
        )


def _effective_level(name: str, level: int) -> int:
    current_mode = get_logging_mode()

    if current_mode == LoggingContext.ORCHESTRATED:
        if name not in CONSOLE_LOGGERS:
            return logging.ERROR
    elif current_mode == LoggingContext.SILENT:
        return logging.CRITICAL
    elif current_mode == LoggingContext.PIPELINE_QUIET:
        return logging.ERROR

    return level


def setup_logger(
    name: str,
    level: int = logging.INFO,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Setup a logger with secure formatting and context-aware levels.

    Args:
        name: Logger name
        level: Logging level (default: INFO, may be overridden by mode)
        log_file: Optional file path for file logging

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    effective_level = _effective_level(name, level)
    logger.setLevel(effective_level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    formatter = SecureFormatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(effective_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(effective_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
