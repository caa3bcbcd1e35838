"""Logging setup utilities for wifimatrix.

Configures the "wifimatrix" package logger from LoggingConfig. Setup is
idempotent: existing handlers are closed and replaced, so the CLI can
configure a fallback logger for config errors and reconfigure later.
The level is one of the canonical names LoggingConfig accepts, the same
value uvicorn receives.
"""

from __future__ import annotations

import logging
import sys

from wifimatrix.config.settings import LoggingConfig


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Configure logging for the wifimatrix application.

    Sets up the package logger with the specified level, format, and
    optional file handler. Calling it again replaces the handlers
    instead of stacking duplicates.

    Args:
        config: Logging configuration. If None, uses defaults
                (INFO level, stderr output).
    """
    if config is None:
        config = LoggingConfig()

    root_logger = logging.getLogger("wifimatrix")
    root_logger.setLevel(config.level)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.format)

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # File handler (optional)
    if config.file:
        file_handler = logging.FileHandler(config.file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.debug("Logging initialized at %s level", config.level)
