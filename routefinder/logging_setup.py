"""Logging configuration for the routefinder package.

Modules create their loggers with ``logging.getLogger(__name__)`` and
never attach handlers themselves. Front-ends call ``configure_logging``
once to install a single stream handler on the package logger.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .config import ObservabilityConfig, get_config

PACKAGE_LOGGER = "routefinder"

_configured = False


def configure_logging(
    config: Optional[ObservabilityConfig] = None,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """Set up the package logger from ``config``.

    Only the first call installs a handler; later calls return the
    already configured logger unchanged.

    Args:
        config: Observability settings (defaults to the app config).
        handler: Custom handler (defaults to a stderr StreamHandler).

    Returns:
        The package logger.
    """
    global _configured

    logger = logging.getLogger(PACKAGE_LOGGER)
    if _configured:
        return logger

    config = config or get_config().observability

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(config.format))

    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(config.level_number)
    # Keep propagating so pytest's caplog still sees records.
    logger.propagate = True

    _configured = True
    return logger


def set_log_level(level: int) -> None:
    """Set the level of the package logger and its handlers."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


def reset_logging() -> None:
    """Undo ``configure_logging`` (mainly for tests)."""
    global _configured
    _configured = False

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
