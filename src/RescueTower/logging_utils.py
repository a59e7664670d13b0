# ============================================================================
# RescueTower - Logging Utilities
#
# Purpose: Configure the RescueTower package logger and hand out module loggers
# Inputs: Log level, format string (LoggingConfig values)
# Outputs: Configured logger instances
# Dependencies: logging (stdlib), errors
# Usage: logger = get_logger(__name__)
#
# Changelog:
#   2026-03-02: Initial logging setup
#   2026-03-12: Configure the package logger instead of the root logger; one
#               handler reused across calls, unknown levels rejected
# ============================================================================

import logging
import sys
from typing import IO, Optional

from RescueTower.errors import ConfigurationError

PACKAGE_LOGGER = "RescueTower"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_handler: Optional[logging.StreamHandler] = None


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """
    Configure logging for the RescueTower package.

    Log records from every module go through the "RescueTower" logger. The
    package logger carries at most one RescueTower handler; later calls (a CLI
    command run twice in one process, an embedding application changing its
    mind) replace that handler instead of stacking another one. The root
    logger is left alone.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        format_string: Optional custom format string
        stream: Output stream (stderr when omitted)

    Returns:
        The package logger

    Raises:
        ConfigurationError: If the level name is not a logging level
    """
    global _handler

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ConfigurationError(f"Unknown log level: {level}")

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(numeric_level)

    # Swap rather than re-point the handler: the previous stream may be closed
    if _handler is not None:
        package_logger.removeHandler(_handler)
    _handler = logging.StreamHandler(stream or sys.stderr)
    _handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    package_logger.addHandler(_handler)

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Module name (typically __name__, which already sits under the
            package logger)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
