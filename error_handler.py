"""
Standardized error handling utilities for consistent error management.
"""

import os
from typing import Any, Callable, Optional

from logging_helper import LoggingHelper, LogType

logger = LoggingHelper.get_logger(LogType.MAIN)


class TableViewerError(Exception):
    """Base exception for all table viewer errors."""
    pass


class DataLoadError(TableViewerError):
    """Raw record input could not be read or parsed."""
    pass


class ConfigurationError(TableViewerError):
    """Configuration-related errors."""
    pass


def log_and_suppress(
    exc: Exception,
    message: str,
    *args,
    level: str = "error",
    return_value: Any = None,
    log_traceback: bool = True
) -> Any:
    """
    Log an exception with context and return a default value.

    Args:
        exc: The exception to log
        message: Log message with format placeholders
        *args: Arguments for message formatting
        level: Log level (error, warning, debug)
        return_value: Value to return after logging
        log_traceback: Whether to log full traceback (default True)

    Returns:
        The specified return_value
    """
    log_func = getattr(logger, level, logger.error)
    log_func(f"{message}: {exc}", *args)
    if log_traceback:
        logger.debug("Exception details", exc_info=True)
    return return_value


def validate_environment_variable(
    var_name: str,
    default: Any,
    validator: Optional[Callable[[Any], bool]] = None,
    converter: Optional[Callable[[str], Any]] = None
) -> Any:
    """
    Safely get and validate an environment variable.

    Args:
        var_name: Name of the environment variable
        default: Default value if not set or invalid
        validator: Optional validation function
        converter: Optional conversion function (e.g., int, float)

    Returns:
        The validated and converted environment variable value
    """
    raw_value = os.getenv(var_name)

    if raw_value is None:
        logger.debug(f"Environment variable {var_name} not set, using default: {default}")
        return default

    if converter:
        try:
            value = converter(raw_value)
        except (ValueError, TypeError, ConfigurationError) as exc:
            logger.warning(
                f"Invalid {var_name}='{raw_value}': {exc}. Using default: {default}"
            )
            return default
    else:
        value = raw_value

    if validator and not validator(value):
        logger.warning(
            f"Invalid {var_name}='{value}' failed validation. Using default: {default}"
        )
        return default

    logger.debug(f"Using {var_name}={value}")
    return value
