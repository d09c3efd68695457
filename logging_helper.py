"""
Unified logging helper for consistent logging across the table viewer.

Usage:
    from logging_helper import LoggingHelper, LogType

    logger = LoggingHelper.get_logger(LogType.MAIN)
    logger.info("Standard logging")

    LoggingHelper.log_error_with_trace("Operation failed", exception)
    LoggingHelper.log_user_action("Sorted column", "price → desc")
"""

import logging
import os
from enum import Enum
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from constants import LOG_BACKUP_COUNT, LOG_MAX_BYTES


class LogType(Enum):
    """Enum for different log types in the application."""
    MAIN = "json_table_viewer"
    USER_ACTION = "json_table_viewer.user_actions"


class LoggingHelper:
    """
    Owns every logger in the application.

    Loggers are configured once on first use; the log directory comes from
    ``LOG_DIR`` unless ``initialize`` is called explicitly first.
    """

    _loggers = {}
    _initialized = False
    _log_dir = Path('logs')

    @classmethod
    def initialize(cls, log_dir: Optional[str] = None):
        """
        Initialize all loggers. Should be called once at application startup.

        Args:
            log_dir: Directory where log files will be stored
        """
        if cls._initialized:
            return

        cls._log_dir = Path(log_dir or os.getenv('LOG_DIR', 'logs'))

        cls._loggers[LogType.MAIN] = cls._setup_main_logger()
        cls._loggers[LogType.USER_ACTION] = cls._setup_user_action_logger()

        cls._initialized = True

    @classmethod
    def get_logger(cls, log_type: LogType = LogType.MAIN) -> logging.Logger:
        """Get a logger instance by type."""
        if not cls._initialized:
            cls.initialize()
        return cls._loggers.get(log_type, cls._loggers[LogType.MAIN])

    @classmethod
    def log_error_with_trace(cls, message: str, exception: Exception,
                             log_type: LogType = LogType.MAIN):
        """
        Log an error with full traceback in a single call.

        Args:
            message: Error message to log
            exception: The exception that occurred
            log_type: Which logger to use
        """
        logger = cls.get_logger(log_type)
        logger.error(f"{message}: {exception}", exc_info=True)

    @classmethod
    def log_user_action(cls, action: str, details: Optional[str] = None):
        """
        Log viewer actions (column activations, reloads) with the USER_ACTION tag.

        Args:
            action: The action performed
            details: Optional additional details
        """
        logger = cls.get_logger(LogType.USER_ACTION)
        message = action
        if details:
            message += f" - {details}"
        logger.info(message)

    @classmethod
    def _setup_main_logger(cls) -> logging.Logger:
        """Configure and return the main application logger."""
        log_level = os.getenv('LOG_LEVEL', 'INFO').upper()

        logger = logging.getLogger(LogType.MAIN.value)
        logger.setLevel(getattr(logging, log_level, logging.INFO))
        logger.handlers = []
        logger.propagate = False

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter('[%(levelname)s] %(message)s'))
        logger.addHandler(console_handler)

        file_format = logging.Formatter('%(asctime)s | %(levelname)s | %(message)s',
                                        datefmt='%Y-%m-%d %H:%M:%S')
        try:
            cls._log_dir.mkdir(parents=True, exist_ok=True)

            file_handler = RotatingFileHandler(
                cls._log_dir / 'json_table_viewer.log',
                maxBytes=LOG_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding='utf-8'
            )
            file_handler.setFormatter(file_format)
            logger.addHandler(file_handler)

            error_handler = RotatingFileHandler(
                cls._log_dir / 'errors.log',
                maxBytes=LOG_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding='utf-8'
            )
            error_handler.setLevel(logging.ERROR)
            error_handler.setFormatter(file_format)
            logger.addHandler(error_handler)

        except OSError as e:
            logger.warning(f"Could not create file handlers: {e}")

        return logger

    @classmethod
    def _setup_user_action_logger(cls) -> logging.Logger:
        """Configure the user action logger."""
        logger = logging.getLogger(LogType.USER_ACTION.value)
        logger.setLevel(logging.INFO)
        logger.handlers = []
        logger.propagate = False

        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter('[USER_ACTION] %(message)s'))
        logger.addHandler(handler)

        return logger


logger = LoggingHelper.get_logger(LogType.MAIN)
user_action_logger = LoggingHelper.get_logger(LogType.USER_ACTION)
