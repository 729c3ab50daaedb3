"""
Logging configuration for platform identity resolution.

Library modules only create loggers under the ``platform_identity``
namespace; handlers are installed by the command line tool.
"""

import logging
import sys
from typing import Optional

LOGGER_NAME = 'platform_identity'

CONSOLE_FORMAT = '%(levelname)s - %(message)s'
DETAILED_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'


class ColoredFormatter(logging.Formatter):
    """Formatter that wraps the level name in an ANSI color."""

    LEVEL_COLORS = {
        logging.DEBUG: '\033[36m',
        logging.INFO: '\033[32m',
        logging.WARNING: '\033[33m',
        logging.ERROR: '\033[31m',
        logging.CRITICAL: '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record):
        color = self.LEVEL_COLORS.get(record.levelno)
        if color is None:
            return super().format(record)

        # Other handlers format the same record
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None, verbose: bool = False) -> logging.Logger:
    """
    Install console (and optionally file) handlers on the package logger.

    Calling it again replaces the handlers from the previous call.

    Args:
        level: Console level name; unknown names fall back to WARNING
        log_file: Optional file that receives every record down to DEBUG
        verbose: Use the detailed format on the console too

    Returns:
        The package logger
    """
    console_level = getattr(logging, level.upper(), logging.WARNING)

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.DEBUG if log_file else console_level)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(ColoredFormatter(DETAILED_FORMAT if verbose else CONSOLE_FORMAT))
    package_logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(DETAILED_FORMAT))
        package_logger.addHandler(file_handler)

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module of this package, e.g. get_logger('config')."""
    return logging.getLogger(f'{LOGGER_NAME}.{name}')
