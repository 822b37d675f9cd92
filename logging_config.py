# logging_config.py v1.0
"""
Logging setup for GASM.

Library modules log through children of the "gasm" logger and never
attach handlers; the command line program calls setup_logging once.
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

# Log format constants
DETAILED_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(filename)s:%(lineno)d | %(message)s"
SIMPLE_FORMAT = "%(levelname)s: %(message)s"

DEFAULT_LOG_LEVEL = logging.WARNING
DEFAULT_MAX_BYTES = 1024 * 1024  # 1 MB
DEFAULT_BACKUP_COUNT = 3

ROOT_LOGGER_NAME = "gasm"


def setup_logging(
    log_level: int = DEFAULT_LOG_LEVEL,
    console_output: bool = True,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """Configures the "gasm" logger and returns it.

    Args:
        log_level: Logging level (e.g., logging.DEBUG).
        console_output: Whether to log to stderr.
        log_file: Optional path of a rotating log file.
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(log_level)

    # Calling setup twice must not duplicate output or leak open log files
    for handler in list(root_logger.handlers):
        handler.close()
        root_logger.removeHandler(handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(logging.Formatter(SIMPLE_FORMAT))
        root_logger.addHandler(console_handler)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=DEFAULT_MAX_BYTES,
            backupCount=DEFAULT_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(DETAILED_FORMAT))
        root_logger.addHandler(file_handler)

    return root_logger


def get_logger(name: str = "") -> logging.Logger:
    """Returns the "gasm" logger or one of its children."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}" if name else ROOT_LOGGER_NAME)

# logging_config.py v1.0
